"""
Gender classification of display names through an external AI service.

ClassificationBatcher drives any ClassificationService; the adapters module
provides the SDK, direct-HTTP and backend-proxy transports.
"""

from crosslist.classification.adapters import (
    AnthropicClassifier,
    BackendProxyClassifier,
    DirectHttpClassifier,
)
from crosslist.classification.batcher import ClassificationBatcher, distinct_names, repair_results
from crosslist.classification.factory import (
    ClassifierMode,
    build_batcher,
    build_classification_service,
    default_policy,
)
from crosslist.classification.interfaces import ClassificationService
from crosslist.classification.parsing import (
    coerce_results,
    extract_json_array,
    index_by_name,
    parse_classification_response,
)

__all__ = [
    # Batching
    "ClassificationBatcher",
    "ClassificationService",
    "distinct_names",
    "repair_results",
    # Adapters
    "AnthropicClassifier",
    "BackendProxyClassifier",
    "DirectHttpClassifier",
    "ClassifierMode",
    "build_batcher",
    "build_classification_service",
    "default_policy",
    # Lenient parsing
    "coerce_results",
    "extract_json_array",
    "index_by_name",
    "parse_classification_response",
]
