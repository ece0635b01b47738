"""Pick a classification adapter and its failure policy."""

from enum import Enum

from crosslist.classification.adapters import (
    AnthropicClassifier,
    BackendProxyClassifier,
    DirectHttpClassifier,
)
from crosslist.classification.batcher import ClassificationBatcher
from crosslist.classification.interfaces import ClassificationService
from crosslist.config import ClassifierSettings
from crosslist.models import FailurePolicy


class ClassifierMode(str, Enum):
    """How the classifier is reached."""

    AMBIENT = "ambient"  # server-side key, anthropic SDK
    DIRECT = "direct"  # user-supplied key, raw HTTP
    PROXY = "proxy"  # through our backend


def default_policy(mode: ClassifierMode) -> FailurePolicy:
    # A user-supplied key has no sane fallback, so its failures must surface
    if mode == ClassifierMode.DIRECT:
        return FailurePolicy.PROPAGATE
    return FailurePolicy.DEGRADE


def build_classification_service(
    mode: ClassifierMode,
    settings: ClassifierSettings,
    api_key: str | None = None,
) -> ClassificationService:
    mode = ClassifierMode(mode)
    if mode == ClassifierMode.DIRECT:
        return DirectHttpClassifier(api_key=api_key or "", settings=settings)
    if mode == ClassifierMode.PROXY:
        return BackendProxyClassifier(settings=settings)
    return AnthropicClassifier(settings=settings)


def build_batcher(
    mode: ClassifierMode,
    settings: ClassifierSettings,
    api_key: str | None = None,
) -> ClassificationBatcher:
    """Batcher for the given mode; settings.on_failure overrides the mode default."""
    mode = ClassifierMode(mode)
    service = build_classification_service(mode, settings, api_key=api_key)
    return ClassificationBatcher(service, on_failure=settings.on_failure or default_policy(mode))
