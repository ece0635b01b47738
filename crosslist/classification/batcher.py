"""
Batch classification of display names.

The batcher owns everything that does not depend on the transport: query
deduplication, the empty-batch short cut, the failure policy and the repair
of incomplete or duplicated answers.
"""

from collections.abc import Iterable, Sequence

from loguru import logger

from crosslist.classification.interfaces import ClassificationService
from crosslist.classification.parsing import index_by_name
from crosslist.exceptions import ClassificationError
from crosslist.models import ClassificationResult, FailurePolicy


def distinct_names(names: Iterable[str]) -> list[str]:
    """Non-blank names, first occurrence order, duplicates removed."""
    return [name for name in dict.fromkeys(names) if name and name.strip()]


def repair_results(
    query: Sequence[str],
    results: Iterable[ClassificationResult],
) -> list[ClassificationResult]:
    """One result per query name, in query order.

    Matching is exact on the name. Names missing from the answer become
    unknown with zero confidence; names nobody asked about are dropped.
    """
    by_name = index_by_name(results)

    missing = [name for name in query if name not in by_name]
    if missing:
        logger.warning(f"{len(missing)} names missing from classification response")
    extra = set(by_name) - set(query)
    if extra:
        logger.debug(f"Ignoring {len(extra)} unrequested names in classification response")

    return [by_name.get(name) or ClassificationResult.unknown(name) for name in query]


class ClassificationBatcher:
    """Send a whole batch of names to a ClassificationService in one call."""

    def __init__(
        self,
        service: ClassificationService,
        on_failure: FailurePolicy = FailurePolicy.DEGRADE,
    ):
        self._service = service
        self.on_failure = on_failure

    def classify(self, names: Iterable[str]) -> list[ClassificationResult]:
        query = distinct_names(names)
        if not query:
            return []

        logger.info(f"Classifying {len(query)} distinct names")
        try:
            results = self._service.submit(query)
        except ClassificationError as e:
            if self.on_failure == FailurePolicy.PROPAGATE:
                logger.error(f"Classification failed: {e}")
                raise
            logger.warning(f"Classification failed, marking {len(query)} names unknown: {e}")
            return [ClassificationResult.unknown(name) for name in query]

        return repair_results(query, results)

    def classify_one(self, name: str) -> ClassificationResult:
        results = self.classify([name])
        return results[0] if results else ClassificationResult.unknown(name)
