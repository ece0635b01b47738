"""
Pipeline runner for one user action.

Parses two exports, intersects them and, when a batcher is configured,
classifies the common display names in a single batch.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from loguru import logger

from crosslist.classification import ClassificationBatcher
from crosslist.export import (
    filter_by_category,
    format_classified,
    format_paired,
    format_plain,
    gender_stats,
    merge_classifications,
)
from crosslist.intersect import intersect_records
from crosslist.models import (
    Category,
    ClassificationResult,
    ClassifiedRecord,
    GenderStats,
    IntersectedRecord,
    PlainExport,
    UserRecord,
)
from crosslist.parsers import parse_records


@dataclass(frozen=True)
class MatchReport:
    """Outcome of one run: the common records and any classification results."""

    records: list[IntersectedRecord]
    results: list[ClassificationResult] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def names(self) -> list[str]:
        return [record.display_name for record in self.records if record.display_name]

    @property
    def plain(self) -> PlainExport:
        return format_plain(self.records)

    @property
    def paired(self) -> str:
        return format_paired(self.records)

    @property
    def stats(self) -> GenderStats:
        return gender_stats(self.records, self.results)

    def classified(self, category: Category = Category.MALE) -> str:
        return format_classified(self.records, self.results, category)

    def classified_records(self, category: Category | None = None) -> list[ClassifiedRecord]:
        merged = merge_classifications(self.records, self.results)
        return merged if category is None else filter_by_category(merged, category)


class ListMatchPipeline:
    """Local runner: parse, intersect and optionally classify."""

    def __init__(self, batcher: ClassificationBatcher | None = None) -> None:
        self._batcher = batcher

    def match_records(
        self,
        first: Sequence[UserRecord],
        second: Sequence[UserRecord],
    ) -> MatchReport:
        records = intersect_records(first, second)
        if records:
            logger.info(f"{len(records)} common users found")
        else:
            logger.warning("No common users found")
        return MatchReport(records=records)

    def match_texts(self, text1: str, text2: str, with_names: bool = True) -> MatchReport:
        first = parse_records(text1, with_names=with_names)
        second = parse_records(text2, with_names=with_names)
        logger.debug(f"Parsed {len(first)} and {len(second)} records")
        return self.match_records(first, second)

    def classify(self, report: MatchReport) -> MatchReport:
        if self._batcher is None:
            raise ValueError("No classification batcher configured")
        results = self._batcher.classify(report.names)
        return replace(report, results=results)

    def run(self, text1: str, text2: str, classify: bool = False) -> MatchReport:
        report = self.match_texts(text1, text2)
        if classify and not report.is_empty:
            report = self.classify(report)
        return report
