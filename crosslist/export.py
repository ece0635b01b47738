"""
Export formats for intersected and classified lists.

Everything here is a pure function of its inputs: no network, no files. The
CLI and the API decide where the strings end up.
"""

from collections.abc import Iterable, Sequence

from crosslist.classification.parsing import index_by_name
from crosslist.models import (
    Category,
    ClassificationResult,
    ClassifiedRecord,
    GenderStats,
    IntersectedRecord,
    PlainExport,
)

PROFILE_URL = "https://www.instagram.com/{username}"
PROFILES_CSV_HEADER = "ID,User Name,Full Name,Profile URL,Verified"


def format_plain(records: Sequence[IntersectedRecord]) -> PlainExport:
    """Comma-joined usernames and display names; position i matches in both."""
    return PlainExport(
        usernames=",".join(record.username for record in records),
        display_names=",".join(record.display_name for record in records),
    )


def format_paired(records: Iterable[IntersectedRecord | ClassifiedRecord]) -> str:
    """One "username:displayName" line per record."""
    return "\n".join(f"{record.username}:{record.display_name}" for record in records)


def merge_classifications(
    records: Sequence[IntersectedRecord],
    results: Iterable[ClassificationResult],
) -> list[ClassifiedRecord]:
    """Attach the result matching each record's display name.

    Records without a display name, or whose name has no result, are unknown
    with zero confidence. Users sharing a display name share its result.
    """
    by_name = index_by_name(results)
    merged: list[ClassifiedRecord] = []
    for record in records:
        result = by_name.get(record.display_name) if record.display_name else None
        merged.append(
            ClassifiedRecord(
                username=record.username,
                display_name=record.display_name,
                category=result.category if result else Category.UNKNOWN,
                confidence=result.confidence if result else 0,
            )
        )
    return merged


def filter_by_category(
    classified: Iterable[ClassifiedRecord],
    category: Category,
) -> list[ClassifiedRecord]:
    category = Category(category)
    return [record for record in classified if record.category == category]


def format_classified(
    records: Sequence[IntersectedRecord],
    results: Iterable[ClassificationResult],
    category: Category = Category.MALE,
) -> str:
    """Paired lines for the records classified as `category`, original order kept."""
    return format_paired(filter_by_category(merge_classifications(records, results), category))


def gender_stats(
    records: Sequence[IntersectedRecord],
    results: Iterable[ClassificationResult],
) -> GenderStats:
    """Counts over the records; per-category counts only cover named records."""
    named = [record for record in merge_classifications(records, results) if record.display_name]
    return GenderStats(
        total=len(records),
        with_names=len(named),
        male=sum(1 for record in named if record.category == Category.MALE),
        female=sum(1 for record in named if record.category == Category.FEMALE),
        unknown=sum(1 for record in named if record.category == Category.UNKNOWN),
    )


def format_profiles_csv(profiles: Iterable) -> str:
    """Scraper export: header plus one row per profile.

    Accepts anything with username, full_name and is_verified attributes.
    Column 1 holds the username and column 2 the quoted full name, so the
    record parser reads this file back.
    """
    rows = [
        f'{index},{profile.username},"{profile.full_name}",'
        f'{PROFILE_URL.format(username=profile.username)},{"Yes" if profile.is_verified else "No"}'
        for index, profile in enumerate(profiles, start=1)
    ]
    return "\n".join([PROFILES_CSV_HEADER, *rows])
