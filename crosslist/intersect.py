"""Set intersection of two parsed follower lists, keyed by username."""

from collections.abc import Iterable, Sequence

from crosslist.models import IntersectedRecord, UserRecord


def _by_username(records: Iterable[UserRecord]) -> dict[str, str]:
    # Later rows overwrite the display name but keep the first position
    mapping: dict[str, str] = {}
    for record in records:
        mapping[record.username] = record.display_name
    return mapping


def intersect_records(
    first: Sequence[UserRecord],
    second: Sequence[UserRecord],
) -> list[IntersectedRecord]:
    """Records whose username appears in both sequences.

    Display names come from the first sequence and the output follows the
    first sequence's order. An empty list means no overlap, not an error.
    """
    left = _by_username(first)
    right = _by_username(second)
    return [
        IntersectedRecord(username=username, display_name=display_name)
        for username, display_name in left.items()
        if username in right
    ]


def common_usernames(first: Iterable[str], second: Iterable[str]) -> list[str]:
    """Usernames present in both lists, in first-seen order of the first list."""
    right = set(second)
    return [username for username in dict.fromkeys(first) if username in right]
