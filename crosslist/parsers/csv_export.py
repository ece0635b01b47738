"""
Parser for comma-separated follower exports.

Expected shape: a header line (always discarded), then one row per user with
the username in column 1 and the display name in column 2. Splitting is on
the bare comma; quoted fields and embedded commas are not understood.
"""

from loguru import logger

from crosslist.models import UserRecord
from crosslist.normalizers import normalize_display_name

USERNAME_COLUMN = 1
DISPLAY_NAME_COLUMN = 2


def _data_lines(text: str) -> list[str]:
    lines = [line for line in text.split("\n") if line.strip()]
    # First non-blank line is the header, whatever it contains
    return lines[1:]


def parse_records(text: str, with_names: bool = True) -> list[UserRecord]:
    """Parse export text into user records, in source line order.

    Args:
        text: Full contents of one export file
        with_names: Require and read the display name column. When False,
            rows only need a username and display names are left empty.

    Returns:
        List of UserRecord. Duplicate usernames are kept; malformed rows
        (too few columns, blank username) are skipped.
    """
    min_columns = DISPLAY_NAME_COLUMN + 1 if with_names else USERNAME_COLUMN + 1

    records: list[UserRecord] = []
    skipped = 0
    for line in _data_lines(text):
        columns = line.split(",")
        if len(columns) < min_columns:
            skipped += 1
            continue

        username = columns[USERNAME_COLUMN].strip()
        if not username:
            skipped += 1
            continue

        display_name = normalize_display_name(columns[DISPLAY_NAME_COLUMN]) if with_names else ""
        records.append(UserRecord(username=username, display_name=display_name))

    if skipped:
        logger.debug(f"Skipped {skipped} malformed rows")
    return records


def parse_usernames(text: str) -> list[str]:
    """Username-only view of an export, for plain list intersection."""
    return [record.username for record in parse_records(text, with_names=False)]
