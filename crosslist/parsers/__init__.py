"""
Follower export parsers.

Each parser turns the raw text of one uploaded export into a list of
UserRecord, the shape every later stage consumes.
"""

from .csv_export import parse_records, parse_usernames

__all__ = [
    'parse_records',
    'parse_usernames',
]
