# SPDX-License-Identifier: MIT
"""Tests for the follower export parser."""

from crosslist.models import UserRecord
from crosslist.parsers import parse_records, parse_usernames


class TestParseRecords:
    """Test parse_records with display names."""

    def test_header_is_discarded(self, sample_export):
        records = parse_records(sample_export)
        assert [r.username for r in records] == ["ana.silva", "bruno_m", "carlos99", "nameless"]

    def test_display_names_are_normalized(self, sample_export):
        records = parse_records(sample_export)
        assert [r.display_name for r in records] == ["Ana", "Bruno", "Carlos", ""]

    def test_first_line_is_header_whatever_it_holds(self):
        text = "1,alice,Alice\n2,bob,Bob"
        assert parse_records(text) == [UserRecord(username="bob", display_name="Bob")]

    def test_short_rows_are_skipped(self):
        text = "h\n1,alice\n2,bob,Bob\nlonely"
        assert parse_records(text) == [UserRecord(username="bob", display_name="Bob")]

    def test_blank_username_is_skipped(self):
        text = "h\n1, ,Ghost\n2,bob,Bob"
        assert [r.username for r in parse_records(text)] == ["bob"]

    def test_username_is_trimmed(self):
        text = "h\n1,  alice  ,Alice"
        assert parse_records(text)[0].username == "alice"

    def test_blank_lines_are_ignored(self):
        text = "\n\nh\n\n1,alice,Alice\n\n"
        assert parse_records(text) == [UserRecord(username="alice", display_name="Alice")]

    def test_crlf_line_endings(self):
        text = "h\r\n1,alice,Alice\r\n2,bob,Bob\r\n"
        assert parse_records(text) == [
            UserRecord(username="alice", display_name="Alice"),
            UserRecord(username="bob", display_name="Bob"),
        ]

    def test_duplicates_are_kept(self):
        text = "h\n1,alice,Alice\n2,alice,Alicia"
        assert len(parse_records(text)) == 2

    def test_extra_columns_are_ignored(self):
        text = "h\n1,alice,Alice Smith,https://instagram.com/alice,Yes"
        assert parse_records(text) == [UserRecord(username="alice", display_name="Alice")]

    def test_empty_and_header_only(self):
        assert parse_records("") == []
        assert parse_records("id,username,full_name") == []


class TestUsernamesOnly:
    """Test the two-column username mode."""

    def test_two_columns_are_enough(self):
        text = "h\n1,alice\n2,bob,Bob"
        records = parse_records(text, with_names=False)
        assert records == [UserRecord(username="alice"), UserRecord(username="bob")]

    def test_display_names_are_empty(self, sample_export):
        assert all(r.display_name == "" for r in parse_records(sample_export, with_names=False))

    def test_parse_usernames(self):
        assert parse_usernames("h\n1,alice\n2,bob\n3,alice") == ["alice", "bob", "alice"]
