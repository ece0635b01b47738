# SPDX-License-Identifier: MIT
"""Tests for list intersection."""

from crosslist.intersect import common_usernames, intersect_records
from crosslist.models import IntersectedRecord, UserRecord


def _records(*pairs):
    return [UserRecord(username=u, display_name=n) for u, n in pairs]


class TestIntersectRecords:
    """Test intersect_records."""

    def test_keeps_first_list_order_and_names(self):
        first = _records(("c", "Carl"), ("a", "Ann"), ("b", "Ben"))
        second = _records(("a", "Other"), ("c", "Carlos"), ("z", "Zed"))
        assert intersect_records(first, second) == [
            IntersectedRecord(username="c", display_name="Carl"),
            IntersectedRecord(username="a", display_name="Ann"),
        ]

    def test_no_overlap_is_empty(self):
        assert intersect_records(_records(("a", "A")), _records(("b", "B"))) == []

    def test_empty_inputs(self):
        assert intersect_records([], _records(("a", "A"))) == []
        assert intersect_records(_records(("a", "A")), []) == []

    def test_duplicate_username_appears_once(self):
        """A repeated username keeps its first position and its last display name."""
        first = _records(("a", "Ann"), ("b", "Ben"), ("a", "Anna"))
        second = _records(("a", ""), ("b", ""))
        assert intersect_records(first, second) == [
            IntersectedRecord(username="a", display_name="Anna"),
            IntersectedRecord(username="b", display_name="Ben"),
        ]

    def test_usernames_are_case_sensitive(self):
        assert intersect_records(_records(("Alice", "A")), _records(("alice", "A"))) == []

    def test_result_is_subset_of_both(self, sample_export, other_export):
        from crosslist.parsers import parse_records

        first, second = parse_records(sample_export), parse_records(other_export)
        result = {r.username for r in intersect_records(first, second)}
        assert result <= {r.username for r in first}
        assert result <= {r.username for r in second}
        assert result == {"bruno_m", "carlos99", "nameless"}


class TestCommonUsernames:
    """Test the username-only intersection."""

    def test_order_and_dedupe(self):
        assert common_usernames(["b", "a", "b", "c"], ["c", "b"]) == ["b", "c"]

    def test_no_overlap(self):
        assert common_usernames(["a"], ["b"]) == []
