# SPDX-License-Identifier: MIT
"""Tests for ListMatchPipeline."""

import pytest

from crosslist.models import Category, GenderStats
from crosslist.runner import ListMatchPipeline, MatchReport


class TestMatchTexts:
    """Test parse and intersect."""

    def test_common_records(self, sample_export, other_export):
        report = ListMatchPipeline().match_texts(sample_export, other_export)
        assert [(r.username, r.display_name) for r in report.records] == [
            ("bruno_m", "Bruno"),
            ("carlos99", "Carlos"),
            ("nameless", ""),
        ]
        assert report.paired == "bruno_m:Bruno\ncarlos99:Carlos\nnameless:"
        assert report.plain.usernames == "bruno_m,carlos99,nameless"

    def test_names_skip_blank(self, sample_export, other_export):
        report = ListMatchPipeline().match_texts(sample_export, other_export)
        assert report.names == ["Bruno", "Carlos"]

    def test_no_overlap(self, sample_export):
        report = ListMatchPipeline().match_texts(sample_export, "h\n1,someone,Else")
        assert report.is_empty

    def test_usernames_only(self):
        report = ListMatchPipeline().match_texts("h\n1,a\n2,b", "h\n1,b\n2,c", with_names=False)
        assert [r.username for r in report.records] == ["b"]


class TestClassify:
    """Test the classification step."""

    def test_requires_batcher(self):
        with pytest.raises(ValueError):
            ListMatchPipeline().classify(MatchReport(records=[]))

    def test_run_with_classification(self, fake_service, fake_batcher, sample_export, other_export):
        report = ListMatchPipeline(batcher=fake_batcher).run(sample_export, other_export, classify=True)

        assert fake_service.calls == [["Bruno", "Carlos"]]
        assert report.classified() == "bruno_m:Bruno\ncarlos99:Carlos"
        assert report.classified(Category.FEMALE) == ""
        assert report.stats == GenderStats(total=3, with_names=2, male=2, female=0, unknown=0)
        assert len(report.classified_records()) == 3
        assert len(report.classified_records(Category.UNKNOWN)) == 1

    def test_empty_intersection_skips_service(self, fake_service, fake_batcher, sample_export):
        report = ListMatchPipeline(batcher=fake_batcher).run(sample_export, "h\n1,x,X", classify=True)
        assert report.is_empty
        assert fake_service.calls == []

    def test_classify_returns_new_report(self, fake_batcher, sample_export, other_export):
        pipeline = ListMatchPipeline(batcher=fake_batcher)
        report = pipeline.match_texts(sample_export, other_export)
        classified = pipeline.classify(report)
        assert report.results == []
        assert len(classified.results) == 2
