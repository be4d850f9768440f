"""Tests for the error report data model."""

from datetime import datetime

import pytest
from factories import make_report

from errdex.models.reports import ErrorReport, Filter


class TestErrorReport:
    def test_display_name_uses_first_symptom_line(self):
        report = make_report(program="bash", symptom="Prompt broken\nafter upgrade")
        assert report.display_name == "bash - Prompt broken"

    def test_copy_is_independent(self):
        report = make_report()
        clone = report.copy()
        clone.resources.append("new")
        clone.symptom = "changed"
        assert report.resources == ["libvim", "plugin.vim"]
        assert report.symptom == "Segfault on start"

    def test_to_document(self):
        report = make_report()
        document = report.to_document("99-vim")
        assert document["id"] == "99-vim"
        assert document["date"] == int(datetime(2024, 5, 1, 12).timestamp())
        assert document["resources"] == ["libvim", "plugin.vim"]
        assert set(document) == {
            "id",
            "symptom",
            "date",
            "program",
            "program_version",
            "distro",
            "distro_version",
            "resources",
            "solution",
        }

    def test_to_document_defaults_to_own_id(self):
        assert make_report(id="7-vim").to_document()["id"] == "7-vim"

    def test_from_hit(self):
        report = make_report()
        assert ErrorReport.from_hit(report.to_document()) == report

    def test_from_hit_tolerates_missing_and_mistyped_fields(self):
        hit = {"id": "1", "program": 42, "date": "yesterday", "resources": ["a", 3, None, "b"]}
        report = ErrorReport.from_hit(hit)
        assert report.id == "1"
        assert report.program == ""
        assert report.symptom == ""
        assert report.date == datetime.fromtimestamp(0)
        assert report.resources == ["a", "b"]

    @pytest.mark.parametrize("value", [1e20, -1e20, float("inf"), float("nan")])
    def test_from_hit_out_of_range_date_falls_back_to_epoch(self, value):
        report = ErrorReport.from_hit({"id": "1", "date": value})
        assert report.id == "1"
        assert report.date == datetime.fromtimestamp(0)

    def test_from_hit_non_list_resources(self):
        assert ErrorReport.from_hit({"resources": "a"}).resources == []


class TestFilter:
    def test_empty_filter_has_no_terms(self):
        assert Filter().query_parts() == []

    def test_query_parts_order(self):
        search_filter = Filter(solution="reinstall", q="free", program="vim", distro="Arch")
        assert search_filter.query_parts() == ["free", "vim", "Arch", "reinstall"]
