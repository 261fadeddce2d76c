"""
Tests for the JSON/HTML report exporters and the flavor catalog loader.
"""

import json

import pytest

from adapters.flavor_catalog import load_flavor_catalog
from adapters.json_exporter import export_report_json
from adapters.report_exporter import export_report_html, render_report_html
from core.domain.errors import InvalidFlavorError
from core.domain.models import LessonOutcome, LessonReport
from core.domain.principle import Principle, Variant
from core.services.lessons import LessonRequest, run_lessons


@pytest.fixture
def report(settings):
    return run_lessons(
        settings=settings,
        request=LessonRequest(principles=[Principle.LSP, Principle.DIP]),
    )


class TestJsonExport:
    def test_writes_sorted_utf8_json(self, report, tmp_path):
        path = export_report_json(report=report, output_path=tmp_path / "out" / "report.json")

        text = path.read_text(encoding="utf-8")
        payload = json.loads(text)
        assert text.endswith("\n")
        assert list(payload) == sorted(payload)
        assert payload["customer"] == "John Doe"
        assert [o["principle"] for o in payload["outcomes"]] == ["lsp", "lsp", "dip", "dip"]
        assert payload["outcomes"][1]["observations"]["square_area"] == 100

    def test_round_trips_into_model(self, report, tmp_path):
        path = export_report_json(report=report, output_path=tmp_path / "report.json")
        restored = LessonReport.model_validate_json(path.read_text(encoding="utf-8"))
        assert restored.get(Principle.LSP, Variant.VIOLATING).complies is False


class TestHtmlExport:
    def test_renders_sections_and_verdicts(self, report):
        html = render_report_html(report=report)
        assert "<h2>LSP &mdash; Liskov Substitution</h2>" in html
        assert "<h2>DIP &mdash; Dependency Inversion</h2>" in html
        assert "Interface Segregation" not in html
        assert "compliant variants passing: 2/2" in html
        assert "violating: violates" in html

    def test_escapes_messages(self, settings):
        outcome = LessonOutcome(
            principle=Principle.SRP,
            variant=Variant.COMPLIANT,
            title="escape check",
            complies=True,
        )
        outcome.add_step("PersonDisplay", "<script>alert(1)</script>")
        html = render_report_html(report=LessonReport(customer="x", outcomes=[outcome]))
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_export_creates_parent_dirs(self, report, tmp_path):
        path = export_report_html(report=report, output_path=tmp_path / "a" / "b" / "report.html")
        assert path.exists()
        assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


class TestFlavorCatalog:
    def test_load(self, tmp_path):
        path = tmp_path / "flavors.json"
        path.write_text('{"flavors": [" Mango ", "", "mango", "lemon"]}', encoding="utf-8")
        assert load_flavor_catalog(path).flavors == ["mango", "lemon"]

    def test_invalid_shape(self, tmp_path):
        path = tmp_path / "flavors.json"
        path.write_text('{"flavors": "mango"}', encoding="utf-8")
        with pytest.raises(InvalidFlavorError) as excinfo:
            load_flavor_catalog(path)
        assert excinfo.value.code == "INVALID_FLAVOR"
        assert "flavors.json" in excinfo.value.message

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "flavors.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidFlavorError, match="not valid JSON"):
            load_flavor_catalog(path)
