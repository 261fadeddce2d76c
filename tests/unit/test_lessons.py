"""
Tests for the lesson runner.

Each principle is run in both variants; the violating variant must be
reported as violating and the compliant one as complying.
"""

import json

import pytest

from core.domain.principle import Principle, Variant
from core.services import flavors, lessons
from core.services.flavors import DEFAULT_FLAVORS, FlavorRegistry
from core.services.lessons import (
    EXPECTED_SQUARE_AREA,
    LessonHooks,
    LessonRequest,
    run_lesson,
    run_lessons,
)


class TestVerdicts:
    @pytest.mark.parametrize("principle", list(Principle))
    def test_violating_variant_violates(self, principle, settings):
        outcome = run_lesson(principle, Variant.VIOLATING, settings=settings)
        assert outcome.complies is False
        assert outcome.principle is principle
        assert outcome.steps

    @pytest.mark.parametrize("principle", list(Principle))
    def test_compliant_variant_complies(self, principle, settings):
        outcome = run_lesson(principle, Variant.COMPLIANT, settings=settings)
        assert outcome.complies is True
        assert outcome.variant is Variant.COMPLIANT


class TestObservations:
    def test_lsp_areas(self, settings):
        violating = run_lesson(Principle.LSP, Variant.VIOLATING, settings=settings)
        compliant = run_lesson(Principle.LSP, Variant.COMPLIANT, settings=settings)

        assert violating.observations["square_area"] == 25
        assert compliant.observations["square_area"] == EXPECTED_SQUARE_AREA == 100
        assert compliant.observations["colors"] == ["red", "red", "red"]

    def test_ocp_declaration_untouched(self, settings):
        outcome = run_lesson(Principle.OCP, Variant.COMPLIANT, settings=settings)
        assert outcome.observations["new_flavor_served"] is True
        assert outcome.observations["declared_flavors"] == list(DEFAULT_FLAVORS)
        assert outcome.observations["registry_flavors"][-1] == "strawberry"
        assert outcome.observations["declaration_untouched"] is True

    def test_ocp_registry_seeded_elsewhere_breaks_compliance(self, settings, monkeypatch):
        monkeypatch.setattr(lessons, "FlavorRegistry", lambda: FlavorRegistry(("chocolate",)))

        outcome = run_lesson(Principle.OCP, Variant.COMPLIANT, settings=settings)

        assert outcome.observations["new_flavor_served"] is True
        assert outcome.observations["declaration_untouched"] is False
        assert outcome.complies is False

    def test_ocp_legacy_result_reported(self, settings, monkeypatch):
        assert run_lesson(Principle.OCP, Variant.VIOLATING, settings=settings).observations == {
            "new_flavor_served": False
        }

        monkeypatch.setattr(flavors, "LEGACY_FLAVORS", ["chocolate", "vanilla", "strawberry"])
        outcome = run_lesson(Principle.OCP, Variant.VIOLATING, settings=settings)

        assert outcome.observations["new_flavor_served"] is True
        assert [step.ok for step in outcome.steps] == [True, True]

    def test_isp_forced_implementations(self, settings):
        outcome = run_lesson(Principle.ISP, Variant.VIOLATING, settings=settings)
        assert outcome.observations["forced_implementations"] == ["BloatedSquare", "BloatedRectangle"]

    def test_srp_outputs(self, settings):
        outcome = run_lesson(Principle.SRP, Variant.COMPLIANT, settings=settings)
        assert outcome.observations["outputs"] == [
            "Name: John Doe and Age: 30",
            "Invalid",
            "Invalid",
        ]

    def test_srp_respects_configured_limits(self, make_settings):
        outcome = run_lesson(
            Principle.SRP,
            Variant.COMPLIANT,
            settings=make_settings(min_name_length=2, min_age=10),
        )
        assert outcome.observations["outputs"] == [
            "Name: John Doe and Age: 30",
            "Name: Bob and Age: 40",
            "Name: Jane Roe and Age: 16",
        ]


class TestDependencyInversion:
    def test_every_gateway_served_by_same_store(self, settings):
        outcome = run_lesson(Principle.DIP, Variant.COMPLIANT, settings=settings)
        assert outcome.observations["gateways"] == ["stripe", "paypal"]
        assert outcome.observations["store_classes"] == ["Store"]

    def test_configured_gateway_runs_first(self, make_settings):
        outcome = run_lesson(
            Principle.DIP,
            Variant.COMPLIANT,
            settings=make_settings(payment_gateway="PayPal", customer_name="Ada"),
        )
        assert outcome.observations["gateways"] == ["paypal", "stripe"]
        assert "Ada made payment of 20" in [step.message for step in outcome.steps]

    def test_violating_store_only_knows_stripe(self, settings):
        outcome = run_lesson(Principle.DIP, Variant.VIOLATING, settings=settings)
        assert outcome.observations["gateways"] == ["stripe"]
        assert [step.message for step in outcome.steps] == [
            "John Doe made payment of 20",
            "John Doe made payment of 15",
        ]


class TestFlavorCatalog:
    def test_catalog_flavors_added(self, tmp_path, make_settings):
        path = tmp_path / "flavors.json"
        path.write_text(json.dumps({"flavors": ["Pistachio", "mint", "mint"]}), encoding="utf-8")

        outcome = run_lesson(Principle.OCP, Variant.COMPLIANT, settings=make_settings(flavors_path=path))

        assert outcome.observations["catalog_flavors"] == ["pistachio", "mint"]
        assert "pistachio" in outcome.observations["registry_flavors"]
        assert outcome.complies is True

    def test_missing_catalog_warns(self, tmp_path, make_settings):
        warnings = []
        settings = make_settings(flavors_path=tmp_path / "missing.json")

        report = run_lessons(
            settings=settings,
            request=LessonRequest(principles=[Principle.OCP], variants=[Variant.COMPLIANT]),
            hooks=LessonHooks(warning=warnings.append),
        )

        assert len(warnings) == 1
        assert "missing.json" in warnings[0]
        assert report.warnings == warnings
        assert report.outcomes[0].complies is True


class TestRunLessons:
    def test_all_by_default(self, settings):
        report = run_lessons(settings=settings)
        assert len(report.outcomes) == 10
        assert [o.principle for o in report.outcomes[::2]] == list(Principle)
        assert report.broken_compliant == []
        assert report.customer == "John Doe"

    def test_selection_keeps_principle_order(self, settings):
        request = LessonRequest(
            principles=[Principle.DIP, Principle.SRP, Principle.DIP],
            variants=[Variant.COMPLIANT],
        )
        report = run_lessons(settings=settings, request=request)
        assert [(o.principle, o.variant) for o in report.outcomes] == [
            (Principle.SRP, Variant.COMPLIANT),
            (Principle.DIP, Variant.COMPLIANT),
        ]

    def test_lookup_helpers(self, settings):
        report = run_lessons(settings=settings, request=LessonRequest(principles=[Principle.LSP]))
        assert len(report.for_principle(Principle.LSP)) == 2
        assert report.get(Principle.LSP, Variant.VIOLATING).complies is False
        assert report.get(Principle.ISP, Variant.COMPLIANT) is None
