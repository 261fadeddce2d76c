"""Exportación de reportes (HTML).

Por qué está en adapters:
- HTML es un detalle de infraestructura (Jinja2).
- El core solo conoce el agregado `LessonReport`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.models import LessonReport
from core.domain.principle import Principle, Variant


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_report_html(*, report: LessonReport) -> str:
    """Renderiza una página HTML autocontenida para el reporte."""

    generated_at = report.generated_at.astimezone(timezone.utc).isoformat(timespec="seconds")
    rendered_at = datetime.now().astimezone().isoformat(timespec="seconds")

    sections = []
    for principle in Principle:
        outcomes = report.for_principle(principle)
        if outcomes:
            sections.append((principle, outcomes))

    compliant_total = sum(1 for o in report.outcomes if o.variant is Variant.COMPLIANT)
    compliant_ok = compliant_total - len(report.broken_compliant)

    template = _get_env().get_template("report.html")
    return template.render(
        report=report,
        sections=sections,
        generated_at=generated_at,
        rendered_at=rendered_at,
        compliant_total=compliant_total,
        compliant_ok=compliant_ok,
    )


def export_report_html(*, report: LessonReport, output_path: Path) -> Path:
    """Exporta el agregado a HTML."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_report_html(report=report)
    output_path.write_text(html, encoding="utf-8")
    return output_path
