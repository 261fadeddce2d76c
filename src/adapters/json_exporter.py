"""Exportación JSON del reporte de lecciones.

Por qué JSON:
- Registro estable y comparable de lo que cada lección imprimió y concluyó.
- Permite que otras herramientas consuman resultados sin el HTML.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import LessonReport


def export_report_json(*, report: LessonReport, output_path: Path) -> Path:
    """Exporta `LessonReport` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
