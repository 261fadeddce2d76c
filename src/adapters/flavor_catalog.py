"""Carga del catálogo de sabores (data-driven).

Formato soportado:
    {"flavors": ["strawberry", "pistachio"]}

Idea:
- Los sabores nuevos llegan como datos; el registro y su declaración no se tocan.

Nota:
- Un archivo ilegible o con otra forma se reporta como `InvalidFlavorError`
  (nunca como `JSONDecodeError`/`ValidationError` crudos).
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from core.domain.errors import InvalidFlavorError


class FlavorCatalog(BaseModel):
    flavors: list[str] = Field(default_factory=list)

    @field_validator("flavors")
    @classmethod
    def _clean(cls, values: list[str]) -> list[str]:
        out: list[str] = []
        for value in values:
            flavor = value.strip().lower()
            if flavor and flavor not in out:
                out.append(flavor)
        return out


def load_flavor_catalog(path: Path) -> FlavorCatalog:
    raw = path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidFlavorError(f"Flavor catalog {path} is not valid JSON: {exc.msg}") from exc
    try:
        return FlavorCatalog.model_validate(data)
    except ValidationError as exc:
        raise InvalidFlavorError(
            f'Flavor catalog {path} must look like {{"flavors": ["..."]}} ({exc.error_count()} error(s))'
        ) from exc
