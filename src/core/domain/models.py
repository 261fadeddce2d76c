"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y campos autodocumentados (Field) sin acoplar los
  ejemplos a ninguna librería de I/O.
- Los resultados de las lecciones se serializan directo a reportes JSON/HTML.

Nota:
- Estos modelos describen *qué* produjo una lección, no *cómo* se imprime.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from core.domain.principle import Principle, Variant


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Person(BaseModel):
    """Persona evaluada por el ejemplo de responsabilidad única."""

    name: str = Field(
        ...,
        description="Nombre que se muestra cuando la persona es válida.",
    )
    age: int = Field(
        ...,
        description="Edad en años.",
    )


class PaymentReceipt(BaseModel):
    """Resultado de un pago hecho por cualquier pasarela.

    Permite que la tienda devuelva la misma estructura sea cual sea el procesador.
    """

    user: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Quién pagó.",
    )
    amount: float = Field(
        ...,
        ge=0,
        description="Monto en dólares.",
    )
    gateway: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="Pasarela que procesó el pago (p.ej. 'stripe', 'paypal').",
    )
    description: str | None = Field(
        default=None,
        max_length=256,
        description="Qué se compró, si el llamador lo indica.",
    )
    paid_at: datetime = Field(
        default_factory=_utcnow,
        description="Momento del pago (UTC).",
    )


class LessonStep(BaseModel):
    """Una línea observable de una lección, tal como el ejemplo la logueó o verificó."""

    actor: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Clase o componente que produjo el mensaje.",
    )
    message: str = Field(
        ...,
        max_length=2_000,
        description="Mensaje tal como se logueó.",
    )
    ok: bool | None = Field(
        default=None,
        description="True/False si el paso es una verificación, None si es salida simple.",
    )


class LessonOutcome(BaseModel):
    """Resultado de ejecutar un principio en una variante."""

    principle: Principle
    variant: Variant
    title: str = Field(..., min_length=1, max_length=256)
    steps: list[LessonStep] = Field(default_factory=list)
    observations: dict[str, Any] = Field(
        default_factory=dict,
        description="Valores con los que se calculó el veredicto (áreas, pasarelas, etc.).",
    )
    complies: bool = Field(
        ...,
        description="Indica si el código ejecutado respeta el principio.",
    )
    note: str | None = Field(default=None, max_length=2_000)

    def add_step(self, actor: str, message: str, ok: bool | None = None) -> LessonStep:
        step = LessonStep(actor=actor, message=message, ok=ok)
        self.steps.append(step)
        return step


class LessonReport(BaseModel):
    """Agregado principal: todas las lecciones de una invocación."""

    customer: str = Field(..., min_length=1, max_length=128)
    generated_at: datetime = Field(default_factory=_utcnow)
    outcomes: list[LessonOutcome] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    def for_principle(self, principle: Principle) -> list[LessonOutcome]:
        return [o for o in self.outcomes if o.principle is principle]

    def get(self, principle: Principle, variant: Variant) -> LessonOutcome | None:
        for outcome in self.outcomes:
            if outcome.principle is principle and outcome.variant is variant:
                return outcome
        return None

    @property
    def broken_compliant(self) -> list[LessonOutcome]:
        """Variantes compliant que fallaron su propia verificación."""

        return [o for o in self.outcomes if o.variant is Variant.COMPLIANT and not o.complies]
