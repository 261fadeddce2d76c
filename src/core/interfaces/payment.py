"""Contrato de procesadores de pago.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- La tienda depende de esta abstracción; Stripe, PayPal o un fake de tests se
  enchufan sin tocar la tienda.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import PaymentReceipt


@runtime_checkable
class PaymentProcessor(Protocol):
    """Minimal contract a gateway adapter must satisfy."""

    def pay(self, amount: float, description: str | None = None) -> PaymentReceipt:
        """Charge `amount` dollars and return the normalized receipt."""

        ...
