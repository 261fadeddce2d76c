"""Pasarela: Stripe (simulada en memoria).

Implementación mínima:
- `Stripe` imita un cliente ligado a un usuario: `make_payment(amount)`.
- `StripePaymentProcessor` lo adapta a `core.interfaces.payment.PaymentProcessor`.
"""

from __future__ import annotations

import logging

from adapters.payment_gateways.formatting import format_amount
from core.domain.models import PaymentReceipt
from core.interfaces.payment import PaymentProcessor

logger = logging.getLogger(__name__)


class Stripe:
    name = "stripe"

    def __init__(self, user: str) -> None:
        self.user = user

    def make_payment(self, amount_in_dollars: float, description: str | None = None) -> PaymentReceipt:
        logger.info("%s made payment of %s", self.user, format_amount(amount_in_dollars))
        return PaymentReceipt(
            user=self.user,
            amount=amount_in_dollars,
            gateway=self.name,
            description=description,
        )


class StripePaymentProcessor(PaymentProcessor):
    """Lets a `Store` pay through Stripe."""

    def __init__(self, user: str) -> None:
        self.stripe = Stripe(user)

    def pay(self, amount: float, description: str | None = None) -> PaymentReceipt:
        return self.stripe.make_payment(amount, description=description)
