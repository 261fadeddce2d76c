"""Pasarela: PayPal (simulada en memoria).

A diferencia de Stripe, el cliente de PayPal no está ligado a un usuario: el
usuario viaja en cada `make_payment(user, amount)`. El procesador oculta esa
diferencia.
"""

from __future__ import annotations

import logging

from adapters.payment_gateways.formatting import format_amount
from core.domain.models import PaymentReceipt
from core.interfaces.payment import PaymentProcessor

logger = logging.getLogger(__name__)


class PayPal:
    name = "paypal"

    def make_payment(
        self,
        user: str,
        amount_in_dollars: float,
        description: str | None = None,
    ) -> PaymentReceipt:
        logger.info("%s made payment of %s", user, format_amount(amount_in_dollars))
        return PaymentReceipt(
            user=user,
            amount=amount_in_dollars,
            gateway=self.name,
            description=description,
        )


class PayPalPaymentProcessor(PaymentProcessor):
    """Lets a `Store` pay through PayPal."""

    def __init__(self, user: str) -> None:
        self.user = user
        self.paypal = PayPal()

    def pay(self, amount: float, description: str | None = None) -> PaymentReceipt:
        return self.paypal.make_payment(self.user, amount, description=description)
