"""Pasarelas de pago (procesadores concretos).

Por qué un paquete:
- Agrupa un módulo por pasarela (Stripe, PayPal).
- Cada módulo implementa `core.interfaces.payment.PaymentProcessor`.
"""

from __future__ import annotations

from typing import Callable

from adapters.payment_gateways.paypal import PayPal, PayPalPaymentProcessor
from adapters.payment_gateways.stripe import Stripe, StripePaymentProcessor
from core.domain.errors import UnsupportedGatewayError
from core.interfaces.payment import PaymentProcessor

PAYMENT_PROCESSORS: dict[str, Callable[[str], PaymentProcessor]] = {
    "stripe": StripePaymentProcessor,
    "paypal": PayPalPaymentProcessor,
}


def build_payment_processor(gateway: str, user: str) -> PaymentProcessor:
    """Instantiate the processor registered under `gateway` for `user`."""

    factory = PAYMENT_PROCESSORS.get(gateway.strip().lower())
    if factory is None:
        raise UnsupportedGatewayError(gateway, tuple(PAYMENT_PROCESSORS))
    return factory(user)


__all__ = [
    "PAYMENT_PROCESSORS",
    "PayPal",
    "PayPalPaymentProcessor",
    "Stripe",
    "StripePaymentProcessor",
    "build_payment_processor",
]
