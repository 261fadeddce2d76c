"""Store checkout.

`Store` receives any `PaymentProcessor` and never names a gateway.
`StripeBoundStore` builds a `Stripe` client itself, so moving to another
gateway means editing the store.
"""

from __future__ import annotations

import logging

from adapters.payment_gateways.stripe import Stripe
from core.domain.errors import InvalidPurchaseError
from core.domain.models import PaymentReceipt
from core.interfaces.payment import PaymentProcessor

logger = logging.getLogger(__name__)


def _total(quantity: int, price: float) -> float:
    if quantity < 0:
        raise InvalidPurchaseError(f"quantity must be >= 0, got {quantity}")
    if price < 0:
        raise InvalidPurchaseError(f"price must be >= 0, got {price}")
    return quantity * price


class Store:
    def __init__(self, payment_processor: PaymentProcessor) -> None:
        self.payment_processor = payment_processor

    def purchase_book(self, quantity: int, price: float) -> PaymentReceipt:
        return self._checkout(quantity, price, "book")

    def purchase_course(self, quantity: int, price: float) -> PaymentReceipt:
        return self._checkout(quantity, price, "course")

    def _checkout(self, quantity: int, price: float, item: str) -> PaymentReceipt:
        amount = _total(quantity, price)
        logger.debug("Checkout: %s x %s @ %s", quantity, item, price)
        return self.payment_processor.pay(amount, description=f"{quantity} x {item}")


class StripeBoundStore:
    """Store hard-wired to Stripe."""

    def __init__(self, user: str) -> None:
        self.stripe = Stripe(user)

    def purchase_book(self, quantity: int, price: float) -> PaymentReceipt:
        return self.stripe.make_payment(_total(quantity, price))

    def purchase_course(self, quantity: int, price: float) -> PaymentReceipt:
        return self.stripe.make_payment(_total(quantity, price))
