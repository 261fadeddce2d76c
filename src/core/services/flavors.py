"""Ice-cream flavors.

`DEFAULT_FLAVORS` is declared once and never edited; new flavors go through
`FlavorAdder` into a `FlavorRegistry`. `LegacyIceCreamMaker` reads the
module-level `LEGACY_FLAVORS` list, which can only grow by editing this file.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from core.domain.errors import InvalidFlavorError

logger = logging.getLogger(__name__)

DEFAULT_FLAVORS: tuple[str, ...] = ("chocolate", "vanilla")

LEGACY_FLAVORS: list[str] = ["chocolate", "vanilla"]

SUCCESS_MESSAGE = "Great success. You now have ice cream."
FAILURE_MESSAGE = "Epic fail. No ice cream for you."


def normalize_flavor(flavor: str) -> str:
    value = flavor.strip().lower()
    if not value:
        raise InvalidFlavorError("Flavor name must not be empty")
    return value


class FlavorRegistry:
    """Flavors the shop can serve, seeded from a declaration it never mutates."""

    def __init__(self, initial: Iterable[str] = DEFAULT_FLAVORS) -> None:
        self._flavors: list[str] = []
        for flavor in initial:
            self.add(flavor)

    def add(self, flavor: str) -> bool:
        """Register `flavor`; returns False when it was already there."""

        value = normalize_flavor(flavor)
        if value in self._flavors:
            return False
        self._flavors.append(value)
        logger.debug("Flavor registered: %s", value)
        return True

    @property
    def flavors(self) -> tuple[str, ...]:
        return tuple(self._flavors)

    def __contains__(self, flavor: object) -> bool:
        if not isinstance(flavor, str):
            return False
        return flavor.strip().lower() in self._flavors

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._flavors))

    def __len__(self) -> int:
        return len(self._flavors)


class IceCreamMaker:
    def __init__(self, flavor: str, registry: FlavorRegistry) -> None:
        self.flavor = flavor
        self.registry = registry

    def make(self) -> bool:
        if self.flavor in self.registry:
            logger.info(SUCCESS_MESSAGE)
            return True
        logger.info(FAILURE_MESSAGE)
        return False


class FlavorAdder:
    """The extension point: adds a flavor without touching its declaration."""

    def __init__(self, flavor: str, registry: FlavorRegistry) -> None:
        self.flavor = flavor
        self.registry = registry

    def add(self) -> bool:
        return self.registry.add(self.flavor)


class LegacyIceCreamMaker:
    def __init__(self, flavor: str) -> None:
        self.flavor = flavor

    def make(self) -> bool:
        if self.flavor in LEGACY_FLAVORS:
            logger.info(SUCCESS_MESSAGE)
            return True
        logger.info(FAILURE_MESSAGE)
        return False
