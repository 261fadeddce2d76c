"""The five SOLID principles and the two variants of each lesson.

Kept in the domain layer so the CLI, the lesson runner and the exporters
share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


_LABELS = {
    "srp": "Single Responsibility",
    "ocp": "Open-Closed",
    "lsp": "Liskov Substitution",
    "isp": "Interface Segregation",
    "dip": "Dependency Inversion",
}

_SUMMARIES = {
    "srp": "A class should have only one reason to change.",
    "ocp": "Entities should be open for extension but closed for modification.",
    "lsp": "Objects of a subclass must be usable wherever the superclass is expected.",
    "isp": "Clients should not be forced to depend on methods they do not use.",
    "dip": "High-level modules should depend on abstractions, not on concrete low-level modules.",
}


class Principle(str, Enum):
    """One of the five SOLID principles, in acronym order."""

    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"

    @property
    def acronym(self) -> str:
        return self.value.upper()

    def label(self) -> str:
        """Human readable name, e.g. "Open-Closed"."""

        return _LABELS[self.value]

    def summary(self) -> str:
        return _SUMMARIES[self.value]


class Variant(str, Enum):
    """Which side of the example to run."""

    VIOLATING = "violating"
    COMPLIANT = "compliant"

    @classmethod
    def both(cls) -> tuple["Variant", "Variant"]:
        return (cls.VIOLATING, cls.COMPLIANT)
