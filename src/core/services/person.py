"""Person validation and display.

`PersonValidator` decides whether a person is valid; `PersonDisplay` decides
how a person is shown. Each class changes for one reason only.
`PersonValidatorWithDisplay` is the single class that does both.
"""

from __future__ import annotations

import logging

from core.domain.models import Person

logger = logging.getLogger(__name__)

INVALID_MESSAGE = "Invalid"


def _format_person(name: str, age: int) -> str:
    return f"Name: {name} and Age: {age}"


class PersonValidator:
    """Name and age rules, nothing else."""

    def __init__(self, min_name_length: int = 3, min_age: int = 18) -> None:
        self.min_name_length = min_name_length
        self.min_age = min_age

    def validate_name(self, name: str) -> bool:
        return len(name) > self.min_name_length

    def validate_age(self, age: int) -> bool:
        return age > self.min_age

    def is_valid(self, person: Person) -> bool:
        return self.validate_name(person.name) and self.validate_age(person.age)


class PersonDisplay:
    """Shows a person, delegating the validity decision to a validator."""

    def __init__(self, person: Person, validator: PersonValidator | None = None) -> None:
        self.person = person
        self.validator = validator or PersonValidator()

    def display(self) -> str:
        if self.validator.is_valid(self.person):
            message = _format_person(self.person.name, self.person.age)
        else:
            message = INVALID_MESSAGE
        logger.info(message)
        return message


class PersonValidatorWithDisplay:
    """Validation rules and presentation in one class: two reasons to change."""

    def __init__(self, name: str, age: int) -> None:
        self.name = name
        self.age = age

    def validate_name(self, name: str) -> bool:
        return len(name) > 3

    def validate_age(self, age: int) -> bool:
        return age > 18

    def display(self) -> str:
        if self.validate_name(self.name) and self.validate_age(self.age):
            message = _format_person(self.name, self.age)
        else:
            message = INVALID_MESSAGE
        logger.info(message)
        return message
