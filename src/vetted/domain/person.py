"""The person record and its smart constructor.

Default rules: name length within [1, 50], age within [0, 127].
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from vetted.domain.errors import ErrorId
from vetted.domain.results import Invalid, Valid
from vetted.domain.rules import LengthRule, RangeRule
from vetted.domain.values import (
    ValidatedRecord,
    ValidatedValue,
    validate_composite,
    validate_field,
)

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 50
AGE_MIN = 0
AGE_MAX = 127


def name_rule(min_length: int = NAME_MIN_LENGTH, max_length: int = NAME_MAX_LENGTH) -> LengthRule:
    return LengthRule(
        name="name",
        min_length=min_length,
        max_length=max_length,
        error=ErrorId.NAME_LENGTH_OUT_OF_RANGE,
    )


def age_rule(minimum: int | float = AGE_MIN, maximum: int | float = AGE_MAX) -> RangeRule:
    return RangeRule(
        name="age",
        minimum=minimum,
        maximum=maximum,
        error=ErrorId.AGE_OUT_OF_RANGE,
    )


class Person(ValidatedRecord):
    """A person whose name and age both passed their rules."""

    name: ValidatedValue
    age: ValidatedValue


class PersonRules(BaseModel):
    """The rule set applied by :func:`make_person`."""

    model_config = {"frozen": True}

    name: LengthRule = Field(default_factory=name_rule)
    age: RangeRule = Field(default_factory=age_rule)


PERSON_RULES = PersonRules()


def make_person(name: Any, age: Any, rules: PersonRules = PERSON_RULES) -> Valid[Person] | Invalid:
    """Validate *name* and *age* together, reporting every failure."""
    return validate_composite(
        Person,
        {
            "name": validate_field(name, rules.name),
            "age": validate_field(age, rules.age),
        },
    )
