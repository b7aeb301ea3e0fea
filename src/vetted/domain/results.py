"""Validation outcomes — ``Valid`` or ``Invalid``, never an exception.

``ok`` is the tag, so callers can branch on it or use structural
pattern matching::

    match make_person("Peter Parker", 25):
        case Valid(value=person):
            ...
        case Invalid(errors=errors):
            ...
"""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

from vetted.domain.errors import ErrorId

T = TypeVar("T")


class Valid(BaseModel, Generic[T]):
    """Successful outcome wrapping a validated value or record."""

    model_config = {"frozen": True}

    ok: Literal[True] = True
    value: T


class Invalid(BaseModel):
    """Failed outcome listing every violated rule, in field order.

    A field validator contributes exactly one identifier; a composite
    contributes the concatenation of its failing fields' identifiers.
    """

    model_config = {"frozen": True}

    ok: Literal[False] = False
    errors: tuple[ErrorId, ...] = Field(min_length=1)
