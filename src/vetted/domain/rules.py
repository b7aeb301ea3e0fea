"""Validation rules — named, single-field predicates with inclusive bounds.

Each rule carries exactly one :class:`ErrorId`. Rules are frozen once
defined; ill-formed bounds are rejected at definition time.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from vetted.domain.errors import ErrorId


class LengthRule(BaseModel):
    """Text length must lie within ``[min_length, max_length]``."""

    model_config = {"frozen": True}

    kind: Literal["length"] = "length"
    name: str
    min_length: int = Field(ge=0)
    max_length: int = Field(ge=0)
    error: ErrorId

    @model_validator(mode="after")
    def _check_bounds(self) -> LengthRule:
        if self.min_length > self.max_length:
            msg = f"{self.name}: min_length {self.min_length} exceeds max_length {self.max_length}"
            raise ValueError(msg)
        return self

    def check(self, raw: Any) -> bool:
        """Return True if *raw* is a string of permitted length."""
        if not isinstance(raw, str):
            return False
        return self.min_length <= len(raw) <= self.max_length


class RangeRule(BaseModel):
    """Number must lie within ``[minimum, maximum]``."""

    model_config = {"frozen": True}

    kind: Literal["range"] = "range"
    name: str
    minimum: int | float
    maximum: int | float
    error: ErrorId

    @model_validator(mode="after")
    def _check_bounds(self) -> RangeRule:
        if self.minimum > self.maximum:
            msg = f"{self.name}: minimum {self.minimum} exceeds maximum {self.maximum}"
            raise ValueError(msg)
        return self

    def check(self, raw: Any) -> bool:
        """Return True if *raw* is a number inside the range.

        ``bool`` is rejected even though it subclasses ``int``. NaN never
        compares inside any range.
        """
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            return False
        return self.minimum <= raw <= self.maximum


Rule = LengthRule | RangeRule
