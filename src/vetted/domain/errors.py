"""Rule-violation identifiers.

INVARIANT: One identifier per business rule. The set is closed; a new
rule means a new member here.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorId(StrEnum):
    """Closed enumeration of validation failures."""

    NAME_LENGTH_OUT_OF_RANGE = "NameLengthOutOfRange"
    AGE_OUT_OF_RANGE = "AgeOutOfRange"
