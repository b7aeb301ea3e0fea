"""Validated values, validated records, and their smart constructors.

INVARIANT: A ``ValidatedValue`` always satisfies its rule, and a
``ValidatedRecord`` exists only if every one of its fields did.

Direct construction (``ValidatedValue(value=..., rule=...)``) is refused.
The only way in is :func:`validate_field` / :func:`validate_composite`,
which pass a module-private token through pydantic's validation context.
``model_copy(update=...)`` is refused for the same reason.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self, TypeVar

from pydantic import (
    BaseModel,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationInfo,
    model_serializer,
    model_validator,
)

from vetted.domain.errors import ErrorId
from vetted.domain.results import Invalid, Valid
from vetted.domain.rules import Rule

_CONSTRUCT_KEY = "vetted.construct"
_TOKEN = object()
_CONTEXT: dict[str, Any] = {_CONSTRUCT_KEY: _TOKEN}


def _require_token(info: ValidationInfo, type_name: str) -> None:
    context = info.context or {}
    if context.get(_CONSTRUCT_KEY) is not _TOKEN:
        msg = f"{type_name} cannot be constructed directly; use its validating factory"
        raise ValueError(msg)


def _refuse_update(update: Mapping[str, Any] | None, type_name: str) -> None:
    if update:
        msg = f"{type_name} is immutable; validate new input instead of copying with update"
        raise TypeError(msg)


class ValidatedValue(BaseModel):
    """A raw value that passed its rule.

    Serializes as the bare wrapped value, so records dump to plain data.
    """

    model_config = {"frozen": True}

    value: StrictStr | StrictInt | StrictFloat
    rule: Rule

    @model_validator(mode="before")
    @classmethod
    def _require_factory(cls, data: Any, info: ValidationInfo) -> Any:
        _require_token(info, cls.__name__)
        return data

    @model_validator(mode="after")
    def _check_rule(self) -> ValidatedValue:
        if not self.rule.check(self.value):
            msg = f"{self.value!r} violates rule {self.rule.name!r}"
            raise ValueError(msg)
        return self

    @model_serializer
    def _serialize(self) -> str | int | float:
        return self.value

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Copy as-is. ``update`` is refused: it would skip the rule check."""
        _refuse_update(update, type(self).__name__)
        return super().model_copy(deep=deep)


class ValidatedRecord(BaseModel):
    """Base for immutable aggregates of validated values.

    Subclasses declare their fields in order; that order is the order in
    which :func:`validate_composite` reports errors.
    """

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _require_factory(cls, data: Any, info: ValidationInfo) -> Any:
        _require_token(info, cls.__name__)
        return data

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        _refuse_update(update, type(self).__name__)
        return super().model_copy(deep=deep)


R = TypeVar("R", bound=ValidatedRecord)


def validate_field(raw: Any, rule: Rule) -> Valid[ValidatedValue] | Invalid:
    """Check one raw value against one rule.

    Pure and total: a value of the wrong kind fails with the rule's error
    rather than raising. Bounds are inclusive on both ends.
    """
    if not rule.check(raw):
        return Invalid(errors=(rule.error,))
    value = ValidatedValue.model_validate({"value": raw, "rule": rule}, context=_CONTEXT)
    return Valid(value=value)


def validate_composite(
    record_type: type[R],
    field_results: Mapping[str, Valid[Any] | Invalid],
) -> Valid[R] | Invalid:
    """Combine per-field results into one result for *record_type*.

    Every field is inspected. Failing fields contribute their errors in the
    record's declaration order, regardless of mapping order; nothing is
    deduplicated. The record is built only when no field failed.

    Raises:
        ValueError: If *field_results* names a field the record lacks, or
            omits one it declares.
    """
    declared = list(record_type.model_fields)

    unknown = [name for name in field_results if name not in record_type.model_fields]
    if unknown:
        msg = f"{record_type.__name__} has no field(s): {', '.join(unknown)}"
        raise ValueError(msg)
    missing = [name for name in declared if name not in field_results]
    if missing:
        msg = f"{record_type.__name__} missing result(s) for: {', '.join(missing)}"
        raise ValueError(msg)

    errors: list[ErrorId] = []
    values: dict[str, Any] = {}
    for name in declared:
        result = field_results[name]
        if isinstance(result, Invalid):
            errors.extend(result.errors)
        else:
            values[name] = result.value

    if errors:
        return Invalid(errors=tuple(errors))
    record = record_type.model_validate(values, context=_CONTEXT)
    return Valid(value=record)
