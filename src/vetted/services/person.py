"""PersonService — validate person input against the configured rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from vetted.domain.person import PersonRules, age_rule, make_person, name_rule
from vetted.domain.results import Invalid
from vetted.services.base import BaseService
from vetted.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from vetted.config.settings import VettedSettings

logger = structlog.get_logger(__name__)


class PersonService(BaseService):
    """Run the person smart constructor and wrap its outcome.

    Raises ``pydantic.ValidationError`` at construction if the configured
    bounds are ill-formed (e.g. a minimum above its maximum).
    """

    def __init__(self, settings: VettedSettings) -> None:
        super().__init__(settings)
        cfg = settings.rules
        self._rules = PersonRules(
            name=name_rule(cfg.name.min_length, cfg.name.max_length),
            age=age_rule(cfg.age.minimum, cfg.age.maximum),
        )

    @property
    def person_rules(self) -> PersonRules:
        return self._rules

    def validate(self, name: Any, age: Any) -> ServiceResult:
        """Validate a single person, reporting every violated rule."""
        op = "validate_person"
        outcome = make_person(name, age, self._rules)
        if isinstance(outcome, Invalid):
            errors = [str(e) for e in outcome.errors]
            logger.debug("person_rejected", errors=errors)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="VALIDATION_FAILED",
                    message="; ".join(errors),
                    detail={"errors": errors},
                ),
            )
        return ServiceResult(ok=True, op=op, data={"person": outcome.value.model_dump()})

    def validate_batch(self, items: list[Any]) -> ServiceResult:
        """Validate many people; one bad item never hides the others.

        Items that are not mappings are validated as if both fields were
        absent.
        """
        op = "validate_batch"
        accepted: list[dict[str, Any]] = []
        rejected: list[dict[str, Any]] = []

        for i, item in enumerate(items):
            fields = item if isinstance(item, dict) else {}
            outcome = make_person(fields.get("name"), fields.get("age"), self._rules)
            if isinstance(outcome, Invalid):
                rejected.append({"index": i, "errors": [str(e) for e in outcome.errors]})
            else:
                accepted.append({"index": i, "person": outcome.value.model_dump()})

        if rejected:
            logger.debug("batch_rejected", rejected=len(rejected), total=len(items))

        return ServiceResult(
            ok=not rejected,
            op=op,
            data={"valid": accepted, "invalid": rejected},
            error=ServiceError(
                code="BATCH_PARTIAL",
                message=f"{len(rejected)} of {len(items)} items failed",
            )
            if rejected
            else None,
            meta={"total": len(items), "valid": len(accepted), "invalid": len(rejected)},
        )

    def rules(self) -> ServiceResult:
        """Describe the active rule set."""
        return ServiceResult(
            ok=True,
            op="rules",
            data={
                "rules": [
                    self._rules.name.model_dump(mode="json"),
                    self._rules.age.model_dump(mode="json"),
                ]
            },
        )
