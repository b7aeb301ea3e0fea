"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, vetted.toml only contains
overrides. An empty file (or none at all) yields the default rules.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from vetted.domain.person import AGE_MAX, AGE_MIN, NAME_MAX_LENGTH, NAME_MIN_LENGTH


class NameRuleConfig(BaseModel):
    """[rules.name] section."""

    model_config = {"frozen": True}

    min_length: int = NAME_MIN_LENGTH
    max_length: int = NAME_MAX_LENGTH


class AgeRuleConfig(BaseModel):
    """[rules.age] section. Bounds may be fractional, like RangeRule's."""

    model_config = {"frozen": True}

    minimum: int | float = AGE_MIN
    maximum: int | float = AGE_MAX


class RulesConfig(BaseModel):
    """[rules] section."""

    model_config = {"frozen": True}

    name: NameRuleConfig = Field(default_factory=NameRuleConfig)
    age: AgeRuleConfig = Field(default_factory=AgeRuleConfig)


class VettedConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    rules: RulesConfig = Field(default_factory=RulesConfig)
