from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _compile(pattern: str) -> None:
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"invalid regex {pattern!r}: {exc}") from exc


class ContextRule(BaseModel):
    """Industry clause injected when any trigger word appears in the text."""

    model_config = ConfigDict(frozen=True)

    triggers: tuple[str, ...]
    action: Literal["append", "replace"]
    text: str
    improvement: str
    pattern: str | None = None
    unless: tuple[str, ...] = ()

    @field_validator("pattern")
    @classmethod
    def _validate_pattern(cls, value: str | None) -> str | None:
        if value is not None:
            _compile(value)
        return value

    @model_validator(mode="after")
    def _require_pattern_for_replace(self) -> ContextRule:
        if self.action == "replace" and not self.pattern:
            raise ValueError("replace rules need a pattern")
        return self


class IndustryKeywords(BaseModel):
    model_config = ConfigDict(frozen=True)

    action_verbs: tuple[str, ...]
    skills: tuple[str, ...]
    responsibilities: tuple[str, ...]
    achievement_templates: tuple[str, ...]
    certifications: tuple[str, ...]
    tools: tuple[str, ...]
    metrics: tuple[str, ...]
    cues: tuple[str, ...] = ()
    trade: bool = False
    context_rules: tuple[ContextRule, ...] = ()
    quantification_options: dict[str, tuple[str, ...]] = Field(default_factory=dict)

    @field_validator("action_verbs")
    @classmethod
    def _require_verbs(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("action_verbs must not be empty")
        return value


class ContentTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    pattern: str
    templates: tuple[str, ...]
    industries: tuple[str, ...]
    levels: tuple[str, ...]

    @field_validator("pattern")
    @classmethod
    def _validate_pattern(cls, value: str) -> str:
        _compile(value)
        return value

    def applies_to(self, industry: str, level: str) -> bool:
        industry_ok = "all" in self.industries or industry in self.industries
        return industry_ok and level in self.levels


class KeywordSearchResult(BaseModel):
    action_verbs: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
