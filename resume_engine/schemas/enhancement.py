from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

ExperienceLevel = Literal["entry", "mid", "senior", "executive"]
EXPERIENCE_LEVELS: tuple[str, ...] = ("entry", "mid", "senior", "executive")


class EnhancementContext(BaseModel):
    industry: str | None = None
    experience_level: str | None = None


class EnhancementSuggestions(BaseModel):
    action_verbs: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)


class EnhancementResult(BaseModel):
    original_text: str
    enhanced_text: str
    industry: str | None = None
    experience_level: ExperienceLevel = "entry"
    suggestions: EnhancementSuggestions = Field(default_factory=EnhancementSuggestions)
    improvements: list[str] = Field(default_factory=list)
