from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator

EMAIL_VALIDATION_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[a-zA-Z]{2,}$")

PLACEHOLDER_ACHIEVEMENT = "Please add specific achievements and responsibilities"
PLACEHOLDER_JOB_DESCRIPTION = "Please add job description"
PLACEHOLDER_DEGREE = "Degree to be specified"
PLACEHOLDER_MAJOR = "Field of study to be specified"
PLACEHOLDER_EDUCATION_ACHIEVEMENT = "Please add relevant coursework, honors, or achievements"

SkillCategory = Literal["technical", "soft", "industry"]
SkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]


class SectionBlock(BaseModel):
    start: int
    end: int
    content: str


class ParsedDocument(BaseModel):
    raw_text: str
    normalized_text: str
    sections: dict[str, SectionBlock] = Field(default_factory=dict)

    @property
    def is_segmented(self) -> bool:
        return any(name != "HEADER" for name in self.sections)

    def section_text(self, *names: str) -> str | None:
        for name in names:
            block = self.sections.get(name)
            if block is not None and block.content.strip():
                return block.content
        return None

    def text_for(self, *names: str) -> str:
        """Content of the first non-empty named section, else the full normalized text."""
        found = self.section_text(*names)
        return found if found is not None else self.normalized_text


class PersonalInfo(BaseModel):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if not EMAIL_VALIDATION_RE.match(value):
            raise ValueError("email must look like name@domain.tld")
        return value


class Summary(BaseModel):
    current_title: str | None = None
    years_experience: int = Field(default=0, ge=0)
    key_skills: list[str] = Field(default_factory=list)
    career_objective: str | None = None


class WorkExperience(BaseModel):
    company_name: str = Field(min_length=1)
    job_title: str = Field(min_length=1)
    start_date: str | None = None
    end_date: str | None = None
    location: str | None = None
    job_description: str = PLACEHOLDER_JOB_DESCRIPTION
    achievements: list[str] = Field(default_factory=lambda: [PLACEHOLDER_ACHIEVEMENT])

    @property
    def has_placeholder_achievements(self) -> bool:
        return not self.achievements or self.achievements == [PLACEHOLDER_ACHIEVEMENT]


class Education(BaseModel):
    institution: str = ""
    degree: str = PLACEHOLDER_DEGREE
    major: str = PLACEHOLDER_MAJOR
    graduation_date: str | None = None
    gpa: str | None = None
    achievements: list[str] = Field(default_factory=lambda: [PLACEHOLDER_EDUCATION_ACHIEVEMENT])


class Skill(BaseModel):
    name: str
    category: SkillCategory = "industry"
    level: SkillLevel = "intermediate"


class Project(BaseModel):
    name: str
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    url: str | None = None


class ParseResult(BaseModel):
    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: Summary = Field(default_factory=Summary)
    experience: list[WorkExperience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    sections: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    suggestions: list[str] = Field(default_factory=list)
    detected_industry: str = "general"
