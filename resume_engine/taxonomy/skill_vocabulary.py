from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from resume_engine.schemas.resume import SkillCategory

from .keyword_bank import load_yaml_mapping

_DEFAULT_VOCABULARY_PATH = Path(__file__).with_name("skills.yaml")


@lru_cache(maxsize=1024)
def word_pattern(term: str) -> re.Pattern[str]:
    """Whole-word matcher that also works for terms like C++ or Node.js."""
    return re.compile(rf"(?<![A-Za-z0-9]){re.escape(term)}(?![A-Za-z0-9])", re.IGNORECASE)


class SkillVocabulary:
    def __init__(self, raw: Mapping[str, Any]) -> None:
        vocabulary = raw.get("vocabulary") or {}
        self.known: dict[SkillCategory, tuple[str, ...]] = {
            "technical": tuple(vocabulary.get("technical") or ()),
            "soft": tuple(vocabulary.get("soft") or ()),
            "industry": tuple(vocabulary.get("industry") or ()),
        }
        self.false_positives: dict[str, tuple[str, ...]] = {
            str(skill).lower(): tuple(str(form).lower() for form in forms)
            for skill, forms in (raw.get("false_positives") or {}).items()
        }
        categories = raw.get("category_keywords") or {}
        self._category_patterns: list[tuple[SkillCategory, list[re.Pattern[str]]]] = [
            ("technical", [word_pattern(str(term)) for term in categories.get("technical") or ()]),
            ("soft", [word_pattern(str(term)) for term in categories.get("soft") or ()]),
        ]
        self.invalid_skills = frozenset(str(item).lower() for item in raw.get("invalid_skills") or ())
        self.address_parts = frozenset(str(item).lower() for item in raw.get("address_parts") or ())

    @classmethod
    def from_yaml(cls, path: str | Path | None = None) -> SkillVocabulary:
        return cls(load_yaml_mapping(Path(path) if path else _DEFAULT_VOCABULARY_PATH))

    def categorize(self, name: str) -> SkillCategory:
        for category, patterns in self._category_patterns:
            if any(pattern.search(name) for pattern in patterns):
                return category
        return "industry"

    def collides(self, skill: str, text: str) -> bool:
        forms = self.false_positives.get(skill.lower())
        if not forms:
            return False
        lowered = text.lower()
        return any(form in lowered for form in forms)
