from __future__ import annotations

import re
from typing import cast

from resume_engine.core.config import settings
from resume_engine.core.config.scoring import get_scoring_value
from resume_engine.normalize.utils import strip_bullet_prefix
from resume_engine.schemas.resume import ParsedDocument, Skill, SkillLevel
from resume_engine.taxonomy import SkillVocabulary, get_default_skill_vocabulary
from resume_engine.taxonomy.skill_vocabulary import word_pattern

from .personal import EMAIL_RE, PHONE_PATTERNS

_LEVEL_TOKEN_RE = re.compile(
    r"^(?P<name>.+?)\s*(?:[-–—:]\s*|\()\s*(?P<level>beginner|intermediate|advanced|expert)\)?$",
    re.IGNORECASE,
)
_CATEGORY_LINE_RE = re.compile(r"^(?P<label>[A-Za-z][A-Za-z &/]{1,40}):\s*(?P<items>.+)$")
_TOKEN_SPLIT_RE = re.compile(r"[,;\n•|]")
_ITEM_SPLIT_RE = re.compile(r"[,;|•]")
_NUMERIC_RE = re.compile(r"^[\d\s.,%+\-/]+$")
_URL_LIKE_RE = re.compile(r"https?://|www\.|\.(?:com|org|net|io)\b", re.IGNORECASE)
_STREET_NUMBER_RE = re.compile(r"^\d+\s+\w+")


def _clean(raw: str) -> str:
    return strip_bullet_prefix(raw).strip(" \t.,;:-*•")


def is_valid_skill(name: str, vocabulary: SkillVocabulary) -> bool:
    min_length = int(get_scoring_value("skills.min_length", 3))
    max_length = int(get_scoring_value("skills.max_length", 50))
    max_words = int(get_scoring_value("skills.max_words", 6))
    if not (min_length <= len(name) < max_length) or len(name.split()) > max_words:
        return False
    lowered = name.lower()
    if _NUMERIC_RE.match(name) or lowered in vocabulary.invalid_skills:
        return False
    if EMAIL_RE.search(name) or _URL_LIKE_RE.search(name):
        return False
    if any(pattern.search(name) for _label, pattern in PHONE_PATTERNS):
        return False
    return lowered not in vocabulary.address_parts and not _STREET_NUMBER_RE.match(name)


class _SkillCollector:
    def __init__(self, vocabulary: SkillVocabulary, limit: int) -> None:
        self.vocabulary = vocabulary
        self.limit = limit
        self.skills: list[Skill] = []
        self._seen: set[str] = set()

    @property
    def full(self) -> bool:
        return len(self.skills) >= self.limit

    def add(self, raw: str, level: SkillLevel = "intermediate") -> None:
        name = _clean(raw)
        key = name.lower()
        if self.full or key in self._seen or not is_valid_skill(name, self.vocabulary):
            return
        self._seen.add(key)
        self.skills.append(Skill(name=name, category=self.vocabulary.categorize(name), level=level))


def _explicit_levels(section: str, collector: _SkillCollector) -> None:
    for token in _TOKEN_SPLIT_RE.split(section):
        match = _LEVEL_TOKEN_RE.match(token.strip())
        if match:
            collector.add(match.group("name"), level=cast(SkillLevel, match.group("level").lower()))


def _labeled_groups(section: str, collector: _SkillCollector) -> None:
    for line in section.split("\n"):
        match = _CATEGORY_LINE_RE.match(_clean(line))
        if match:
            for item in _ITEM_SPLIT_RE.split(match.group("items")):
                if not _LEVEL_TOKEN_RE.match(item.strip()):
                    collector.add(item)


def _section_tokens(section: str, collector: _SkillCollector) -> None:
    for token in _TOKEN_SPLIT_RE.split(section):
        token = token.strip()
        if not token or ":" in token or _LEVEL_TOKEN_RE.match(token):
            continue
        collector.add(token)


def _known_vocabulary(text: str, collector: _SkillCollector) -> None:
    for names in collector.vocabulary.known.values():
        for name in names:
            if collector.full:
                return
            if word_pattern(name).search(text) and not collector.vocabulary.collides(name, text):
                collector.add(name)


def extract_skills(doc: ParsedDocument, *, vocabulary: SkillVocabulary | None = None) -> list[Skill]:
    collector = _SkillCollector(vocabulary or get_default_skill_vocabulary(), settings.max_skills)
    section = doc.section_text("SKILLS")
    if section:
        _explicit_levels(section, collector)
        _labeled_groups(section, collector)
        _section_tokens(section, collector)
    _known_vocabulary(doc.normalized_text, collector)
    return collector.skills
