from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Sequence

import yaml

from resume_engine.core.config.scoring import get_scoring_value
from resume_engine.schemas.keywords import ContentTemplate, IndustryKeywords, KeywordSearchResult

logger = logging.getLogger(__name__)

_DEFAULT_BANK_PATH = Path(__file__).with_name("industries.yaml")
GENERAL_INDUSTRY = "general"


def load_yaml_mapping(path: str | Path) -> dict[str, Any]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise RuntimeError(f"Invalid YAML in '{path}': {exc}") from exc
    if not isinstance(raw, dict):
        raise RuntimeError(f"Invalid data file '{path}': expected a top-level mapping.")
    return raw


def _dedupe_matches(values: Sequence[str], query: str, seen: set[str], out: list[str], limit: int) -> None:
    for value in values:
        if len(out) >= limit:
            return
        key = value.lower()
        if query in key and key not in seen:
            seen.add(key)
            out.append(value)


class KeywordBank:
    """Read-only industry taxonomy shared by the parser and the enhancer."""

    def __init__(
        self,
        industries: Mapping[str, IndustryKeywords],
        *,
        templates: Sequence[ContentTemplate] = (),
        casual_phrases: Mapping[str, str] | None = None,
        general_quantification: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        self._industries = MappingProxyType({key.strip().lower(): value for key, value in industries.items()})
        self._templates = tuple(templates)
        self._casual_phrases = MappingProxyType(dict(casual_phrases or {}))
        self._general_quantification = MappingProxyType(
            {key: tuple(values) for key, values in (general_quantification or {}).items()}
        )

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> KeywordBank:
        industries_raw = raw.get("industries") or {}
        if not isinstance(industries_raw, Mapping):
            raise ValueError("'industries' must be a mapping of industry id -> keywords")
        industries = {
            str(name): IndustryKeywords.model_validate(data) for name, data in industries_raw.items()
        }
        templates = [ContentTemplate.model_validate(item) for item in raw.get("content_templates") or []]
        return cls(
            industries,
            templates=templates,
            casual_phrases={str(k): str(v) for k, v in (raw.get("casual_phrases") or {}).items()},
            general_quantification=raw.get("general_quantification_options") or {},
        )

    @classmethod
    def from_yaml(cls, path: str | Path | None = None) -> KeywordBank:
        bank_path = Path(path) if path else _DEFAULT_BANK_PATH
        bank = cls.from_mapping(load_yaml_mapping(bank_path))
        logger.debug("keyword_bank_loaded path=%s industries=%d", bank_path, len(bank._industries))
        return bank

    def get_industry(self, name: str) -> IndustryKeywords | None:
        if not name:
            return None
        return self._industries.get(name.strip().lower())

    def list_industries(self) -> list[str]:
        return list(self._industries)

    def items(self) -> Iterator[tuple[str, IndustryKeywords]]:
        return iter(self._industries.items())

    @property
    def templates(self) -> tuple[ContentTemplate, ...]:
        return self._templates

    @property
    def casual_phrases(self) -> dict[str, str]:
        return dict(self._casual_phrases)

    def search_keywords(self, query: str, industry: str | None = None) -> KeywordSearchResult:
        needle = (query or "").strip().lower()
        if not needle:
            return KeywordSearchResult()

        if industry:
            keywords = self.get_industry(industry)
            sources = [keywords] if keywords is not None else []
        else:
            sources = list(self._industries.values())

        verb_limit = int(get_scoring_value("enhancement.search_limits.action_verbs", 10))
        skill_limit = int(get_scoring_value("enhancement.search_limits.skills", 15))
        tool_limit = int(get_scoring_value("enhancement.search_limits.tools", 10))

        verbs: list[str] = []
        skills: list[str] = []
        tools: list[str] = []
        seen_verbs: set[str] = set()
        seen_skills: set[str] = set()
        seen_tools: set[str] = set()
        for keywords in sources:
            _dedupe_matches(keywords.action_verbs, needle, seen_verbs, verbs, verb_limit)
            _dedupe_matches(keywords.skills, needle, seen_skills, skills, skill_limit)
            _dedupe_matches(keywords.tools, needle, seen_tools, tools, tool_limit)
        return KeywordSearchResult(action_verbs=verbs, skills=skills, tools=tools)

    def get_quantification_suggestions(self, industry: str | None) -> dict[str, list[str]]:
        keywords = self.get_industry(industry or "")
        if keywords is not None and keywords.quantification_options:
            options = keywords.quantification_options
        else:
            options = self._general_quantification
        return {key: list(values) for key, values in options.items()}
