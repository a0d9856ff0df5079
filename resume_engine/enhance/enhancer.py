from __future__ import annotations

import logging
import random
import re
from functools import lru_cache
from typing import Any, Mapping

from resume_engine.core.config import settings
from resume_engine.core.config.scoring import get_scoring_value
from resume_engine.features.industry_detector import detect_industry, detect_industry_from_text
from resume_engine.schemas.enhancement import (
    EXPERIENCE_LEVELS,
    EnhancementContext,
    EnhancementResult,
    EnhancementSuggestions,
)
from resume_engine.schemas.keywords import IndustryKeywords
from resume_engine.schemas.resume import ParseResult
from resume_engine.taxonomy import GENERAL_INDUSTRY, KeywordBankProvider, get_default_keyword_bank

logger = logging.getLogger(__name__)

WEAK_VERBS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (label, re.compile(pattern, re.IGNORECASE))
    for label, pattern in (
        ("did", r"\b(?:did|does|doing|do)\b"),
        ("worked", r"\b(?:worked|working)(?:\s+on)?\b"),
        ("helped", r"\b(?:helped|helping|helps|help)(?:\s+with)?\b"),
        ("made", r"\b(?:made|making|makes|make)\b"),
        ("got", r"\b(?:got|gotten|getting|gets|get)\b"),
        ("fixed", r"\b(?:fixed|fixing|fixes|fix)\b"),
        ("handled", r"\b(?:handled|handling|handles|handle)\b"),
    )
)

_EXISTING_METRIC_RE = re.compile(r"\d|%|\$|€|£|\{X\}")
_CUSTOMERS_RE = re.compile(r"\b(customers?|clients?)\b", re.IGNORECASE)
_PROJECTS_RE = re.compile(r"\bprojects?\b", re.IGNORECASE)
_SYSTEMS_RE = re.compile(r"\bsystems?\b", re.IGNORECASE)
_DAILY_RE = re.compile(r"\b(?:daily|per day|every day)\b", re.IGNORECASE)
COMPLETION_CLAUSE = " achieving {X}% completion rate and customer satisfaction"
_SENIOR_LEVELS = ("senior", "executive")
_FIRST_PERSON_RE = re.compile(r"^I\s+")


def _match_case(replacement: str, original: str) -> str:
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def _plural(noun: str) -> str:
    return noun if noun.lower().endswith("s") else f"{noun}s"


class ContentEnhancer:
    """Rewrites a snippet with industry vocabulary, stronger verbs and metric placeholders.

    Output is randomized through the injected `rng`; pass a seeded `random.Random`
    for reproducible results.
    """

    def __init__(self, keyword_bank: KeywordBankProvider | None = None, *, rng: random.Random | None = None) -> None:
        self.keyword_bank = keyword_bank or get_default_keyword_bank()
        self.rng = rng or random.Random(settings.random_seed)

    def resolve_level(self, experience_level: str | None) -> str:
        if not experience_level:
            return settings.default_experience_level
        level = experience_level.strip().lower()
        if level not in EXPERIENCE_LEVELS:
            logger.warning(
                "invalid_experience_level value=%s fallback=%s", experience_level, settings.default_experience_level
            )
            return settings.default_experience_level
        return level

    def resolve_industry(self, industry: str | None, text: str, parse_result: ParseResult | None = None) -> str:
        if industry and industry.strip():
            return industry.strip().lower()
        if parse_result is not None:
            return detect_industry(parse_result, self.keyword_bank)
        return detect_industry_from_text(text, self.keyword_bank)

    def suggestions_for(self, keywords: IndustryKeywords) -> EnhancementSuggestions:
        limits = get_scoring_value("enhancement.suggestion_limits", {}) or {}
        return EnhancementSuggestions(
            action_verbs=list(keywords.action_verbs[: int(limits.get("action_verbs", 8))]),
            skills=list(keywords.skills[: int(limits.get("skills", 10))]),
            achievements=list(keywords.achievement_templates[: int(limits.get("achievements", 6))]),
            certifications=list(keywords.certifications[: int(limits.get("certifications", 5))]),
        )

    def enhance(
        self,
        text: str,
        industry: str | None = None,
        experience_level: str | None = None,
        *,
        parse_result: ParseResult | None = None,
    ) -> EnhancementResult:
        if not isinstance(text, str):
            text = "" if text is None else str(text)
        level = self.resolve_level(experience_level)
        try:
            return self._enhance(text, industry, level, parse_result)
        except Exception:
            logger.exception("content_enhance_failed industry=%s level=%s", industry, level)
            return EnhancementResult(original_text=text, enhanced_text=text, industry=industry, experience_level=level)

    def _enhance(
        self,
        text: str,
        industry: str | None,
        level: str,
        parse_result: ParseResult | None,
    ) -> EnhancementResult:
        resolved = self.resolve_industry(industry, text, parse_result)
        keywords = self.keyword_bank.get_industry(resolved) if resolved != GENERAL_INDUSTRY else None
        if keywords is None or not text.strip():
            logger.info("content_enhance_skipped industry=%s empty=%s", resolved, not text.strip())
            return EnhancementResult(original_text=text, enhanced_text=text, industry=resolved, experience_level=level)

        improvements: list[str] = []
        enhanced = text.strip()

        enhanced, template_applied = self._apply_template(enhanced, resolved, level, improvements)
        enhanced = self._replace_weak_verbs(enhanced, keywords, improvements)
        if not template_applied:
            enhanced = self._apply_context_rules(enhanced, keywords, improvements)
        enhanced = self._quantify(enhanced, keywords, improvements)
        if not template_applied and level in _SENIOR_LEVELS:
            enhanced = self._frame_for_level(enhanced, level, improvements)
        enhanced = self._polish_casual_phrases(enhanced, improvements)
        enhanced = enhanced[:1].upper() + enhanced[1:]

        logger.debug("content_enhanced industry=%s level=%s improvements=%d", resolved, level, len(improvements))
        return EnhancementResult(
            original_text=text,
            enhanced_text=enhanced,
            industry=resolved,
            experience_level=level,
            suggestions=self.suggestions_for(keywords),
            improvements=improvements,
        )

    def _apply_template(self, text: str, industry: str, level: str, improvements: list[str]) -> tuple[str, bool]:
        for template in self.keyword_bank.templates:
            if not template.applies_to(industry, level):
                continue
            match = re.search(template.pattern, text, re.IGNORECASE)
            if match is None:
                continue
            item = match.group(2) if match.lastindex and match.lastindex >= 2 else None
            item = (item or "systems").strip().rstrip(".")
            rewritten = self.rng.choice(template.templates).replace("{item}", item)
            improvements.append(f"Applied {industry} industry template")
            return rewritten, True
        return text, False

    def _replace_weak_verbs(self, text: str, keywords: IndustryKeywords, improvements: list[str]) -> str:
        for _label, pattern in WEAK_VERBS:
            replaced: list[tuple[str, str]] = []

            def substitute(match: re.Match[str]) -> str:
                verb = _match_case(self.rng.choice(keywords.action_verbs), match.group(0))
                replaced.append((match.group(0), verb))
                return verb

            text = pattern.sub(substitute, text)
            improvements.extend(f'Replaced "{old}" with "{new}"' for old, new in replaced)
        return text

    def _apply_context_rules(self, text: str, keywords: IndustryKeywords, improvements: list[str]) -> str:
        for rule in keywords.context_rules:
            lowered = text.lower()
            if not any(trigger.lower() in lowered for trigger in rule.triggers):
                continue
            if any(word.lower() in lowered for word in rule.unless):
                continue
            if rule.action == "append":
                if rule.text.strip().lower() in lowered:
                    continue
                text = text.rstrip(" .") + rule.text
            else:
                updated = re.sub(rule.pattern or "", rule.text, text, count=1, flags=re.IGNORECASE)
                if updated == text:
                    continue
                text = updated
            improvements.append(rule.improvement)
        return text

    def _quantify(self, text: str, keywords: IndustryKeywords, improvements: list[str]) -> str:
        if _EXISTING_METRIC_RE.search(text):
            return text

        if _CUSTOMERS_RE.search(text):
            improvements.append("Added customer volume placeholder")
            return _CUSTOMERS_RE.sub(lambda m: "{X}+ " + _plural(m.group(1)), text, count=1)
        if _PROJECTS_RE.search(text):
            improvements.append("Added project count placeholder")
            return _PROJECTS_RE.sub("{X} projects", text, count=1)
        if keywords.trade and _SYSTEMS_RE.search(text):
            improvements.append("Added system count placeholder")
            return _SYSTEMS_RE.sub("{X}+ systems", text, count=1)
        if _DAILY_RE.search(text):
            improvements.append("Added daily frequency placeholder")
            return _DAILY_RE.sub("{X} times daily", text, count=1)
        improvements.append("Added completion rate placeholder")
        return text.rstrip(" .") + COMPLETION_CLAUSE

    def _frame_for_level(self, text: str, level: str, improvements: list[str]) -> str:
        text = _FIRST_PERSON_RE.sub("", text, count=1)
        if text.lower().startswith("led"):
            return text
        first_word = text.split(" ", 1)[0]
        lead_in = text if first_word.isupper() else text[:1].lower() + text[1:]
        improvements.append(f"Added leadership framing for {level} level")
        return f"Led and {lead_in}"

    def _polish_casual_phrases(self, text: str, improvements: list[str]) -> str:
        phrases = sorted(self.keyword_bank.casual_phrases.items(), key=lambda item: len(item[0]), reverse=True)
        for phrase, replacement in phrases:
            pattern = re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)
            if pattern.search(text):
                text = pattern.sub(replacement, text)
                improvements.append(f'Replaced casual phrase "{phrase}" with "{replacement}"')
        return text


@lru_cache(maxsize=1)
def get_default_enhancer() -> ContentEnhancer:
    return ContentEnhancer()


def enhance_text(
    snippet: str,
    context: EnhancementContext | Mapping[str, Any] | None = None,
    *,
    parse_result: ParseResult | None = None,
    enhancer: ContentEnhancer | None = None,
) -> EnhancementResult:
    """Enhance a free-text snippet; never raises for content problems."""
    if context is None:
        context = EnhancementContext()
    elif not isinstance(context, EnhancementContext):
        context = EnhancementContext.model_validate(dict(context))
    engine = enhancer or get_default_enhancer()
    return engine.enhance(snippet, context.industry, context.experience_level, parse_result=parse_result)
