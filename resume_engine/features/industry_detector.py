from __future__ import annotations

import logging
import re

from resume_engine.schemas.keywords import IndustryKeywords
from resume_engine.schemas.resume import PLACEHOLDER_ACHIEVEMENT, PLACEHOLDER_JOB_DESCRIPTION, ParseResult
from resume_engine.taxonomy import GENERAL_INDUSTRY, KeywordBankProvider, get_default_keyword_bank
from resume_engine.taxonomy.skill_vocabulary import word_pattern

logger = logging.getLogger(__name__)

_PLACEHOLDERS = {PLACEHOLDER_ACHIEVEMENT, PLACEHOLDER_JOB_DESCRIPTION}


def _cue_hit(keywords: IndustryKeywords, text: str) -> bool:
    # Cues are word prefixes ("plumb" covers plumber and plumbing).
    return any(re.search(rf"\b{re.escape(cue)}", text, re.IGNORECASE) for cue in keywords.cues)


def _matches_vocabulary(name: str, vocabulary: tuple[str, ...]) -> bool:
    name_pattern = word_pattern(name)
    return any(name_pattern.search(term) or word_pattern(term).search(name) for term in vocabulary)


def _experience_text(result: ParseResult) -> str:
    chunks: list[str] = []
    for entry in result.experience:
        if entry.job_description not in _PLACEHOLDERS:
            chunks.append(entry.job_description)
        chunks.extend(item for item in entry.achievements if item not in _PLACEHOLDERS)
    return "\n".join(chunks).lower()


def score_industry(keywords: IndustryKeywords, result: ParseResult) -> int:
    score = 0
    for entry in result.experience:
        if _cue_hit(keywords, f"{entry.company_name} {entry.job_title}"):
            score += 3

    descriptions = _experience_text(result)
    if descriptions:
        score += sum(1 for skill in keywords.skills if skill.lower() in descriptions)

    vocabulary = keywords.skills + keywords.certifications + keywords.tools
    parsed_names = [skill.name for skill in result.skills] + list(result.certifications)
    score += 2 * sum(1 for name in parsed_names if _matches_vocabulary(name, vocabulary))
    return score


def score_industries(result: ParseResult, keyword_bank: KeywordBankProvider | None = None) -> dict[str, int]:
    bank = keyword_bank or get_default_keyword_bank()
    return {name: score_industry(keywords, result) for name, keywords in bank.items()}


def _best(scores: dict[str, int]) -> str:
    # Strict comparison keeps the earliest industry in bank order on ties.
    best_name, best_score = GENERAL_INDUSTRY, 0
    for name, score in scores.items():
        if score > best_score:
            best_name, best_score = name, score
    return best_name


def detect_industry(result: ParseResult, keyword_bank: KeywordBankProvider | None = None) -> str:
    scores = score_industries(result, keyword_bank)
    industry = _best(scores)
    logger.debug("industry_detected industry=%s scores=%s", industry, scores)
    return industry


def detect_industry_from_text(text: str, keyword_bank: KeywordBankProvider | None = None) -> str:
    """Score a free-text snippet by cue, skill, tool and certification hits."""
    bank = keyword_bank or get_default_keyword_bank()
    scores: dict[str, int] = {}
    for name, keywords in bank.items():
        score = sum(1 for cue in keywords.cues if re.search(rf"\b{re.escape(cue)}", text, re.IGNORECASE))
        vocabulary = keywords.skills + keywords.tools + keywords.certifications
        score += sum(1 for term in vocabulary if word_pattern(term).search(text))
        scores[name] = score
    return _best(scores)
