from __future__ import annotations

import logging

from resume_engine.extractors import (
    extract_certifications,
    extract_education,
    extract_experience,
    extract_personal_info,
    extract_projects,
    extract_skills,
    extract_summary,
)
from resume_engine.features import (
    FALLBACK_SUGGESTION,
    calculate_confidence,
    detect_industry,
    generate_suggestions,
)
from resume_engine.normalize import normalize_text
from resume_engine.schemas.resume import ParsedDocument, ParseResult
from resume_engine.taxonomy import KeywordBankProvider, get_default_keyword_bank

from .sections import PREAMBLE, segment_sections

logger = logging.getLogger(__name__)


def build_parsed_document(raw_text: str) -> ParsedDocument:
    normalized = normalize_text(raw_text)
    return ParsedDocument(raw_text=raw_text, normalized_text=normalized, sections=segment_sections(normalized))


def build_fallback_result() -> ParseResult:
    return ParseResult(confidence=0.0, suggestions=[FALLBACK_SUGGESTION])


def _parse(raw_text: str, keyword_bank: KeywordBankProvider) -> ParseResult:
    doc = build_parsed_document(raw_text)
    personal = extract_personal_info(doc)
    experience = extract_experience(doc)
    education = extract_education(doc, experience)
    skills = extract_skills(doc)
    result = ParseResult(
        personal=personal,
        summary=extract_summary(doc, experience, skills),
        experience=experience,
        education=education,
        skills=skills,
        projects=extract_projects(doc),
        certifications=extract_certifications(doc, keyword_bank),
        sections=[name for name in doc.sections if name != PREAMBLE],
    )
    result.detected_industry = detect_industry(result, keyword_bank)
    result.confidence = calculate_confidence(result)
    result.suggestions = generate_suggestions(result)
    return result


def parse_resume_text(raw_text: str, *, keyword_bank: KeywordBankProvider | None = None) -> ParseResult:
    """Parse extracted resume text into a structured result.

    Content problems never raise: unexpected failures are logged and yield the fallback
    result with zero confidence.
    """
    try:
        result = _parse(raw_text or "", keyword_bank or get_default_keyword_bank())
    except Exception:
        logger.exception("resume_parse_failed chars=%d", len(raw_text) if isinstance(raw_text, str) else -1)
        return build_fallback_result()

    logger.info(
        "resume_parse_complete industry=%s confidence=%.2f sections=%s",
        result.detected_industry,
        result.confidence,
        ",".join(result.sections) or "-",
    )
    return result
