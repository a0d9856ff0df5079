from __future__ import annotations

import re

from resume_engine.normalize.utils import non_empty_lines
from resume_engine.schemas.resume import ParsedDocument, Skill, Summary, WorkExperience

_TITLE_NOUNS = (
    "engineer|developer|manager|analyst|coordinator|specialist|director|consultant|designer"
    "|technician|administrator|architect|scientist|nurse|accountant|representative|supervisor"
    "|electrician|plumber|officer|executive|programmer|recruiter|therapist|pharmacist|auditor"
)
_TITLE_RE = re.compile(
    r"\b(?:(?:Senior|Sr\.?|Junior|Jr\.?|Lead|Principal|Chief|Head|Staff|Associate|Assistant)[ \t]+)?"
    r"(?:[A-Z][A-Za-z&/+\-]*[ \t]+){0,3}"
    rf"(?i:{_TITLE_NOUNS})\b"
)
_LEADING_ADJECTIVES = frozenset(
    {
        "experienced", "dedicated", "motivated", "passionate", "results-driven", "detail-oriented",
        "skilled", "seasoned", "dynamic", "accomplished", "highly", "self-motivated", "certified",
        "licensed", "professional", "a", "an", "i",
    }
)
_YEARS_RE = re.compile(
    r"(\d+)\s*\+?\s*(?:years?|yrs?)\.?\s*(?:of\s+)?(?:[A-Za-z\-]+\s+)?experience", re.IGNORECASE
)


def find_title(text: str | None) -> str | None:
    if not text:
        return None
    match = _TITLE_RE.search(text)
    if match is None:
        return None
    words = match.group(0).split()
    while len(words) > 1 and words[0].lower() in _LEADING_ADJECTIVES:
        words.pop(0)
    return " ".join(words)


def find_years_experience(*texts: str | None) -> int:
    for text in texts:
        if not text:
            continue
        match = _YEARS_RE.search(text)
        if match:
            return int(match.group(1))
    return 0


def extract_summary(
    doc: ParsedDocument,
    experience: list[WorkExperience] | None = None,
    skills: list[Skill] | None = None,
) -> Summary:
    summary_text = doc.section_text("SUMMARY")
    objective = " ".join(non_empty_lines(summary_text)) if summary_text else None
    header_text = doc.section_text("HEADER", "PERSONAL")

    title = find_title(summary_text) or find_title(header_text)
    if title is None and experience:
        title = experience[0].job_title

    return Summary(
        current_title=title,
        years_experience=find_years_experience(summary_text, doc.normalized_text),
        key_skills=[skill.name for skill in (skills or [])[:5]],
        career_objective=objective or None,
    )
