from __future__ import annotations

import re

from .utils import collapse_horizontal_whitespace, unify_bullets

_LINE_BREAK_RE = re.compile(r"\r\n|\r|[\x0b\x0c\x85\u2028\u2029]")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0e-\x1f\x7f\u200b-\u200d\ufeff]")
_BLANK_RUN_RE = re.compile(r"\n{3,}")

# Header synonym -> canonical uppercase form. Matched against whole lines only.
_HEADER_CANONICAL: dict[str, str] = {
    "personal information": "PERSONAL INFORMATION",
    "contact information": "CONTACT INFORMATION",
    "work experience": "WORK EXPERIENCE",
    "employment history": "EMPLOYMENT HISTORY",
    "professional experience": "PROFESSIONAL EXPERIENCE",
    "experience": "EXPERIENCE",
    "education": "EDUCATION",
    "academic background": "ACADEMIC BACKGROUND",
    "skills": "SKILLS",
    "technical skills": "TECHNICAL SKILLS",
    "competencies": "COMPETENCIES",
    "summary": "SUMMARY",
    "objective": "OBJECTIVE",
    "career objective": "CAREER OBJECTIVE",
    "professional summary": "PROFESSIONAL SUMMARY",
    "achievements": "ACHIEVEMENTS",
    "accomplishments": "ACCOMPLISHMENTS",
    "certifications": "CERTIFICATIONS",
    "languages": "LANGUAGES",
    "interests": "INTERESTS",
    "volunteer": "VOLUNTEER EXPERIENCE",
    "volunteer experience": "VOLUNTEER EXPERIENCE",
    "projects": "PROJECTS",
    "publications": "PUBLICATIONS",
    "awards": "AWARDS",
    "honors": "HONORS",
}


def canonicalize_header(line: str) -> str:
    key = line.rstrip(":").strip().lower()
    return _HEADER_CANONICAL.get(key, line)


def normalize_text(raw_text: str) -> str:
    """Clean document-extraction output into newline-separated, bullet-unified text.

    Never raises; empty input yields an empty string.
    """
    if not raw_text:
        return ""

    text = _LINE_BREAK_RE.sub("\n", raw_text)
    text = _CONTROL_RE.sub("", text)
    text = unify_bullets(text)

    lines = [canonicalize_header(collapse_horizontal_whitespace(line)) for line in text.split("\n")]
    text = "\n".join(lines)
    return _BLANK_RUN_RE.sub("\n\n", text).strip()
