from __future__ import annotations

import re
from typing import Iterable

from resume_engine.normalize.utils import is_bullet_like, non_empty_lines, strip_bullet_prefix
from resume_engine.schemas.resume import (
    PLACEHOLDER_DEGREE,
    PLACEHOLDER_EDUCATION_ACHIEVEMENT,
    PLACEHOLDER_MAJOR,
    Education,
    ParsedDocument,
    WorkExperience,
)

_NAME_WORD = r"[A-Z][A-Za-z.&'’\-]*"
# Campus or city suffixes ("at Austin", "- Ann Arbor") must not start with a degree.
_NOT_DEGREE = (
    r"(?!(?:B\.?[AS]|M\.?[AS]|MBA|BSc|MSc|Ph\.?D|A\.?A|B\.?Eng|M\.?Eng"
    r"|Bachelor|Master|Associate|Doctor)(?![a-z]))"
)
INSTITUTION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        rf"\b(?:{_NAME_WORD}\s+){{0,5}}(?:University|College|Institute|School|Academy|Polytechnic)"
        rf"(?:[ \t]+(?:of|at|[-–])[ \t]+{_NOT_DEGREE}{_NAME_WORD}(?:[ \t]+{_NAME_WORD})*)*"
    ),
    re.compile(
        r"\b(?:MIT|UCLA|NYU|USC|Caltech|Georgia Tech|Virginia Tech|Texas A&M|Carnegie Mellon"
        r"|Johns Hopkins|Penn State|Purdue)\b"
    ),
)
_INSTITUTION_BLOCKLIST_RE = re.compile(r"\b(?:current|college student|experience|just)\b", re.IGNORECASE)

_MAJOR = rf"{_NAME_WORD}(?:[ \t]+(?:{_NAME_WORD}|and|of|&))*"
_LONG_DEGREE_RE = re.compile(
    r"\b(?P<level>(?i:bachelor|master|associate)(?:'s|’s)?|(?i:doctor(?:ate)?)|Ph\.?\s?D\.?)(?![A-Za-z])"
    r"(?:[ \t]+(?i:of)[ \t]+(?P<field>Science|Arts|Business Administration|Engineering|Fine Arts|Applied Science|Philosophy))?"
    rf"(?:[ \t]+(?:(?i:degree)[ \t]+)?(?i:in)[ \t]+(?P<major>{_MAJOR}))?"
)
_ABBREV_DEGREE_RE = re.compile(
    r"(?<![A-Za-z])(?P<level>B\.S\.|B\.A\.|M\.S\.|M\.A\.|B\.Sc\.?|M\.Sc\.?|BSc|MSc|BS|BA|MS|MBA"
    r"|Ph\.?D\.?|A\.A\.S?\.?|AAS|B\.Eng\.?|M\.Eng\.?|BEng|MEng)(?=[\s,]|$)"
    rf"(?:[ \t]*(?:in[ \t]+|,[ \t]*|[-–][ \t]*)?(?P<major>{_MAJOR}))?"
)
_MAJOR_STOP_RE = re.compile(r"\s+(?:GPA|Graduated|Expected|Class|Honors|Minor)\b.*$")
_YEAR_RE = re.compile(r"\b(19\d{2}|20\d{2})\b")
_FORWARD_LINES = 3
_GPA_RE = re.compile(r"\bGPA\s*:?\s*(\d\.\d{1,2})|(\d\.\d{1,2})\s*GPA\b", re.IGNORECASE)


def find_institution(line: str) -> str | None:
    for pattern in INSTITUTION_PATTERNS:
        match = pattern.search(line)
        if match:
            return match.group(0).strip(" ,.-")
    return None


def find_degree(text: str) -> tuple[str, str] | None:
    """Return (degree, major) from long-form or abbreviated degree mentions."""
    long_form = _LONG_DEGREE_RE.search(text)
    if long_form:
        degree = long_form.group("level")
        if long_form.group("field"):
            degree = f"{degree} of {long_form.group('field')}"
        return degree, _clean_major(long_form.group("major"))
    abbreviated = _ABBREV_DEGREE_RE.search(text)
    if abbreviated:
        return abbreviated.group("level"), _clean_major(abbreviated.group("major"))
    return None


def _clean_major(raw: str | None) -> str:
    if not raw:
        return PLACEHOLDER_MAJOR
    major = _MAJOR_STOP_RE.sub("", raw).strip(" ,.-")
    return major or PLACEHOLDER_MAJOR


def _graduation_year(window: str) -> str | None:
    years = _YEAR_RE.findall(window)
    return max(years) if years else None


def _gpa(window: str) -> str | None:
    match = _GPA_RE.search(window)
    if match is None:
        return None
    return match.group(1) or match.group(2)


def _is_blocked(institution: str, company_names: Iterable[str]) -> bool:
    if _INSTITUTION_BLOCKLIST_RE.search(institution):
        return True
    lowered = institution.lower()
    return any(lowered == company or lowered in company for company in company_names)


def _achievements_after(lines: list[str], index: int) -> list[str]:
    found: list[str] = []
    for line in lines[index + 1:index + 1 + _FORWARD_LINES]:
        if find_institution(line):
            break
        if is_bullet_like(line):
            found.append(strip_bullet_prefix(line))
    return found or [PLACEHOLDER_EDUCATION_ACHIEVEMENT]


def _entry_window(lines: list[str], index: int, starts: list[int]) -> str:
    """Lines describing the institution at ``index``, never crossing into a neighbouring entry.

    The institution line and up to two following lines come first. The line above
    is borrowed only when those hold no degree and no earlier institution owns it.
    """
    position = starts.index(index)
    stop = starts[position + 1] if position + 1 < len(starts) else len(lines)
    own = lines[index:min(index + _FORWARD_LINES, stop)]
    if find_degree("\n".join(own)) is None and index > 0:
        previous = starts[position - 1] if position > 0 else None
        if previous is None or index - 1 >= previous + _FORWARD_LINES:
            own = [lines[index - 1], *own]
    return "\n".join(own)


def extract_education(doc: ParsedDocument, experience: list[WorkExperience] | None = None) -> list[Education]:
    lines = non_empty_lines(doc.text_for("EDUCATION"))
    company_names = {entry.company_name.lower() for entry in experience or []}
    starts = [index for index, line in enumerate(lines) if find_institution(line)]
    entries: list[Education] = []
    seen: set[str] = set()

    for index in starts:
        institution = find_institution(lines[index])
        if not institution or _is_blocked(institution, company_names):
            continue
        key = institution.lower()
        if key in seen:
            continue
        seen.add(key)

        window = _entry_window(lines, index, starts)
        degree, major = find_degree(window) or (PLACEHOLDER_DEGREE, PLACEHOLDER_MAJOR)
        if institution in major:
            major = major.replace(institution, "").strip(" ,.-") or PLACEHOLDER_MAJOR
        entries.append(
            Education(
                institution=institution,
                degree=degree,
                major=major,
                graduation_date=_graduation_year(window),
                gpa=_gpa(window),
                achievements=_achievements_after(lines, index),
            )
        )

    if not entries and doc.section_text("EDUCATION"):
        education_text = doc.section_text("EDUCATION") or ""
        found = find_degree(education_text)
        if found is not None:
            degree, major = found
            entries.append(
                Education(degree=degree, major=major, graduation_date=_graduation_year(education_text), gpa=_gpa(education_text))
            )
    return entries
