from __future__ import annotations

import re

from resume_engine.normalize.utils import non_empty_lines
from resume_engine.schemas.resume import EMAIL_VALIDATION_RE, ParsedDocument, PersonalInfo

from .strategies import Strategy, run_strategies

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

_NAME_RE = re.compile(r"^[A-Z][A-Za-z'’\-]*\.?(?:\s+[A-Z][A-Za-z'’\-]*\.?){1,3}$")
_NAME_BLOCKLIST = frozenset(
    {
        "resume", "résumé", "cv", "curriculum", "vitae", "objective", "summary", "profile",
        "experience", "education", "skills", "contact", "information", "references", "page",
        "personal", "details", "address", "phone", "email", "linkedin", "portfolio",
        "engineer", "developer", "manager", "analyst", "coordinator", "specialist", "director",
        "consultant", "technician", "assistant", "designer", "nurse", "plumber", "electrician",
        "intern", "officer", "representative", "administrator", "supervisor", "associate",
        "senior", "junior", "lead", "university", "college", "inc", "llc", "ltd", "corp",
        "street", "avenue", "road",
    }
)

PHONE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("international", re.compile(r"\+\d{1,3}[\s.-]?\(?\d{1,4}\)?(?:[\s.-]?\d{2,4}){2,3}")),
    ("parenthesized", re.compile(r"\(\d{3}\)\s*\d{3}[\s.-]?\d{4}")),
    ("dash_or_dot", re.compile(r"(?<!\d)\d{3}[-.]\d{3}[-.]\d{4}(?!\d)")),
    ("space_separated", re.compile(r"(?<!\d)\d{3}\s\d{3}\s\d{4}(?!\d)")),
    ("bare_ten_digit", re.compile(r"(?<!\d)\d{10}(?!\d)")),
)

_LINKEDIN_RE = re.compile(
    r"(?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/in/([A-Za-z0-9_%@.\-]+)", re.IGNORECASE
)
_EXPLICIT_URL_RE = re.compile(r"(?:https?://|www\.)[^\s,;|()<>]+", re.IGNORECASE)
_BARE_DOMAIN_RE = re.compile(
    r"(?<![@\w.])[A-Za-z0-9][A-Za-z0-9\-]*(?:\.[A-Za-z0-9\-]+)*"
    r"\.(?:com|io|dev|net|org|me|co|app|site|tech|design)(?:/[^\s,;|()<>]*)?(?![\w])",
    re.IGNORECASE,
)

_LOCATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:location|address|based in)\s*:\s*([^\n|•]+)", re.IGNORECASE),
    re.compile(r"\b([A-Z][a-zA-Z]+(?:[ .][A-Z][a-zA-Z]+){0,2},\s*[A-Z]{2}\s+\d{5}(?:-\d{4})?)\b"),
    re.compile(r"\b([A-Z][a-zA-Z]+(?:[ .][A-Z][a-zA-Z]+){0,2},\s*[A-Z]{2})(?![A-Za-z])"),
)


def is_valid_name(line: str) -> bool:
    if not line or len(line) > 50 or "@" in line or any(char.isdigit() for char in line):
        return False
    if not _NAME_RE.match(line):
        return False
    tokens = {token.strip(".,'’-").lower() for token in line.split()}
    return not tokens & _NAME_BLOCKLIST


def _first_name_in(lines: list[str]) -> str | None:
    for line in lines:
        if is_valid_name(line):
            return line
    return None


def _name_from_preamble(doc: ParsedDocument) -> str | None:
    preamble = doc.section_text("HEADER")
    lines = non_empty_lines(preamble) if preamble is not None else non_empty_lines(doc.normalized_text)
    return _first_name_in(lines[:3])


def _name_from_leading_lines(doc: ParsedDocument) -> str | None:
    return _first_name_in(non_empty_lines(doc.normalized_text)[:15])


def _name_from_personal_section(doc: ParsedDocument) -> str | None:
    personal = doc.section_text("PERSONAL")
    return _first_name_in(non_empty_lines(personal)) if personal else None


NAME_STRATEGIES: tuple[Strategy[str], ...] = (
    Strategy("preamble_top_lines", _name_from_preamble),
    Strategy("leading_lines", _name_from_leading_lines),
    Strategy("personal_section", _name_from_personal_section),
)


def extract_email(text: str) -> str | None:
    for match in EMAIL_RE.finditer(text):
        candidate = match.group(0).rstrip(".")
        if EMAIL_VALIDATION_RE.match(candidate):
            return candidate
    return None


def extract_phone(text: str) -> str | None:
    for _name, pattern in PHONE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0).strip()
    return None


def extract_linkedin(text: str) -> str | None:
    for match in _LINKEDIN_RE.finditer(text):
        handle = match.group(1).rstrip("/.")
        if len(handle) < 3 or "@" in handle or ".com" in handle.lower():
            continue
        return f"https://linkedin.com/in/{handle}"
    return None


def extract_portfolio(text: str, header_text: str) -> str | None:
    for source, pattern in ((text, _EXPLICIT_URL_RE), (header_text, _BARE_DOMAIN_RE)):
        scrubbed = EMAIL_RE.sub(" ", source)
        for match in pattern.finditer(scrubbed):
            url = match.group(0).rstrip(".,/")
            if "linkedin" not in url.lower():
                return url
    return None


def extract_location(*texts: str) -> str | None:
    for text in texts:
        if not text:
            continue
        for pattern in _LOCATION_PATTERNS:
            match = pattern.search(text)
            if match:
                return match.group(1).strip(" ,")
    return None


def _header_text(doc: ParsedDocument) -> str:
    parts = [doc.section_text("HEADER"), doc.section_text("PERSONAL")]
    header = "\n".join(part for part in parts if part)
    if header:
        return header
    return "\n".join(non_empty_lines(doc.normalized_text)[:15])


def extract_personal_info(doc: ParsedDocument) -> PersonalInfo:
    text = doc.normalized_text
    header = _header_text(doc)
    return PersonalInfo(
        full_name=run_strategies(NAME_STRATEGIES, doc, field="full_name"),
        email=extract_email(header) or extract_email(text),
        phone=extract_phone(header) or extract_phone(text),
        location=extract_location(header, text),
        linkedin=extract_linkedin(text),
        portfolio=extract_portfolio(text, header),
    )
