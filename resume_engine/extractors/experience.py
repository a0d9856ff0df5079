from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from resume_engine.normalize.utils import is_bullet_like, non_empty_lines, strip_bullet_prefix
from resume_engine.schemas.resume import (
    PLACEHOLDER_ACHIEVEMENT,
    PLACEHOLDER_JOB_DESCRIPTION,
    ParsedDocument,
    WorkExperience,
)

from .personal import extract_email, extract_linkedin, extract_phone, extract_portfolio
from .strategies import Strategy, run_strategies

logger = logging.getLogger(__name__)

_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?"
)
_DATE = rf"(?:{_MONTH}\s+\d{{4}}|\d{{1,2}}/\d{{1,2}}/\d{{4}}|\d{{1,2}}/\d{{4}}|\d{{4}})"
_OPEN_END = r"(?:present|current|now|today)"

DATE_RANGE_RE = re.compile(
    rf"(?<![\w/])(?P<start>{_DATE})\s*(?:[-–—]+|to|until)\s*(?P<end>{_DATE}|{_OPEN_END})(?![\w/])",
    re.IGNORECASE,
)
_SINGLE_DATE_RE = re.compile(rf"^\(?(?P<start>{_DATE})\)?$", re.IGNORECASE)

_VERB_CUE_RE = re.compile(
    r"^\s*(?:responsible\s+for|built|led|managed|designed|developed|implemented|created|delivered"
    r"|improved|reduced|increased|scaled|launched|optimized|engineered|owned|drove|supported"
    r"|installed|repaired|maintained|coordinated|assisted|handled|provided|performed|achieved"
    r"|collaborated|trained|supervised|oversaw|resolved|diagnosed|conducted|prepared|processed"
    r"|worked|helped|served|ensured|organized|analyzed|generated|negotiated|established)\b",
    re.IGNORECASE,
)

_TITLE_WORD_RE = re.compile(
    r"\b(?:engineer|developer|manager|analyst|coordinator|specialist|director|consultant|designer"
    r"|technician|administrator|architect|scientist|nurse|accountant|representative|supervisor"
    r"|electrician|plumber|officer|assistant|associate|executive|intern|lead|president|founder"
    r"|owner|clerk|cashier|agent|apprentice|installer|teacher|operator|programmer|contractor"
    r"|foreman|carpenter|mechanic|advisor|recruiter|therapist|pharmacist|banker|auditor)s?\b",
    re.IGNORECASE,
)
_COMPANY_WORD_RE = re.compile(
    r"\b(?:inc|llc|ltd|corp|corporation|co|company|group|gmbh|plc|technologies|solutions|services"
    r"|systems|partners|associates|hospital|bank|agency|labs?|enterprises|industries|holdings)\b\.?",
    re.IGNORECASE,
)
_PAIR_SPLIT_RE = re.compile(r"\s+[-–—|•]\s+|\s*\|\s*|\s+•\s*")
_TITLE_BULLET_COMPANY_RE = re.compile(r"^(?P<title>[^•|]+?)\s*[•|]\s*(?P<company>[^•|]+)$")
_AT_RE = re.compile(r"^(?P<title>.+?)\s+(?:at|@)\s+(?P<company>.+)$", re.IGNORECASE)
_EDGE_SEPARATORS = " \t,;|•-–—()"
_LOCATION_LINE_RE = re.compile(r"^[A-Z][a-zA-Z]+(?:[ .][A-Z][a-zA-Z]+){0,2},\s*[A-Z]{2}(?:\s+\d{5})?$")


def looks_like_title(text: str) -> bool:
    return bool(_TITLE_WORD_RE.search(text))


def looks_like_company(text: str) -> bool:
    return bool(_COMPANY_WORD_RE.search(text))


def normalize_end_date(value: str) -> str:
    return "Present" if re.fullmatch(_OPEN_END, value.strip(), re.IGNORECASE) else value.strip()


def find_date_range(line: str) -> tuple[str, str, str] | None:
    """Return (start, end, line without the range) when the line carries a date range."""
    match = DATE_RANGE_RE.search(line)
    if match is None:
        return None
    remainder = f"{line[:match.start()]} {line[match.end():]}".strip(_EDGE_SEPARATORS)
    return match.group("start"), normalize_end_date(match.group("end")), remainder


def date_only(line: str) -> tuple[str, str | None] | None:
    found = find_date_range(line)
    if found is not None:
        start, end, remainder = found
        return (start, end) if not remainder else None
    single = _SINGLE_DATE_RE.match(line.strip())
    if single:
        return single.group("start"), None
    return None


def _clean(part: str) -> str:
    return re.sub(r"\s+", " ", part).strip(_EDGE_SEPARATORS)


def _orient_pair(first: str, second: str) -> dict[str, str]:
    """Default reading is Company - Title; swap when only the first part reads as a title."""
    if looks_like_title(first) and not looks_like_title(second):
        return {"title": first, "company": second}
    return {"company": first, "title": second}


def is_contact_line(line: str) -> bool:
    return bool(extract_email(line) or extract_phone(line) or extract_linkedin(line) or extract_portfolio(line, ""))


def _guarded(line: str) -> bool:
    if is_bullet_like(line) or is_contact_line(line):
        return False
    if _VERB_CUE_RE.match(line) and not _company_led_pair(line):
        return False
    return len(line.split()) <= 10 and not line.endswith(".")


@dataclass
class _HeaderCandidate:
    line: str
    next_line: str | None
    start_date: str | None = None
    end_date: str | None = None
    remainder: str = ""

    @classmethod
    def build(cls, line: str, next_line: str | None) -> _HeaderCandidate:
        candidate = cls(line=line, next_line=next_line, remainder=line)
        found = find_date_range(line)
        if found is not None:
            candidate.start_date, candidate.end_date, candidate.remainder = found
        return candidate

    @property
    def dated(self) -> bool:
        return self.start_date is not None


def _split_pair(text: str) -> list[str]:
    return [_clean(part) for part in _PAIR_SPLIT_RE.split(text) if _clean(part)]


def _company_led_pair(text: str) -> bool:
    """Company - Title lines whose company name happens to open with an action verb."""
    parts = _split_pair(text)
    return len(parts) == 2 and looks_like_company(parts[0]) and looks_like_title(parts[1])


def _without_dates(line: str) -> str:
    found = find_date_range(line)
    return found[2] if found is not None else line


def _company_title_dates(candidate: _HeaderCandidate) -> dict[str, str] | None:
    if not candidate.dated:
        return None
    parts = _split_pair(candidate.remainder)
    if len(parts) != 2:
        return None
    return _orient_pair(parts[0], parts[1])


def _title_at_company(candidate: _HeaderCandidate) -> dict[str, str] | None:
    if not candidate.dated and not _guarded(candidate.line):
        return None
    match = _AT_RE.match(candidate.remainder)
    if match is None:
        return None
    title, company = _clean(match.group("title")), _clean(match.group("company"))
    if not candidate.dated and not (looks_like_title(title) or looks_like_company(company)):
        return None
    return {"title": title, "company": company}


def _dated_line_then_title_bullet_company(candidate: _HeaderCandidate) -> dict[str, str] | None:
    if not candidate.dated or candidate.remainder or not candidate.next_line:
        return None
    match = _TITLE_BULLET_COMPANY_RE.match(candidate.next_line)
    if match is None:
        return None
    return {"title": _clean(match.group("title")), "company": _clean(match.group("company")), "consumed": "2"}


def _company_title_pair(candidate: _HeaderCandidate) -> dict[str, str] | None:
    if not _guarded(candidate.remainder):
        return None
    parts = _split_pair(candidate.remainder)
    if len(parts) != 2:
        return None
    first, second = parts
    if not any(looks_like_title(part) or looks_like_company(part) for part in parts):
        return None
    return _orient_pair(first, second)


def _title_comma_company(candidate: _HeaderCandidate) -> dict[str, str] | None:
    if not _guarded(candidate.remainder) or "," not in candidate.remainder:
        return None
    first, second = (_clean(part) for part in candidate.remainder.split(",", 1))
    if not first or not second:
        return None
    if looks_like_company(first) and looks_like_title(second):
        return {"company": first, "title": second}
    if looks_like_title(first) or looks_like_company(second):
        return {"title": first, "company": second}
    return None


# Priority order; the undated pair shapes come last.
ENTRY_STRATEGIES: tuple[Strategy[dict[str, str]], ...] = (
    Strategy("company_title_dates", _company_title_dates),
    Strategy("title_at_company_dates", _title_at_company),
    Strategy("dated_line_then_title_bullet_company", _dated_line_then_title_bullet_company),
    Strategy("company_title_pair", _company_title_pair),
    Strategy("title_comma_company", _title_comma_company),
)


@dataclass
class _DraftEntry:
    company_name: str
    job_title: str
    start_date: str | None = None
    end_date: str | None = None
    location: str | None = None
    description: str | None = None
    achievements: list[str] = field(default_factory=list)

    def is_valid(self) -> bool:
        return len(self.company_name) > 2 and len(self.job_title) > 2

    def build(self) -> WorkExperience:
        if not self.achievements:
            return WorkExperience(
                company_name=self.company_name,
                job_title=self.job_title,
                start_date=self.start_date,
                end_date=self.end_date,
                location=self.location,
                job_description=PLACEHOLDER_JOB_DESCRIPTION,
                achievements=[PLACEHOLDER_ACHIEVEMENT],
            )
        return WorkExperience(
            company_name=self.company_name,
            job_title=self.job_title,
            start_date=self.start_date,
            end_date=self.end_date,
            location=self.location,
            job_description=self.description or self.achievements[0],
            achievements=list(self.achievements),
        )


def match_entry_header(line: str, next_line: str | None = None) -> tuple[_DraftEntry, int] | None:
    """Try the entry strategies on a line; returns the draft and how many lines it used."""
    candidate = _HeaderCandidate.build(line, next_line)
    found = run_strategies(ENTRY_STRATEGIES, candidate, field="experience_entry")
    if not found:
        return None
    if next_line is not None and found.get("consumed") == "2":
        consumed = 2
    else:
        consumed = 1
    draft = _DraftEntry(
        company_name=found["company"],
        job_title=found["title"],
        start_date=candidate.start_date,
        end_date=candidate.end_date,
    )
    return draft, consumed


def extract_experience(doc: ParsedDocument) -> list[WorkExperience]:
    lines = non_empty_lines(doc.text_for("EXPERIENCE"))
    entries: list[WorkExperience] = []
    current: _DraftEntry | None = None

    def flush_pending() -> None:
        nonlocal current
        if current is None:
            return
        if current.is_valid():
            entries.append(current.build())
        else:
            logger.debug("experience_entry_dropped company=%r title=%r", current.company_name, current.job_title)
        current = None

    index = 0
    while index < len(lines):
        line = lines[index]
        next_line = lines[index + 1] if index + 1 < len(lines) else None

        bullet = is_bullet_like(line)
        if bullet or (_VERB_CUE_RE.match(line) and not _company_led_pair(_without_dates(line))):
            if current is not None:
                achievement = strip_bullet_prefix(line) if bullet else line
                if len(achievement) > 10:
                    current.achievements.append(achievement)
            index += 1
            continue

        header = match_entry_header(line, next_line)
        if header is not None:
            flush_pending()
            current, consumed = header
            index += consumed
            continue

        if current is not None:
            dates = date_only(line)
            if dates is not None:
                if current.start_date is None:
                    current.start_date, current.end_date = dates
            elif current.location is None and _LOCATION_LINE_RE.match(line):
                current.location = line
            elif current.description is None:
                current.description = line
        index += 1

    flush_pending()
    return entries
