from __future__ import annotations

import re

from resume_engine.core.config.scoring import get_scoring_value
from resume_engine.normalize.utils import is_bullet_like, non_empty_lines, strip_bullet_prefix
from resume_engine.schemas.resume import ParsedDocument, Project
from resume_engine.taxonomy import KeywordBankProvider, get_default_keyword_bank
from resume_engine.taxonomy.skill_vocabulary import word_pattern

_TECH_LABEL_RE = re.compile(
    r"^(?:technologies|technology|tech stack|tech|tools|built with|stack)\s*:\s*(?P<items>.+)$",
    re.IGNORECASE,
)
_URL_RE = re.compile(r"https?://\S+|(?:www\.|github\.com/|gitlab\.com/)\S+", re.IGNORECASE)
_NAME_SPLIT_RE = re.compile(r"\s+[|–—-]\s+|\s*\|\s*")
_ITEM_SPLIT_RE = re.compile(r"\s*[,;|]\s*")


def _split_items(raw: str) -> list[str]:
    return [item.strip(" .") for item in _ITEM_SPLIT_RE.split(raw) if item.strip(" .")]


def _is_title_line(line: str) -> bool:
    if is_bullet_like(line) or line.endswith("."):
        return False
    if _TECH_LABEL_RE.match(line) or _URL_RE.fullmatch(line):
        return False
    return len(line.split()) <= 8


class _ProjectDraft:
    def __init__(self, title_line: str) -> None:
        parts = _NAME_SPLIT_RE.split(title_line, maxsplit=1)
        self.name = parts[0].strip()
        self.technologies: list[str] = _split_items(parts[1]) if len(parts) > 1 else []
        self.description: list[str] = []
        self.url: str | None = None

    @property
    def has_body(self) -> bool:
        return bool(self.description or self.url)

    def add_line(self, line: str) -> None:
        tech = _TECH_LABEL_RE.match(line)
        if tech:
            self.technologies.extend(_split_items(tech.group("items")))
            return
        url = _URL_RE.search(line)
        if url and self.url is None:
            self.url = url.group(0).rstrip(".,)")
            remainder = _URL_RE.sub("", line).strip(" :-|")
            if not remainder or remainder.lower() in {"link", "url", "demo", "repo", "github"}:
                return
        self.description.append(strip_bullet_prefix(line))

    def build(self) -> Project:
        return Project(
            name=self.name,
            description=" ".join(self.description),
            technologies=list(dict.fromkeys(self.technologies)),
            url=self.url,
        )


def extract_projects(doc: ParsedDocument) -> list[Project]:
    section = doc.section_text("PROJECTS")
    if not section:
        return []

    projects: list[Project] = []
    current: _ProjectDraft | None = None

    def flush_pending() -> None:
        nonlocal current
        if current is not None and current.name:
            projects.append(current.build())
        current = None

    for raw_line in section.split("\n"):
        line = raw_line.strip()
        if not line:
            flush_pending()
            continue
        if current is None or (current.has_body and _is_title_line(line)):
            flush_pending()
            current = _ProjectDraft(strip_bullet_prefix(line))
            continue
        current.add_line(line)

    flush_pending()
    return projects


def extract_certifications(doc: ParsedDocument, keyword_bank: KeywordBankProvider | None = None) -> list[str]:
    bank = keyword_bank or get_default_keyword_bank()
    limit = int(get_scoring_value("certifications.max_count", 10))
    found: list[str] = []
    seen: set[str] = set()

    def add(name: str) -> None:
        key = name.lower()
        if len(found) < limit and len(name) >= 2 and key not in seen:
            seen.add(key)
            found.append(name)

    section = doc.section_text("CERTIFICATIONS")
    for line in non_empty_lines(section or ""):
        add(strip_bullet_prefix(line).strip(" .,;"))

    text = doc.normalized_text
    for _industry, keywords in bank.items():
        for cert in keywords.certifications:
            pattern = re.compile(word_pattern(cert).pattern) if cert.isupper() else word_pattern(cert)
            if pattern.search(text):
                add(cert)
    return found
