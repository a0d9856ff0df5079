from __future__ import annotations

import logging
import re

from resume_engine.normalize.utils import is_bullet_like
from resume_engine.schemas.resume import SectionBlock

logger = logging.getLogger(__name__)

PREAMBLE = "HEADER"

# Priority order: the first matching pattern names the section.
SECTION_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (name, re.compile(pattern, re.IGNORECASE))
    for name, pattern in (
        ("PERSONAL", r"^(?:personal|contact)(?:\s*(?:information|info|details))?$"),
        (
            "SUMMARY",
            r"^(?:summary|objective|career\s*objective|professional\s*summary|career\s*summary"
            r"|profile|professional\s*profile|about\s*me)$",
        ),
        (
            "EXPERIENCE",
            r"^(?:work\s*experience|employment\s*history|professional\s*experience|experience"
            r"|employment|work\s*history|relevant\s*experience|career\s*history)$",
        ),
        (
            "EDUCATION",
            r"^(?:education|academic\s*background|academics?|degrees?"
            r"|education\s*(?:&|and)\s*training)$",
        ),
        (
            "SKILLS",
            r"^(?:skills?|technical\s*skills?|core\s*skills|key\s*skills|competencies"
            r"|core\s*competencies|expertise|technologies|skills?\s*(?:&|and)\s*abilities)$",
        ),
        ("PROJECTS", r"^(?:projects?|project\s*experience|portfolio|key\s*projects)$"),
        (
            "CERTIFICATIONS",
            r"^(?:certifications?|certificates?|licenses?(?:\s*(?:&|and)\s*certifications?)?"
            r"|certifications?\s*(?:&|and)\s*licenses?)$",
        ),
        ("AWARDS", r"^(?:awards?|honors?|achievements?|accomplishments?|awards?\s*(?:&|and)\s*honors?)$"),
        ("VOLUNTEER", r"^(?:volunteer(?:ing)?|volunteer\s*experience|community\s*service)$"),
        ("LANGUAGES", r"^(?:languages?|language\s*skills?)$"),
    )
)

_SOFT_CUES: tuple[tuple[str, tuple[str, ...], tuple[str, ...]], ...] = (
    ("EXPERIENCE", ("experience",), ("education",)),
    ("EDUCATION", ("education",), ()),
    ("SKILLS", ("skill", "technolog", "expertise"), ()),
    ("SUMMARY", ("summary", "objective", "profile"), ()),
    ("CERTIFICATIONS", ("certification", "licens"), ()),
    ("PROJECTS", ("project",), ()),
)


def _looks_like_soft_header(line: str) -> bool:
    if len(line) >= 50 or len(line.split()) > 5:
        return False
    if any(char.isdigit() for char in line) or is_bullet_like(line) or line.endswith("."):
        return False
    return line.isupper() or line.endswith(":")


def match_section_header(line: str) -> str | None:
    stripped = line.strip()
    if not stripped:
        return None
    candidate = stripped.rstrip(":").strip()
    for name, pattern in SECTION_PATTERNS:
        if pattern.match(candidate):
            return name

    # Softer substring cues only run when no explicit header matched.
    if not _looks_like_soft_header(stripped):
        return None
    lowered = candidate.lower()
    for name, cues, excluded in _SOFT_CUES:
        if any(cue in lowered for cue in cues) and not any(word in lowered for word in excluded):
            return name
    return None


class SectionSegmenter:
    """Two-state machine: Preamble until the first header, then InSection(name).

    Every transition flushes the buffered lines of the state being left.
    """

    def __init__(self) -> None:
        self.sections: dict[str, SectionBlock] = {}
        self.found_header = False
        self._current = PREAMBLE
        self._start = 0
        self._buffer: list[str] = []

    @property
    def in_preamble(self) -> bool:
        return self._current == PREAMBLE

    def feed(self, index: int, line: str) -> None:
        header = match_section_header(line)
        if header is None:
            self._buffer.append(line.strip())
            return
        self._flush(index - 1)
        self.found_header = True
        self._current = header
        self._start = index
        self._buffer = []

    def finish(self, last_index: int) -> dict[str, SectionBlock]:
        self._flush(last_index)
        if not self.found_header:
            return {}
        return self.sections

    def _flush(self, end: int) -> None:
        content = "\n".join(self._buffer).strip()
        if self.in_preamble and not content:
            return
        existing = self.sections.get(self._current)
        if existing is None:
            self.sections[self._current] = SectionBlock(start=self._start, end=max(end, self._start), content=content)
            return
        merged = "\n".join(part for part in (existing.content, content) if part)
        self.sections[self._current] = SectionBlock(start=existing.start, end=max(end, existing.end), content=merged)


def segment_sections(text: str) -> dict[str, SectionBlock]:
    lines = text.split("\n") if text else []
    segmenter = SectionSegmenter()
    for index, line in enumerate(lines):
        segmenter.feed(index, line)
    sections = segmenter.finish(len(lines) - 1)
    logger.debug("sections_detected names=%s", ",".join(sections) or "-")
    return sections
