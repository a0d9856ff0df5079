from __future__ import annotations

import re

CANONICAL_BULLET = "•"

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►‣⁃➢➤✓✔·"
_BULLET_GLYPH_RE = re.compile(rf"[{re.escape(_BULLET_CHARS)}]")
_BULLET_PATTERN = re.compile(
    rf"^\s*(?:{re.escape(CANONICAL_BULLET)}\s*|[-–—*]\s+|(?:\d+[\.\)])\s+)"
)
_HORIZONTAL_WS_RE = re.compile(r"[ \t\u00a0\u2000-\u200a\u202f\u3000]+")


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def collapse_horizontal_whitespace(line: str) -> str:
    return _HORIZONTAL_WS_RE.sub(" ", line).strip()


def unify_bullets(text: str) -> str:
    return _BULLET_GLYPH_RE.sub(CANONICAL_BULLET, text)


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def non_empty_lines(text: str) -> list[str]:
    return [stripped for stripped in (normalize_line(line) for line in text.splitlines()) if stripped]
