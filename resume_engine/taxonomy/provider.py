from __future__ import annotations

from typing import Iterator, Protocol

from resume_engine.schemas.keywords import ContentTemplate, IndustryKeywords, KeywordSearchResult


class KeywordBankProvider(Protocol):
    """Read-only keyword source consumed by parsing, industry detection and enhancement."""

    def get_industry(self, name: str) -> IndustryKeywords | None:
        """Return the keyword record for an industry, or None when unknown."""

    def list_industries(self) -> list[str]:
        """Industry identifiers in bank order."""

    def items(self) -> Iterator[tuple[str, IndustryKeywords]]:
        """(industry, keywords) pairs in bank order."""

    def search_keywords(self, query: str, industry: str | None = None) -> KeywordSearchResult:
        """Case-insensitive substring search over verbs, skills and tools."""

    def get_quantification_suggestions(self, industry: str | None) -> dict[str, list[str]]:
        """Metric hints for an industry, falling back to the general record."""

    @property
    def templates(self) -> tuple[ContentTemplate, ...]:
        """General content rewrite templates."""

    @property
    def casual_phrases(self) -> dict[str, str]:
        """Casual phrase -> professional replacement."""
