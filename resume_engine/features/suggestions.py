from __future__ import annotations

from resume_engine.core.config import settings
from resume_engine.core.config.scoring import get_scoring_value
from resume_engine.schemas.resume import ParseResult

FALLBACK_SUGGESTION = "Unable to parse automatically; please enter information manually"


def generate_suggestions(result: ParseResult, *, limit: int | None = None) -> list[str]:
    """Remediation hints in a fixed evaluation order, capped at `limit`."""
    suggestions: list[str] = []
    if not result.personal.full_name:
        suggestions.append("Add your full name at the top of the resume")
    if not result.personal.email:
        suggestions.append("Add a professional email address")
    if not result.experience:
        suggestions.append("Add your work history with specific achievements")
    for entry in result.experience:
        if entry.has_placeholder_achievements:
            suggestions.append(f"Add specific achievements for {entry.company_name}")
    if not result.education:
        suggestions.append("Add your educational background")
    if len(result.skills) < int(get_scoring_value("confidence.skills.full_credit_count", 5)):
        suggestions.append("Add more skills (at least 5 recommended)")
    return suggestions[: limit if limit is not None else settings.max_suggestions]
