from __future__ import annotations

from resume_engine.core.config.scoring import get_confidence_weights, get_scoring_value
from resume_engine.schemas.resume import ParseResult


def _skill_points(count: int, weight: float) -> float:
    full_credit = int(get_scoring_value("confidence.skills.full_credit_count", 5))
    per_skill = float(get_scoring_value("confidence.skills.points_per_skill", 3))
    if count >= full_credit:
        return weight
    return min(weight, count * per_skill)


def score_components(result: ParseResult) -> dict[str, float]:
    """Points earned per component; the maximum for each is its configured weight."""
    weights = get_confidence_weights()
    personal = result.personal
    has_experience = bool(result.experience)
    achievements_filled = has_experience and not any(
        entry.has_placeholder_achievements for entry in result.experience
    )
    return {
        "full_name": weights.full_name if personal.full_name else 0.0,
        "email": weights.email if personal.email else 0.0,
        "phone": weights.phone if personal.phone else 0.0,
        "has_experience": weights.has_experience if has_experience else 0.0,
        "experience_achievements": weights.experience_achievements if achievements_filled else 0.0,
        "education": weights.education if result.education else 0.0,
        "skills": _skill_points(len(result.skills), weights.skills),
    }


def calculate_confidence(result: ParseResult) -> float:
    max_points = get_confidence_weights().total
    if max_points <= 0:
        return 0.0
    achieved = sum(score_components(result).values())
    precision = int(get_scoring_value("confidence.precision", 2))
    return round(min(max(achieved / max_points, 0.0), 1.0), precision)
