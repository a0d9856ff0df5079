from .confidence import calculate_confidence, score_components
from .industry_detector import detect_industry, detect_industry_from_text, score_industries
from .suggestions import FALLBACK_SUGGESTION, generate_suggestions

__all__ = [
    "FALLBACK_SUGGESTION",
    "calculate_confidence",
    "detect_industry",
    "detect_industry_from_text",
    "generate_suggestions",
    "score_components",
    "score_industries",
]
