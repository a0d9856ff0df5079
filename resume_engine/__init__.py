from .enhance import ContentEnhancer, enhance_text
from .features import detect_industry
from .parsing import build_fallback_result, parse_resume_text
from .schemas import EnhancementContext, EnhancementResult, KeywordSearchResult, ParseResult
from .taxonomy import KeywordBank, KeywordBankProvider, get_default_keyword_bank


def search_keywords(query: str, industry: str | None = None) -> KeywordSearchResult:
    return get_default_keyword_bank().search_keywords(query, industry)


__all__ = [
    "ContentEnhancer",
    "EnhancementContext",
    "EnhancementResult",
    "KeywordBank",
    "KeywordBankProvider",
    "KeywordSearchResult",
    "ParseResult",
    "build_fallback_result",
    "detect_industry",
    "enhance_text",
    "get_default_keyword_bank",
    "parse_resume_text",
    "search_keywords",
]
