from .enhancement import (
    EXPERIENCE_LEVELS,
    EnhancementContext,
    EnhancementResult,
    EnhancementSuggestions,
)
from .keywords import ContentTemplate, ContextRule, IndustryKeywords, KeywordSearchResult
from .resume import (
    Education,
    ParsedDocument,
    ParseResult,
    PersonalInfo,
    Project,
    SectionBlock,
    Skill,
    Summary,
    WorkExperience,
)

__all__ = [
    "EXPERIENCE_LEVELS",
    "EnhancementContext",
    "EnhancementResult",
    "EnhancementSuggestions",
    "ContentTemplate",
    "ContextRule",
    "IndustryKeywords",
    "KeywordSearchResult",
    "Education",
    "ParsedDocument",
    "ParseResult",
    "PersonalInfo",
    "Project",
    "SectionBlock",
    "Skill",
    "Summary",
    "WorkExperience",
]
