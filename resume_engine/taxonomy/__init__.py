from functools import lru_cache

from resume_engine.core.config import settings

from .keyword_bank import GENERAL_INDUSTRY, KeywordBank
from .provider import KeywordBankProvider
from .skill_vocabulary import SkillVocabulary


@lru_cache(maxsize=1)
def get_default_keyword_bank() -> KeywordBank:
    return KeywordBank.from_yaml(settings.keyword_bank_path)


@lru_cache(maxsize=1)
def get_default_skill_vocabulary() -> SkillVocabulary:
    return SkillVocabulary.from_yaml()


__all__ = [
    "GENERAL_INDUSTRY",
    "KeywordBank",
    "KeywordBankProvider",
    "SkillVocabulary",
    "get_default_keyword_bank",
    "get_default_skill_vocabulary",
]
