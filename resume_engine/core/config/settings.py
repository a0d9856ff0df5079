from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_EXPERIENCE_LEVELS = ("entry", "mid", "senior", "executive")


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_optional_int(name: str) -> int | None:
    raw = _get_env(name, None)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class Settings:
    log_level: str
    default_experience_level: str
    max_skills: int
    max_suggestions: int
    keyword_bank_path: str | None
    random_seed: int | None


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    default_experience_level=(_get_env("DEFAULT_EXPERIENCE_LEVEL", "entry") or "entry").strip().lower(),
    max_skills=_get_env_int("MAX_SKILLS", 20),
    max_suggestions=_get_env_int("MAX_SUGGESTIONS", 5),
    keyword_bank_path=_get_env("KEYWORD_BANK_PATH"),
    random_seed=_get_env_optional_int("ENHANCER_RANDOM_SEED"),
)

if settings.default_experience_level not in _EXPERIENCE_LEVELS:
    raise RuntimeError(
        "DEFAULT_EXPERIENCE_LEVEL must be one of: " + ", ".join(_EXPERIENCE_LEVELS)
    )

if settings.max_skills <= 0 or settings.max_suggestions <= 0:
    raise RuntimeError("MAX_SKILLS and MAX_SUGGESTIONS must be positive integers.")
