"""Tunable numbers for confidence scoring, skill filtering and enhancement limits.

Values come from the packaged ``scoring.yaml``. Lookups take a dot path and fall
back to the caller's default when a key is absent, so the YAML may stay sparse.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

SCORING_CONFIG_PATH = Path(__file__).resolve().with_name("scoring.yaml")


class ScoringConfigError(RuntimeError):
    """scoring.yaml could not be loaded as a mapping."""


@dataclass(frozen=True)
class ConfidenceWeights:
    """Points each résumé component contributes to the parse confidence."""

    full_name: float = 10.0
    email: float = 10.0
    phone: float = 10.0
    has_experience: float = 20.0
    experience_achievements: float = 20.0
    education: float = 15.0
    skills: float = 15.0

    @property
    def total(self) -> float:
        return sum(getattr(self, item.name) for item in fields(self))


@lru_cache(maxsize=1)
def get_scoring_config() -> dict[str, Any]:
    try:
        raw = SCORING_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScoringConfigError(f"cannot read scoring config {SCORING_CONFIG_PATH}: {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ScoringConfigError(f"invalid YAML in scoring config {SCORING_CONFIG_PATH}: {exc}") from exc

    if not isinstance(parsed, dict):
        raise ScoringConfigError(f"scoring config {SCORING_CONFIG_PATH} must be a top-level mapping")
    return parsed


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Nested lookup by dot path, e.g. ``get_scoring_value("confidence.precision", 2)``."""
    if not path:
        return default

    node: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def get_confidence_weights() -> ConfidenceWeights:
    configured = get_scoring_value("confidence.weights", {})
    if not isinstance(configured, dict):
        return ConfidenceWeights()
    known = {item.name for item in fields(ConfidenceWeights)}
    return ConfidenceWeights(**{key: float(value) for key, value in configured.items() if key in known})
