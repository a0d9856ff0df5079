from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Strategy(Generic[T]):
    """A named extraction attempt. Returns None (or an empty value) when it does not apply."""

    name: str
    func: Callable[..., T | None]


def run_strategies(strategies: Sequence[Strategy[T]], *args: object, field: str) -> T | None:
    for strategy in strategies:
        result = strategy.func(*args)
        if result:
            logger.debug("strategy_hit field=%s strategy=%s", field, strategy.name)
            return result
    return None
