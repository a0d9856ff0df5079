from __future__ import annotations

import logging

from resume_engine.core.config import settings

_LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.log_level).upper(), format=_LOG_FORMAT)
