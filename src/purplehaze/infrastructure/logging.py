"""Centralized logging configuration.

Usage:
    from purplehaze.infrastructure.logging import get_logger
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import sys
from functools import cache

from purplehaze.infrastructure.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_root_logger() -> None:
    root = logging.getLogger()

    # Only configure if no handlers exist
    if root.handlers:
        return

    level = getattr(logging, settings.log_level, logging.INFO)
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # Supabase talks over httpx; its per-request lines are noise here
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
