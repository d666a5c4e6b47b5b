"""Runtime configuration defaults for the ordering session and logging."""

from __future__ import annotations

import logging
import os
from pathlib import Path

_LOG_PATH_ENV = "RESTAURANT_LOG_PATH"
_LOG_LEVEL_ENV = "RESTAURANT_LOG_LEVEL"
_ORDER_NUMBER_ENV = "RESTAURANT_ORDER_NUMBER"

LOG_PATH = os.environ.get(_LOG_PATH_ENV, "").strip() or "/tmp/restaurant-order.log"
LOG_LEVEL = os.environ.get(_LOG_LEVEL_ENV, "").strip().upper() or "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"

ORDER_NUMBER = os.environ.get(_ORDER_NUMBER_ENV, "").strip() or "1"

FAREWELL_MESSAGE = "Thanks for visiting our restaurant. Have a great day!"


def setup_logging(log_path: str | None = None, level: str | None = None) -> logging.Logger:
    """
    Configure application-wide logging.

    Records go to a file rather than the terminal so that kitchen thread
    output never interleaves with the interactive prompts.
    """
    path = Path(log_path or LOG_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)
    resolved_level = logging.getLevelName(level or LOG_LEVEL)
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO

    logging.basicConfig(
        level=resolved_level,
        format=LOG_FORMAT,
        handlers=[logging.FileHandler(path, encoding="utf-8")],
        force=True,
    )
    return logging.getLogger("restaurant")
