"""Helper utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Union

ROOT_LOGGER = "roadroute_core"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "time": time.strftime(
                "%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(
    level: Union[str, int] = "INFO",
    fmt: str = "text",
    stream: Optional[Any] = None,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Log level name or number
        fmt: "text" or "json"
        stream: Output stream (stderr if omitted)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        level = int(level) if level.isdigit() else level.upper()
    logger.setLevel(level)

    handler = logging.StreamHandler(stream)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    # Replace handlers from earlier calls
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)

    return logger


def normalize_methods(methods: Optional[Iterable[str]]) -> List[str]:
    """Upper-case HTTP methods; empty means any method."""
    if not methods:
        return ["*"]
    if isinstance(methods, str):
        methods = [methods]
    return [m.upper() for m in methods]


__all__ = [
    "JSONFormatter",
    "setup_logging",
    "normalize_methods",
]
