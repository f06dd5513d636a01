"""Loguru sink configuration for command-line runs."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function} - {message}"


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """Replace loguru's default handler with a stderr sink and an optional file sink."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level="DEBUG", rotation="1 MB", retention=3, encoding="utf-8")
    logger.debug(f"Logging configured at {level.upper()}")
