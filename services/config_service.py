from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from utils import constants

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RunSettings:
    """Resolved options for one statistics run."""

    input_method: str = constants.DEFAULT_INPUT_METHOD
    game_format: str = constants.DEFAULT_FORMAT
    turns: int = constants.DEFAULT_TURN_COUNT
    category_file: Path = Path(constants.DEFAULT_CATEGORY_FILE)
    output: Path | None = None
    log_level: str = "INFO"


class ConfigService:
    """Load optional run defaults from a JSON config file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or constants.CONFIG_FILE

    def load(self) -> dict[str, Any]:
        if not self.config_path.exists():
            return {}
        try:
            with self.config_path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(f"Failed to load config {self.config_path}: {exc}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring config {self.config_path}: expected a JSON object")
            return {}
        return data

    def resolve(self, overrides: dict[str, Any]) -> RunSettings:
        """Merge command-line overrides (``None`` means unset) over file values."""
        data = self.load()
        merged = {**data, **{key: value for key, value in overrides.items() if value is not None}}
        defaults = RunSettings()

        return RunSettings(
            input_method=str(merged.get("input", defaults.input_method)),
            game_format=str(merged.get("format", defaults.game_format)),
            turns=self.coerce_turns(merged.get("turns"), default=defaults.turns),
            category_file=self.coerce_path(
                merged.get("category_file"), key="category_file", default=defaults.category_file
            ),
            output=self.coerce_path(merged.get("output"), key="output", default=None),
            log_level=self.coerce_log_level(merged.get("log_level"), default=defaults.log_level),
        )

    @staticmethod
    def coerce_log_level(value: Any, *, default: str) -> str:
        if value is None:
            return default
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            logger.warning(f"Unknown log level {value!r}; using {default}")
            return default
        return level

    @staticmethod
    def coerce_path(value: Any, *, key: str, default: Path | None) -> Path | None:
        if value is None:
            return default
        if isinstance(value, Path):
            return value
        if not isinstance(value, str) or not value.strip():
            logger.warning(f"Invalid {key} {value!r}; using {default}")
            return default
        return Path(value)

    @staticmethod
    def coerce_turns(value: Any, *, default: int) -> int:
        if value is None:
            return default
        try:
            turns = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid turn count {value!r}; using {default}")
            return default
        if turns < 0:
            logger.warning(f"Negative turn count {turns}; using {default}")
            return default
        return turns


__all__ = ["ConfigService", "RunSettings"]
