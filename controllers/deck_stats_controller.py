"""
Deck Stats Controller - Run orchestration for the deck statistics command.

The controller resolves the configured input method and format, reads the
categories, computes the turn statistics and hands them to the report
services. Each stage reports failures as a ``StageError`` naming the stage.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO, TypeVar

from loguru import logger
from rich.console import Console

from services.category_loader import Category, InputMethod, get_categories
from services.config_service import RunSettings
from services.errors import DeckStatsError, StageError
from services.report_service import export_csv, render_table
from services.turn_stats_service import GameFormat, TurnStats, compute_format_stats

STAGE_CONFIGURATION = "Configuration"
STAGE_INPUT = "Input retrieval"
STAGE_FORMAT = "Format dispatch"
STAGE_REPORT = "Report rendering"

T = TypeVar("T")


class DeckStatsController:

    def __init__(
        self,
        settings: RunSettings,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        console: Console | None = None,
    ) -> None:
        self.settings = settings
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.console = console or Console()

        self.input_method: InputMethod | None = None
        self.game_format: GameFormat | None = None

    def run(self) -> TurnStats:
        self.input_method, self.game_format = self._run_stage(
            STAGE_CONFIGURATION, self.resolve_options
        )
        categories = self._run_stage(STAGE_INPUT, self.load_categories)
        stats = self._run_stage(STAGE_FORMAT, lambda: self.compute_stats(categories))
        self._run_stage(STAGE_REPORT, lambda: self.render(stats))
        return stats

    def resolve_options(self) -> tuple[InputMethod, GameFormat]:
        input_method = InputMethod.parse(self.settings.input_method)
        game_format = GameFormat.parse(self.settings.game_format)
        logger.debug(f"Input method {input_method.value}, format {game_format.value}")
        return input_method, game_format

    def load_categories(self) -> list[Category]:
        method = self.input_method or InputMethod.parse(self.settings.input_method)
        categories = get_categories(method, self.settings.category_file, self.stdin, self.stdout)
        logger.info(f"Loaded {len(categories)} categories")
        return categories

    def compute_stats(self, categories: list[Category]) -> TurnStats:
        game_format = self.game_format or GameFormat.parse(self.settings.game_format)
        return compute_format_stats(categories, self.settings.turns, game_format)

    def render(self, stats: TurnStats) -> None:
        render_table(stats, self.console)
        if self.settings.output is not None:
            export_csv(stats, self.settings.output)

    @staticmethod
    def _run_stage(stage: str, action: Callable[[], T]) -> T:
        try:
            return action()
        except (DeckStatsError, OSError) as exc:
            raise StageError(stage, exc) from exc


__all__ = ["DeckStatsController"]
