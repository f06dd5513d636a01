"""Table and CSV rendering of turn statistics."""

from __future__ import annotations

import csv
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.table import Table
from rich.text import Text

from services.errors import ReportError
from services.turn_stats_service import TurnStats
from utils.atomic_io import atomic_write_csv
from utils.constants import STARTING_HAND_LABEL


def turn_label(turn: int) -> str:
    return STARTING_HAND_LABEL if turn == 0 else f"Turn {turn}"


def build_report_rows(stats: TurnStats) -> tuple[list[str], list[list[float | str]]]:
    """
    Lay out statistics as a header plus one row per turn.

    Returns:
        ``(header, rows)`` where the header is an empty corner cell followed by
        category names, and each row starts with its turn label. Categories
        with fewer values than the longest sequence get empty cells.
    """
    header = [""] + [entry.category.name for entry in stats]
    turn_rows = max((len(entry.probabilities) for entry in stats), default=0)

    rows: list[list[float | str]] = []
    for turn in range(turn_rows):
        row: list[float | str] = [turn_label(turn)]
        for entry in stats:
            row.append(entry.probabilities[turn] if turn < len(entry.probabilities) else "")
        rows.append(row)
    return header, rows


def format_probability(value: float | str) -> str:
    if isinstance(value, str):
        return value
    return f"{value * 100:.2f}%"


def render_table(stats: TurnStats, console: Console | None = None) -> Table:
    """Print the statistics as a table, one column per category."""
    header, rows = build_report_rows(stats)
    table = Table(show_header=True, header_style="bold")
    table.add_column(header[0], style="bold")
    for name in header[1:]:
        table.add_column(Text(name), justify="right")
    for row in rows:
        table.add_row(str(row[0]), *(format_probability(cell) for cell in row[1:]))

    (console or Console()).print(table)
    return table


def export_csv(stats: TurnStats, path: Path) -> Path:
    """Write the statistics to ``path`` as CSV, keeping full float precision."""
    header, rows = build_report_rows(stats)
    csv_rows = [[cell if isinstance(cell, str) else repr(cell) for cell in row] for row in rows]
    try:
        atomic_write_csv(path, [header, *csv_rows])
    except OSError as exc:
        logger.error(f"Failed to export turn stats: {exc}")
        raise ReportError(f"Could not write CSV to {path}: {exc}") from exc
    logger.info(f"Exported turn stats to {path} ({len(rows)} rows)")
    return path


def read_csv_category_names(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8", newline="") as fh:
        header = next(csv.reader(fh), [])
    return header[1:]


__all__ = [
    "build_report_rows",
    "export_csv",
    "format_probability",
    "read_csv_category_names",
    "render_table",
    "turn_label",
]
