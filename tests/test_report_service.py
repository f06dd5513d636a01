"""Tests for table and CSV rendering of turn statistics."""

from __future__ import annotations

import csv
import io

import pytest
from rich.console import Console

from services.category_loader import Category
from services.errors import ReportError
from services.report_service import (
    build_report_rows,
    export_csv,
    format_probability,
    read_csv_category_names,
    render_table,
)
from services.turn_stats_service import CategoryStats, GameFormat, compute_format_stats


def _stats(turns: int = 3):
    categories = [
        Category(name="Lands", size=37),
        Category(name="Removal", size=8),
        Category(name="Card Draw", size=10),
    ]
    return compute_format_stats(categories, turns, GameFormat.COMMANDER)


def test_rows_start_with_starting_hand_then_turns():
    header, rows = build_report_rows(_stats(3))

    assert header == ["", "Lands", "Removal", "Card Draw"]
    assert [row[0] for row in rows] == ["Starting Hand", "Turn 1", "Turn 2", "Turn 3"]
    assert all(len(row) == 4 for row in rows)


def test_rows_hold_probabilities_by_turn():
    stats = _stats(2)
    _, rows = build_report_rows(stats)

    assert rows[0][2] == stats[1].probabilities[0]
    assert rows[2][1] == stats[0].probabilities[2]


def test_infeasible_category_leaves_blank_cells():
    stats = [
        CategoryStats(category=Category(name="Too big", size=120), probabilities=()),
        CategoryStats(category=Category(name="Lands", size=37), probabilities=(0.9, 0.95)),
    ]

    header, rows = build_report_rows(stats)

    assert header == ["", "Too big", "Lands"]
    assert rows == [["Starting Hand", "", 0.9], ["Turn 1", "", 0.95]]


def test_no_feasible_category_has_no_rows():
    stats = [CategoryStats(category=Category(name="Too big", size=120), probabilities=())]

    header, rows = build_report_rows(stats)

    assert header == ["", "Too big"]
    assert rows == []


def test_format_probability():
    assert format_probability(0.5) == "50.00%"
    assert format_probability(1.0) == "100.00%"
    assert format_probability("") == ""


def test_render_table_prints_every_category():
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)

    table = render_table(_stats(2), console)

    output = buffer.getvalue()
    assert table.row_count == 3
    for label in ("Lands", "Removal", "Card Draw", "Starting Hand", "Turn 2"):
        assert label in output
    assert "%" in output


def test_csv_round_trip_keeps_category_order(tmp_path):
    """Re-reading the exported header reproduces the category order."""
    stats = _stats(4)
    path = tmp_path / "out" / "stats.csv"

    export_csv(stats, path)

    assert read_csv_category_names(path) == ["Lands", "Removal", "Card Draw"]


def test_csv_keeps_full_precision(tmp_path):
    stats = _stats(1)
    path = tmp_path / "stats.csv"

    export_csv(stats, path)

    with path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows[1][0] == "Starting Hand"
    assert float(rows[1][1]) == stats[0].probabilities[0]
    assert float(rows[2][3]) == stats[2].probabilities[1]


def test_csv_export_failure_raises_report_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(ReportError) as excinfo:
        export_csv(_stats(1), blocker / "stats.csv")
    assert isinstance(excinfo.value.__cause__, OSError)


@pytest.mark.parametrize("name", ["Sweepers [/]", "Removal [instant]", "[bold]Ramp"])
def test_render_table_shows_bracketed_names_verbatim(name):
    """Category names are printed as typed, never read as console markup."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    stats = compute_format_stats([Category(name=name, size=8)], 1, GameFormat.COMMANDER)

    render_table(stats, console)

    assert name in buffer.getvalue()
