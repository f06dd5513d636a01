"""Tests for ConfigService run option resolution."""

import json
from pathlib import Path

from services.config_service import ConfigService, RunSettings


def test_defaults_without_config_file(tmp_path):
    service = ConfigService(tmp_path / "missing.json")

    settings = service.resolve({})

    assert settings == RunSettings()
    assert settings.input_method == "stdin"
    assert settings.game_format == "commander"
    assert settings.turns == 15
    assert settings.category_file == Path("categories")
    assert settings.output is None


def test_config_file_supplies_defaults(tmp_path):
    config_path = tmp_path / "deck_stats.json"
    config_path.write_text(
        json.dumps(
            {
                "input": "file",
                "format": "edh",
                "turns": 10,
                "category_file": "decks/atraxa.txt",
                "output": "atraxa.csv",
                "log_level": "debug",
            }
        ),
        encoding="utf-8",
    )

    settings = ConfigService(config_path).resolve({})

    assert settings.input_method == "file"
    assert settings.game_format == "edh"
    assert settings.turns == 10
    assert settings.category_file == Path("decks/atraxa.txt")
    assert settings.output == Path("atraxa.csv")
    assert settings.log_level == "DEBUG"


def test_overrides_win_over_config_file(tmp_path):
    config_path = tmp_path / "deck_stats.json"
    config_path.write_text(json.dumps({"turns": 10, "format": "edh"}), encoding="utf-8")

    settings = ConfigService(config_path).resolve({"turns": 4, "format": None})

    assert settings.turns == 4
    assert settings.game_format == "edh"


def test_malformed_config_is_ignored(tmp_path):
    config_path = tmp_path / "deck_stats.json"
    config_path.write_text("{not json", encoding="utf-8")

    service = ConfigService(config_path)

    assert service.load() == {}
    assert service.resolve({}) == RunSettings()


def test_non_object_config_is_ignored(tmp_path):
    config_path = tmp_path / "deck_stats.json"
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    assert ConfigService(config_path).load() == {}


def test_coerce_turns():
    assert ConfigService.coerce_turns("12", default=15) == 12
    assert ConfigService.coerce_turns("many", default=15) == 15
    assert ConfigService.coerce_turns(-2, default=15) == 15
    assert ConfigService.coerce_turns(None, default=15) == 15


def test_coerce_log_level():
    assert ConfigService.coerce_log_level("warning", default="INFO") == "WARNING"
    assert ConfigService.coerce_log_level("chatty", default="INFO") == "INFO"


def test_wrongly_typed_paths_fall_back_to_defaults(tmp_path):
    config_path = tmp_path / "deck_stats.json"
    config_path.write_text(json.dumps({"category_file": None, "output": 5}), encoding="utf-8")

    settings = ConfigService(config_path).resolve({})

    assert settings.category_file == Path("categories")
    assert settings.output is None


def test_coerce_path():
    default = Path("categories")
    assert ConfigService.coerce_path("decks/list.txt", key="category_file", default=default) == Path(
        "decks/list.txt"
    )
    assert ConfigService.coerce_path(Path("x.csv"), key="output", default=None) == Path("x.csv")
    assert ConfigService.coerce_path(["a"], key="category_file", default=default) == default
    assert ConfigService.coerce_path("  ", key="output", default=None) is None
    assert ConfigService.coerce_path(None, key="output", default=None) is None
