"""Filesystem paths and config locations."""

import sys
from pathlib import Path


def _default_base_dir() -> Path:
    """Return the writable base directory for config files."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent.parent.parent


BASE_DATA_DIR = _default_base_dir()
CONFIG_DIR = BASE_DATA_DIR / "config"

CONFIG_FILE = CONFIG_DIR / "deck_stats.json"
