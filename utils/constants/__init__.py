"""Shared constants for formats and config locations."""

from utils.constants.formats import *  # noqa: F401,F403
from utils.constants.paths import *  # noqa: F401,F403
