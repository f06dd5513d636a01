"""Exception types raised by deck statistics services."""

from __future__ import annotations


class DeckStatsError(RuntimeError):
    """Base class for failures of a deck statistics run."""


class UnknownFormatError(DeckStatsError, ValueError):
    """Raised when a game format name is not recognised."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid format: {value}")
        self.value = value


class UnsupportedFormatError(DeckStatsError):
    """Raised when a recognised format has no statistics model yet."""

    def __init__(self, format_name: str) -> None:
        super().__init__(f"Format {format_name!r} is not supported yet")
        self.format_name = format_name


class UnknownInputMethodError(DeckStatsError, ValueError):
    """Raised when an input method name is not recognised."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid input method: {value}")
        self.value = value


class CategoryFileError(DeckStatsError):
    """Raised when a category file cannot be read or has an invalid layout."""


class CategoryInputError(DeckStatsError):
    """Raised when interactive category entry ends before it is complete."""


class ReportError(DeckStatsError):
    """Raised when the statistics report cannot be written."""


class StageError(DeckStatsError):
    """Wraps a failure with the name of the run stage it happened in."""

    def __init__(self, stage: str, cause: BaseException) -> None:
        super().__init__(f"{stage} failed: {cause}")
        self.stage = stage
        self.cause = cause


__all__ = [
    "CategoryFileError",
    "CategoryInputError",
    "DeckStatsError",
    "ReportError",
    "StageError",
    "UnknownFormatError",
    "UnknownInputMethodError",
    "UnsupportedFormatError",
]
