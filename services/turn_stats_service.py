"""Per-format turn statistics for deck categories."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from services.category_loader import Category
from services.errors import UnknownFormatError, UnsupportedFormatError
from utils.constants import (
    COMMANDER_DECK_SIZE,
    FORMAT_ALIASES,
    OPENING_HAND_SIZE,
    STANDARD_DECK_SIZE,
)
from utils.math_utils import compute_hit_probabilities


@dataclass(frozen=True)
class FormatRules:
    deck_size: int
    opening_hand_size: int
    supported: bool = True


class GameFormat(Enum):
    """Game formats with the deck they are played with."""

    COMMANDER = "commander"
    STANDARD = "standard"

    @property
    def rules(self) -> FormatRules:
        return _FORMAT_RULES[self]

    @property
    def deck_size(self) -> int:
        return self.rules.deck_size

    @property
    def opening_hand_size(self) -> int:
        return self.rules.opening_hand_size

    @classmethod
    def parse(cls, value: str) -> "GameFormat":
        """Resolve a format name or alias such as ``"EDH"`` or ``"modern"``."""
        canonical = FORMAT_ALIASES.get(value.strip().lower())
        if canonical is None:
            raise UnknownFormatError(value.strip())
        return cls(canonical)


_FORMAT_RULES = {
    GameFormat.COMMANDER: FormatRules(
        deck_size=COMMANDER_DECK_SIZE, opening_hand_size=OPENING_HAND_SIZE
    ),
    # Reserved: recognised on the command line, no statistics model yet.
    GameFormat.STANDARD: FormatRules(
        deck_size=STANDARD_DECK_SIZE, opening_hand_size=OPENING_HAND_SIZE, supported=False
    ),
}


@dataclass(frozen=True)
class CategoryStats:
    """Hit probabilities of one category, indexed by turn (0 is the opening hand)."""

    category: Category
    probabilities: tuple[float, ...]

    @property
    def is_feasible(self) -> bool:
        return bool(self.probabilities)


TurnStats = list[CategoryStats]


def compute_format_stats(
    categories: Sequence[Category],
    turn_count: int,
    game_format: GameFormat,
) -> TurnStats:
    """
    Compute per-turn hit probabilities for every category of a deck.

    Args:
        categories: Categories in display order
        turn_count: Last turn to compute
        game_format: Format supplying deck and opening hand sizes

    Returns:
        One ``CategoryStats`` per category, in input order. Categories that
        cannot be computed for this deck carry an empty probability tuple.

    Raises:
        UnsupportedFormatError: If the format has no statistics model
    """
    rules = game_format.rules
    if not rules.supported:
        raise UnsupportedFormatError(game_format.value)

    stats: TurnStats = []
    for category in categories:
        probabilities = compute_hit_probabilities(
            category.size, rules.deck_size, rules.opening_hand_size, turn_count
        )
        if not probabilities:
            logger.warning(
                f"Skipping {category.name!r}: {category.size} cards over {turn_count} turns "
                f"does not fit a {rules.deck_size}-card deck"
            )
        stats.append(CategoryStats(category=category, probabilities=tuple(probabilities)))

    logger.debug(f"Computed {game_format.value} stats for {len(stats)} categories")
    return stats


__all__ = ["CategoryStats", "FormatRules", "GameFormat", "TurnStats", "compute_format_stats"]
