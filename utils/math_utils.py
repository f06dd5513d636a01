"""
Mathematical utility functions for probability calculations.

This module provides functions for calculating the chance of drawing at least
one card of a category by a given turn in Magic: The Gathering, using the
hypergeometric "zero hits" probability and its complement.
"""

from __future__ import annotations


def falling_factorial(a: int, k: int) -> float:
    """
    Calculate the falling factorial a * (a - 1) * ... * (a - k + 1).

    The product is accumulated term by term as a float, which is equivalent
    to a! / (a - k)! without ever evaluating the full factorials.

    Args:
        a: Highest factor of the product
        k: Number of consecutive factors

    Returns:
        The product as a float. ``k == 0`` is the empty product (exactly 1.0),
        and the product is exactly 0.0 as soon as a factor reaches zero.

    Raises:
        ValueError: If k is negative

    Example:
        >>> falling_factorial(5, 2)
        20.0
    """
    if k < 0:
        raise ValueError(f"Factor count must be non-negative, got {k}")

    result = 1.0
    for factor in range(a - k + 1, a + 1):
        result *= factor
    return result


def compute_hit_probabilities(
    category_size: int,
    deck_size: int,
    opening_hand_size: int,
    turn_count: int,
) -> list[float]:
    """
    Calculate the chance of having drawn at least one card of a category, per turn.

    The value for turn ``t`` uses ``opening_hand_size + t`` cards seen, so the
    first entry is the opening hand and the last is turn ``turn_count``.

    Formula: P(X >= 1) = 1 - (N - n)_K / (N)_K, with (a)_K the falling factorial

    Args:
        category_size: Number of cards of the category in the deck (K)
        deck_size: Total number of cards in the deck (N)
        opening_hand_size: Cards drawn before turn 1
        turn_count: Last turn to compute

    Returns:
        ``turn_count + 1`` probabilities, or an empty list when the horizon
        runs past the end of the deck or the category is larger than the deck.

    Raises:
        ValueError: If any input is negative

    Example:
        >>> # 37 lands in a 99-card deck, opening hand only
        >>> compute_hit_probabilities(37, 99, 7, 0)
        [0.96...]
    """
    if category_size < 0:
        raise ValueError(f"Category size must be non-negative, got {category_size}")
    if deck_size < 0:
        raise ValueError(f"Deck size must be non-negative, got {deck_size}")
    if opening_hand_size < 0:
        raise ValueError(f"Opening hand size must be non-negative, got {opening_hand_size}")
    if turn_count < 0:
        raise ValueError(f"Turn count must be non-negative, got {turn_count}")

    if turn_count + opening_hand_size > deck_size or category_size > deck_size:
        return []

    # Constant across turns, only the numerator shrinks as cards are drawn.
    inverse_denominator = 1.0 / falling_factorial(deck_size, category_size)

    probabilities: list[float] = []
    for cards_seen in range(opening_hand_size, opening_hand_size + turn_count + 1):
        miss = falling_factorial(deck_size - cards_seen, category_size) * inverse_denominator
        probabilities.append(1.0 - miss)
    return probabilities
