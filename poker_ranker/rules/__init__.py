"""Poker hand rules.

This module provides:
- Card value and suit definitions (cards.py)
- Hand classification (hands.py)
- Head-to-head hand comparison (compare.py)
- Batched tensor evaluation (batch.py, imported on demand)
"""

from .cards import (
    Value,
    Suit,
    Card,
    VALUE_SYMBOLS,
    SUIT_SYMBOLS,
    create_standard_deck,
    sort_cards,
    make_cards_from_string,
)

from .hands import (
    HAND_SIZE,
    HandRank,
    Hand,
    HandError,
    HandSizeError,
    DuplicateCardError,
    HandInvariantError,
    get_value_counts,
    is_potential_flush,
    is_potential_straight,
    classify_cards,
    validate_hand_cards,
)

from .compare import (
    Winner,
    ComparisonResult,
    tie_break_values,
    compare_hands,
    describe_comparison,
    rank_hands,
)

__all__ = [
    # Cards
    "Value",
    "Suit",
    "Card",
    "VALUE_SYMBOLS",
    "SUIT_SYMBOLS",
    "create_standard_deck",
    "sort_cards",
    "make_cards_from_string",
    # Hands
    "HAND_SIZE",
    "HandRank",
    "Hand",
    "HandError",
    "HandSizeError",
    "DuplicateCardError",
    "HandInvariantError",
    "get_value_counts",
    "is_potential_flush",
    "is_potential_straight",
    "classify_cards",
    "validate_hand_cards",
    # Comparison
    "Winner",
    "ComparisonResult",
    "tie_break_values",
    "compare_hands",
    "describe_comparison",
    "rank_hands",
]
