"""Head-to-head comparison of two classified hands.

Comparison rules:
- Different ranks: the higher HandRank wins outright
- Equal ranks: compare rank-specific values in sequence, falling through on ties
    - Pair: pair value, then highest single card
    - Two pairs: higher pair, lower pair, then the remaining card
    - Three of a kind, full house: value of the three cards
    - Four of a kind: value of the four cards
    - Straight flush, flush, straight, high card: highest card value
- All values equal: draw

Suit never decides between hands.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, assert_never

from .hands import Hand, HandRank

logger = logging.getLogger(__name__)


class Winner(Enum):
    """Outcome of comparing a first and a second hand."""

    FIRST = "first"
    SECOND = "second"
    DRAW = "draw"


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of rank_hands.

    Attributes:
        winner: Which hand won, or DRAW
        winning_hand: The winning Hand, None on a draw
        description: Human-readable summary of the outcome
    """

    winner: Winner
    winning_hand: Optional[Hand]
    description: str


def tie_break_values(hand: Hand) -> Tuple[int, ...]:
    """Values compared, in order, between two hands of the same rank.

    Raises:
        HandInvariantError: If the hand lacks a group its rank requires
    """
    rank = hand.rank
    match rank:
        case HandRank.PAIR:
            return (hand.highest_pair_value(), hand.highest_single_value())
        case HandRank.TWO_PAIRS:
            return (
                hand.highest_pair_value(),
                hand.lowest_pair_value(),
                hand.highest_single_value(),
            )
        case HandRank.THREE_OF_A_KIND | HandRank.FULL_HOUSE:
            return (hand.three_of_a_kind_value(),)
        case HandRank.FOUR_OF_A_KIND:
            return (hand.four_of_a_kind_value(),)
        case HandRank.STRAIGHT_FLUSH | HandRank.FLUSH | HandRank.STRAIGHT | HandRank.HIGH_CARD:
            return (hand.highest_value(),)
        case _:
            assert_never(rank)


def compare_hands(hand1: Hand, hand2: Hand) -> Winner:
    """Compare two hands.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        Winner.FIRST, Winner.SECOND or Winner.DRAW
    """
    if hand1.rank != hand2.rank:
        return Winner.FIRST if hand1.rank > hand2.rank else Winner.SECOND

    # Same rank implies same tie-break sequence length
    for value1, value2 in zip(tie_break_values(hand1), tie_break_values(hand2)):
        if value1 > value2:
            return Winner.FIRST
        if value1 < value2:
            return Winner.SECOND
    return Winner.DRAW


def describe_comparison(hand1: Hand, hand2: Hand, winner: Winner) -> str:
    """Summarize a comparison, naming the winning rank and the cards involved."""
    if winner is Winner.FIRST:
        return f"Hand 1 wins with {hand1.rank.display_name} {hand1} against {hand2}"
    if winner is Winner.SECOND:
        return f"Hand 2 wins with {hand2.rank.display_name} {hand2} against {hand1}"
    return f"No precedence between {hand1} and {hand2}: draw"


def rank_hands(hand1: Hand, hand2: Hand) -> ComparisonResult:
    """Compare two hands and report the winning hand with a description."""
    winner = compare_hands(hand1, hand2)
    description = describe_comparison(hand1, hand2, winner)
    logger.debug(description)

    if winner is Winner.FIRST:
        winning_hand = hand1
    elif winner is Winner.SECOND:
        winning_hand = hand2
    else:
        winning_hand = None
    return ComparisonResult(winner=winner, winning_hand=winning_hand, description=description)
