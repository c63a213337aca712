"""Five-card hand classification.

Hand ranks supported (low to high):
- High card, pair, two pairs, three of a kind
- Straight: five consecutive values (Ace is always high, no A-2-3-4-5)
- Flush: five cards of one suit
- Full house, four of a kind, straight flush

A Hand is built in one shot from exactly five distinct cards and carries its
rank from construction onwards. Lookups used for tie-breaking (pair values,
the three-of-a-kind value, ...) raise HandInvariantError instead of falling
back to a default when the requested group does not exist.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from .cards import Card, make_cards_from_string, sort_cards

HAND_SIZE = 5


class HandRank(IntEnum):
    """Poker hand categories ordered by strength (higher value = stronger hand)."""

    HIGH_CARD = auto()
    PAIR = auto()
    TWO_PAIRS = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()

    @property
    def display_name(self) -> str:
        return HAND_RANK_NAMES[self]


HAND_RANK_NAMES = {
    HandRank.HIGH_CARD: "High Card",
    HandRank.PAIR: "Pair",
    HandRank.TWO_PAIRS: "Two Pairs",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.STRAIGHT: "Straight",
    HandRank.FLUSH: "Flush",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
}


class HandError(Exception):
    """Base class for hand construction and evaluation errors."""

    pass


class HandSizeError(HandError, ValueError):
    """Raised when a hand is built from anything other than five cards."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Expected a hand to hold {HAND_SIZE} cards, received {size} instead")


class DuplicateCardError(HandError, ValueError):
    """Raised when the same card appears more than once in a hand."""

    def __init__(self, duplicates: Sequence[Card]):
        self.duplicates = tuple(duplicates)
        cards_str = " ".join(str(c) for c in self.duplicates)
        super().__init__(f"Hand contains duplicate cards: {cards_str}")


class HandInvariantError(HandError, RuntimeError):
    """Raised when a hand lacks a card group its rank guarantees.

    Only reachable through a bug in classification or comparison.
    """

    pass


def get_value_counts(cards: Iterable[Card]) -> Dict[int, int]:
    """Count occurrences of each integer value in a list of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping integer value (2-14) to count
    """
    return dict(Counter(int(card.value) for card in cards))


def is_potential_flush(cards: Sequence[Card]) -> bool:
    """True if all cards share one suit."""
    return len({card.suit for card in cards}) == 1


def is_potential_straight(cards: Sequence[Card]) -> bool:
    """True if the sorted values step up by exactly one.

    The Ace only counts as 14, so A-2-3-4-5 does not qualify.
    """
    values = sorted(int(card.value) for card in cards)
    for i in range(1, len(values)):
        if values[i] - values[i - 1] != 1:
            return False
    return True


def classify_cards(cards: Sequence[Card]) -> HandRank:
    """Classify five cards into a HandRank.

    Checks run in a fixed order and the first match wins: straight flush,
    flush, straight, four of a kind, full house, three of a kind, pair,
    two pairs, high card.

    Args:
        cards: Exactly five distinct cards (validated by Hand construction)

    Returns:
        The HandRank of the cards
    """
    group_sizes = Counter(get_value_counts(cards).values())
    flush = is_potential_flush(cards)
    straight = is_potential_straight(cards)

    if straight and flush:
        return HandRank.STRAIGHT_FLUSH
    if flush:
        return HandRank.FLUSH
    if straight:
        return HandRank.STRAIGHT
    if group_sizes[4]:
        return HandRank.FOUR_OF_A_KIND
    if group_sizes[3] and group_sizes[2]:
        return HandRank.FULL_HOUSE
    if group_sizes[3]:
        return HandRank.THREE_OF_A_KIND
    if group_sizes[2] == 1:
        return HandRank.PAIR
    if group_sizes[2] == 2:
        return HandRank.TWO_PAIRS
    return HandRank.HIGH_CARD


def validate_hand_cards(cards: Sequence[Card]) -> None:
    """Check that cards can form a hand.

    Raises:
        HandSizeError: If there are not exactly five cards
        TypeError: If an entry is not a Card
        DuplicateCardError: If a card appears more than once
    """
    if len(cards) != HAND_SIZE:
        raise HandSizeError(len(cards))
    for card in cards:
        if not isinstance(card, Card):
            raise TypeError(f"Expected Card, got {type(card).__name__}")

    counts = Counter(cards)
    duplicates = [card for card, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateCardError(sort_cards(duplicates))


@dataclass(frozen=True)
class Hand:
    """A classified five-card poker hand.

    Attributes:
        cards: The five cards, sorted by value then suit
        rank: The HandRank, computed once when the hand is built
    """

    cards: Tuple[Card, ...]
    rank: HandRank

    def __post_init__(self) -> None:
        """Reject any hand that from_cards could not have produced."""
        if not isinstance(self.cards, tuple):
            raise TypeError(f"Expected cards as a tuple, got {type(self.cards).__name__}")
        validate_hand_cards(self.cards)
        if list(self.cards) != sort_cards(self.cards):
            raise ValueError(f"Hand cards must be sorted by value then suit: {self}")
        actual = classify_cards(self.cards)
        if self.rank != actual:
            raise HandInvariantError(
                f"Rank {self.rank!r} does not match cards {self}, which classify as {actual.name}"
            )

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Hand":
        """Build and classify a hand.

        Raises:
            HandSizeError: If there are not exactly five cards
            DuplicateCardError: If a card appears more than once
            TypeError: If an entry is not a Card
        """
        cards = list(cards)
        validate_hand_cards(cards)
        ordered = tuple(sort_cards(cards))
        return cls(cards=ordered, rank=classify_cards(ordered))

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Build a hand from a string like "10C 8C QC JC 9C"."""
        return cls.from_cards(make_cards_from_string(s))

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"[ {cards_str} ]"

    def value_groups(self) -> Dict[int, int]:
        """Integer value -> number of cards with that value."""
        return get_value_counts(self.cards)

    def _values_with_count(self, count: int) -> List[int]:
        return sorted(v for v, c in self.value_groups().items() if c == count)

    def highest_card(self) -> Card:
        """The last card in Card order; suit only settles which card object is returned."""
        return self.cards[-1]

    def highest_value(self) -> int:
        return int(self.highest_card().value)

    def highest_pair_value(self) -> int:
        """Value of the highest (or only) pair."""
        pairs = self._values_with_count(2)
        if not pairs:
            raise HandInvariantError(f"Expected a pair in {self}")
        return pairs[-1]

    def lowest_pair_value(self) -> int:
        """Value of the lowest (or only) pair."""
        pairs = self._values_with_count(2)
        if not pairs:
            raise HandInvariantError(f"Expected a pair in {self}")
        return pairs[0]

    def three_of_a_kind_value(self) -> int:
        triples = self._values_with_count(3)
        if not triples:
            raise HandInvariantError(f"Expected three of a kind in {self}")
        return triples[0]

    def four_of_a_kind_value(self) -> int:
        quads = self._values_with_count(4)
        if not quads:
            raise HandInvariantError(f"Expected four of a kind in {self}")
        return quads[0]

    def highest_single_value(self) -> int:
        """Highest value held by exactly one card (not part of a pair, triple or quad)."""
        singles = self._values_with_count(1)
        if not singles:
            raise HandInvariantError(f"Expected a single card value in {self}")
        return singles[-1]
