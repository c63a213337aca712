"""Card value and suit definitions and utilities.

Value order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

The Ace is always high (14); there is no ace-low value.

This module provides:
- Value and Suit enums
- Card representation
- Parsing and display helpers
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List


class Value(IntEnum):
    """Card values. The integer is the value used for every strength comparison."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest value

    @property
    def symbol(self) -> str:
        return VALUE_SYMBOLS[self]

    @property
    def description(self) -> str:
        return VALUE_DESCRIPTIONS[self]


class Suit(IntEnum):
    """Card suits. Order only matters for sorting cards of equal value."""

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]

    @property
    def description(self) -> str:
        return self.name.lower()


# Value symbols for display
VALUE_SYMBOLS = {
    Value.TWO: "2",
    Value.THREE: "3",
    Value.FOUR: "4",
    Value.FIVE: "5",
    Value.SIX: "6",
    Value.SEVEN: "7",
    Value.EIGHT: "8",
    Value.NINE: "9",
    Value.TEN: "10",
    Value.JACK: "J",
    Value.QUEEN: "Q",
    Value.KING: "K",
    Value.ACE: "A",
}

VALUE_DESCRIPTIONS = {
    value: symbol for value, symbol in VALUE_SYMBOLS.items() if value <= Value.TEN
}
VALUE_DESCRIPTIONS.update(
    {
        Value.JACK: "Jack",
        Value.QUEEN: "Queen",
        Value.KING: "King",
        Value.ACE: "Ace",
    }
)

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.CLUB: "♣",
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
    Suit.SPADE: "♠",
}

# Symbol to value mapping (for parsing)
SYMBOL_TO_VALUE: Dict[str, Value] = {v: k for k, v in VALUE_SYMBOLS.items()}
SYMBOL_TO_VALUE["T"] = Value.TEN

SYMBOL_TO_SUIT: Dict[str, Suit] = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({"C": Suit.CLUB, "D": Suit.DIAMOND, "H": Suit.HEART, "S": Suit.SPADE})


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with value and suit.

    Cards are ordered by value first, then by suit, so a sorted hand reads
    from the lowest value to the highest. Immutable and hashable for use in sets.
    """

    value: Value
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.value, Value):
            raise ValueError(f"Invalid card value: {self.value!r}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid card suit: {self.suit!r}")

    def __str__(self) -> str:
        return f"{VALUE_SYMBOLS[self.value]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @property
    def description(self) -> str:
        """Long form, e.g. 'diamond Queen'."""
        return f"{self.suit.description} {self.value.description}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from string like 'Q♦', '10C', 'TC' or 'ah'.

        Args:
            s: Card string in format "VALUE+SUIT"

        Returns:
            Card object

        Raises:
            ValueError: If string cannot be parsed
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        suit_char = s[-1].upper()
        value_str = s[:-1].upper()

        if suit_char not in SYMBOL_TO_SUIT:
            raise ValueError(f"Invalid suit character: {s[-1]}")
        if value_str not in SYMBOL_TO_VALUE:
            raise ValueError(f"Invalid value: {s[:-1]}")

        return cls(value=SYMBOL_TO_VALUE[value_str], suit=SYMBOL_TO_SUIT[suit_char])


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 values × 4 suits), in Card order
    """
    return [Card(value=value, suit=suit) for value in Value for suit in Suit]


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by value (ascending), then by suit."""
    return sorted(cards)


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "10C 8C QC JC 9C".

    Args:
        s: Whitespace-separated card strings

    Returns:
        List of Card objects, in input order
    """
    return [Card.from_string(cs) for cs in s.split()]
