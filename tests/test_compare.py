"""Tests for head-to-head hand comparison.

Test coverage:
- Different ranks: the higher rank wins
- Same rank: rank-specific tie-break sequences with fall-through
- Suit never breaks a tie
- Draws, descriptions and logging of the outcome
"""

import itertools
import logging

import pytest
from poker_ranker.rules import (
    Hand,
    HandRank,
    HandInvariantError,
    Winner,
    compare_hands,
    rank_hands,
    tie_break_values,
    make_cards_from_string,
)


def _hand(s: str) -> Hand:
    return Hand.from_string(s)


def _flip(winner: Winner) -> Winner:
    return {Winner.FIRST: Winner.SECOND, Winner.SECOND: Winner.FIRST, Winner.DRAW: Winner.DRAW}[winner]


class TestDifferentRanks:
    """The higher rank wins regardless of card values."""

    def test_pair_beats_high_card(self):
        high_card = _hand("QD AC 4S 2S 8H")
        pair = _hand("KD JC 4S 2S 4H")
        assert high_card.rank == HandRank.HIGH_CARD
        assert pair.rank == HandRank.PAIR
        assert compare_hands(high_card, pair) == Winner.SECOND
        assert compare_hands(pair, high_card) == Winner.FIRST

    def test_every_rank_beats_all_lower_ranks(self):
        examples = [
            _hand("QD AC 4S 2S 8H"),  # high card
            _hand("KD JC 4S 2S 4H"),  # pair
            _hand("4D 8D 4C 8H 9S"),  # two pairs
            _hand("3D 8D 3C 3H 9S"),  # three of a kind
            _hand("10D 8C QS JS 9H"),  # straight
            _hand("3D AD 10D 2D 7D"),  # flush
            _hand("3D 8D 3C 3H 8S"),  # full house
            _hand("3D 8D 3C 3H 3S"),  # four of a kind
            _hand("10C 8C QC JC 9C"),  # straight flush
        ]
        assert [h.rank for h in examples] == list(HandRank)
        for lower, higher in itertools.combinations(examples, 2):
            assert compare_hands(higher, lower) == Winner.FIRST
            assert compare_hands(lower, higher) == Winner.SECOND

    def test_low_four_of_a_kind_beats_ace_full_house(self):
        assert compare_hands(_hand("2D 2C 2H 2S 3S"), _hand("AD AC AH KS KD")) == Winner.FIRST


class TestPairTieBreak:
    """Pair: pair value, then highest single card."""

    def test_higher_pair_wins(self):
        assert compare_hands(_hand("5D 5C 2S 3S 7H"), _hand("4D 4C AS KS QH")) == Winner.FIRST

    def test_ace_kicker_beats_king_kicker(self):
        ace_kicker = _hand("4D 4C AS 2S 8H")
        king_kicker = _hand("4H 4S KD 2D 8C")
        assert tie_break_values(ace_kicker) == (4, 14)
        assert compare_hands(ace_kicker, king_kicker) == Winner.FIRST
        assert compare_hands(king_kicker, ace_kicker) == Winner.SECOND

    def test_only_highest_single_counts(self):
        # Same pair, same top kicker; lower kickers are not compared
        assert compare_hands(_hand("4D 4C AS 9S 8H"), _hand("4H 4S AD 3D 2C")) == Winner.DRAW


class TestTwoPairsTieBreak:
    """Two pairs: higher pair, lower pair, then the remaining card."""

    def test_higher_top_pair_wins(self):
        assert compare_hands(_hand("9D 9C 2S 2H 3H"), _hand("8D 8C 7S 7H AH")) == Winner.FIRST

    def test_higher_lower_pair_wins(self):
        kings_and_fives = _hand("KD KC 5S 5H 2H")
        kings_and_fours = _hand("KH KS 4S 4H AH")
        assert compare_hands(kings_and_fives, kings_and_fours) == Winner.FIRST
        assert compare_hands(kings_and_fours, kings_and_fives) == Winner.SECOND

    def test_remaining_card_decides(self):
        high = _hand("KD KC 5S 5H QH")
        low = _hand("KH KS 5D 5C JH")
        assert tie_break_values(high) == (13, 5, 12)
        assert compare_hands(high, low) == Winner.FIRST

    def test_identical_values_draw(self):
        assert compare_hands(_hand("KD KC 5S 5H QH"), _hand("KH KS 5D 5C QC")) == Winner.DRAW


class TestGroupedTieBreak:
    """Three of a kind, full house and four of a kind compare the group value."""

    def test_three_of_a_kind(self):
        assert compare_hands(_hand("9D 9C 9S 2H 3H"), _hand("8D 8C 8S AH KH")) == Winner.FIRST

    def test_full_house_uses_triple_not_pair(self):
        sevens_full = _hand("7D 7C 7S AH AD")
        sixes_full = _hand("6D 6C 6S KH KD")
        aces_full = _hand("AS AC AH 7H 7S")
        assert compare_hands(sevens_full, sixes_full) == Winner.FIRST
        assert compare_hands(aces_full, sevens_full) == Winner.FIRST

    def test_four_of_a_kind(self):
        assert compare_hands(_hand("9D 9C 9S 9H 2H"), _hand("8D 8C 8S 8H AH")) == Winner.FIRST
        assert tie_break_values(_hand("3D 8D 3C 3H 3S")) == (3,)


class TestHighestCardTieBreak:
    """Straight flush, flush, straight and high card compare the highest card."""

    @pytest.mark.parametrize(
        "first,second,expected",
        [
            ("10C 8C QC JC 9C", "9H 8H 7H 6H 5H", Winner.FIRST),
            ("3D AD 10D 2D 7D", "3C KC 10C 2C 7C", Winner.FIRST),
            ("10D 8C QS JS 9H", "KD 9C QH JS 10H", Winner.SECOND),
            ("QD AC 4S 2S 8H", "KD JC 5S 2H 9H", Winner.FIRST),
        ],
    )
    def test_highest_card_decides(self, first, second, expected):
        assert compare_hands(_hand(first), _hand(second)) == expected

    def test_suit_does_not_break_ties(self):
        spade_ace = _hand("AS QD 4S 2S 8H")
        club_ace = _hand("AC 9D 5C 3D 7H")
        assert compare_hands(spade_ace, club_ace) == Winner.DRAW
        assert compare_hands(club_ace, spade_ace) == Winner.DRAW

    def test_only_highest_card_is_compared(self):
        # Second-highest cards differ but are not part of the tie-break
        assert compare_hands(_hand("AS KD 4S 2S 8H"), _hand("AC 3D 5C 7D 9H")) == Winner.DRAW

    def test_equal_straights_draw(self):
        assert compare_hands(_hand("10D 8C QS JS 9H"), _hand("10C 8D QH JH 9S")) == Winner.DRAW


class TestComparisonProperties:
    """Symmetry and permutation invariance."""

    def test_antisymmetric(self):
        hands = [
            _hand("QD AC 4S 2S 8H"),
            _hand("KD JC 4S 2S 4H"),
            _hand("4D 4C AS 2S 8H"),
            _hand("KD KC 5S 5H 2H"),
            _hand("3D AD 10D 2D 7D"),
        ]
        for a, b in itertools.product(hands, repeat=2):
            assert compare_hands(b, a) == _flip(compare_hands(a, b))

    def test_input_order_does_not_matter(self):
        cards1 = make_cards_from_string("4D 4C AS 2S 8H")
        cards2 = make_cards_from_string("4H 4S KD 2D 8C")
        outcomes = {
            compare_hands(Hand.from_cards(p), Hand.from_cards(reversed(cards2)))
            for p in itertools.permutations(cards1)
        }
        assert outcomes == {Winner.FIRST}


class TestInvariantViolations:
    """A hand whose rank does not match its cards fails loudly."""

    @staticmethod
    def _mislabel(hand: Hand, rank: HandRank) -> Hand:
        # Bypasses Hand validation to reach the comparator with a wrong rank
        mislabeled = object.__new__(Hand)
        object.__setattr__(mislabeled, "cards", hand.cards)
        object.__setattr__(mislabeled, "rank", rank)
        return mislabeled

    def test_misclassified_hand_raises(self):
        honest = _hand("QD AC 4S 2S 8H")
        forged = self._mislabel(honest, HandRank.PAIR)
        with pytest.raises(HandInvariantError):
            tie_break_values(forged)
        with pytest.raises(HandInvariantError):
            compare_hands(forged, _hand("KD JC 4S 2S 4H"))

    def test_misclassified_full_house_raises(self):
        honest = _hand("4D 8D 4C 8H 9S")
        forged = self._mislabel(honest, HandRank.FULL_HOUSE)
        with pytest.raises(HandInvariantError):
            tie_break_values(forged)


class TestRankHands:
    """rank_hands reports the winning hand and a description."""

    def test_first_wins(self):
        pair = _hand("KD JC 4S 2S 4H")
        high_card = _hand("QD AC 4S 2S 8H")
        result = rank_hands(pair, high_card)
        assert result.winner == Winner.FIRST
        assert result.winning_hand is pair
        assert result.description.startswith("Hand 1 wins with Pair")
        assert str(pair) in result.description

    def test_second_wins(self):
        result = rank_hands(_hand("QD AC 4S 2S 8H"), _hand("KD JC 4S 2S 4H"))
        assert result.winner == Winner.SECOND
        assert result.description.startswith("Hand 2 wins with Pair")

    def test_draw(self):
        result = rank_hands(_hand("AS QD 4S 2S 8H"), _hand("AC 9D 5C 3D 7H"))
        assert result.winner == Winner.DRAW
        assert result.winning_hand is None
        assert "draw" in result.description

    def test_description_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="poker_ranker.rules.compare"):
            result = rank_hands(_hand("KD JC 4S 2S 4H"), _hand("QD AC 4S 2S 8H"))
        assert result.description in caplog.text
