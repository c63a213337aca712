"""Batched hand evaluation with PyTorch.

This module provides:
- A fixed array encoding for five-card hands
- Vectorized classification of many hands at once
- Vectorized head-to-head comparison of two equally sized batches

Every hand in a batch is evaluated independently; comparisons are always
between hand i of the first batch and hand i of the second. Results match
classify_cards / compare_hands exactly.

Hand encoding: int64 array of shape [N, 5, 2] where [..., 0] is the card
value (2-14) and [..., 1] the suit index (0-3). Rows that Hand
construction would reject raise before any evaluation, and so do
non-integer dtypes.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

import numpy as np
import torch

from .cards import Card, Suit, Value
from .hands import HAND_SIZE, DuplicateCardError, Hand, HandRank, HandSizeError

# Counts are indexed directly by card value, so index 0 and 1 stay empty
NUM_VALUE_SLOTS = 15
# (rank, k1, k2, k3); two pairs uses all three tie-break slots
TIE_BREAK_WIDTH = 4

HandBatch = Union[np.ndarray, torch.Tensor]


def encode_hand(hand: Union[Hand, Sequence[Card]]) -> np.ndarray:
    """Encode one hand as a [5, 2] int64 array."""
    if not isinstance(hand, Hand):
        hand = Hand.from_cards(hand)
    return np.array([[int(c.value), int(c.suit)] for c in hand.cards], dtype=np.int64)


def encode_hands(hands: Iterable[Union[Hand, Sequence[Card]]]) -> np.ndarray:
    """Encode hands as an [N, 5, 2] int64 array.

    Card sequences are validated through Hand.from_cards, so they raise
    HandSizeError / DuplicateCardError like any other hand construction.
    """
    encoded = [encode_hand(hand) for hand in hands]
    if not encoded:
        return np.zeros((0, HAND_SIZE, 2), dtype=np.int64)
    return np.stack(encoded)


@dataclass
class BatchHandEvaluator:
    """Tensor hand classifier and comparator.

    Keeps its lookup tensors on one device; inputs are moved there.
    """

    device: torch.device
    value_index: torch.Tensor  # [15] - 0..14, used to read values back out of counts

    def __init__(self, device: Union[torch.device, str] = "cpu"):
        self.device = torch.device(device)
        self.value_index = torch.arange(NUM_VALUE_SLOTS, device=self.device, dtype=torch.long)

    def _as_tensor(self, hands: HandBatch) -> torch.Tensor:
        if isinstance(hands, torch.Tensor):
            dtype = hands.dtype
            integral = not (dtype.is_floating_point or dtype.is_complex or dtype == torch.bool)
        else:
            hands = np.asarray(hands)
            dtype = hands.dtype
            integral = np.issubdtype(dtype, np.integer)
        if not integral:
            raise ValueError(f"Encoded hands must hold integers, got dtype {dtype}")

        tensor = torch.as_tensor(hands, dtype=torch.long).to(self.device)
        if tensor.dim() != 3 or tensor.shape[2] != 2:
            raise ValueError(f"Expected hands of shape [N, 5, 2], got {tuple(tensor.shape)}")
        if tensor.shape[1] != HAND_SIZE:
            raise HandSizeError(int(tensor.shape[1]))
        values = tensor[..., 0]
        suits = tensor[..., 1]
        if tensor.numel() and (
            values.min() < int(Value.TWO)
            or values.max() > int(Value.ACE)
            or suits.min() < 0
            or suits.max() >= len(Suit)
        ):
            raise ValueError("Encoded hands contain out-of-range values or suits")

        # One code per distinct card; equal neighbours after sorting are repeats
        codes = (values * len(Suit) + suits).sort(dim=1).values
        repeated = codes[:, 1:] == codes[:, :-1]
        if repeated.any():
            row = int(repeated.any(dim=1).nonzero()[0, 0])
            duplicate_codes = codes[row, 1:][repeated[row]].unique().tolist()
            raise DuplicateCardError(
                [Card(Value(c // len(Suit)), Suit(c % len(Suit))) for c in duplicate_codes]
            )
        return tensor

    def _value_counts(self, values: torch.Tensor) -> torch.Tensor:
        """[N, 5] values -> [N, 15] number of cards per value."""
        counts = torch.zeros(
            (values.shape[0], NUM_VALUE_SLOTS), dtype=torch.long, device=self.device
        )
        return counts.scatter_add_(1, values, torch.ones_like(values))

    def _top_value(self, mask: torch.Tensor) -> torch.Tensor:
        """Highest value selected by a [N, 15] mask, 0 where the mask is empty."""
        return torch.where(mask, self.value_index, torch.zeros_like(self.value_index)).max(dim=1).values

    def _classify(self, hands: torch.Tensor, counts: torch.Tensor) -> torch.Tensor:
        values = hands[..., 0]
        suits = hands[..., 1]

        sorted_values = values.sort(dim=1).values
        straight = (sorted_values[:, 1:] - sorted_values[:, :-1] == 1).all(dim=1)
        flush = (suits == suits[:, :1]).all(dim=1)

        quads = (counts == 4).sum(dim=1)
        triples = (counts == 3).sum(dim=1)
        pairs = (counts == 2).sum(dim=1)

        # Applied from lowest to highest priority; later checks overwrite earlier ones
        ranks = torch.full_like(pairs, int(HandRank.HIGH_CARD))
        ranks = torch.where(pairs == 2, int(HandRank.TWO_PAIRS), ranks)
        ranks = torch.where(pairs == 1, int(HandRank.PAIR), ranks)
        ranks = torch.where(triples > 0, int(HandRank.THREE_OF_A_KIND), ranks)
        ranks = torch.where((triples > 0) & (pairs > 0), int(HandRank.FULL_HOUSE), ranks)
        ranks = torch.where(quads > 0, int(HandRank.FOUR_OF_A_KIND), ranks)
        ranks = torch.where(straight, int(HandRank.STRAIGHT), ranks)
        ranks = torch.where(flush, int(HandRank.FLUSH), ranks)
        ranks = torch.where(straight & flush, int(HandRank.STRAIGHT_FLUSH), ranks)
        return ranks

    def classify(self, hands: HandBatch) -> torch.Tensor:
        """Classify a batch of encoded hands.

        Args:
            hands: [N, 5, 2] encoded hands

        Returns:
            [N] long tensor of HandRank values
        """
        tensor = self._as_tensor(hands)
        counts = self._value_counts(tensor[..., 0])
        return self._classify(tensor, counts)

    def tie_break_keys(self, hands: HandBatch) -> torch.Tensor:
        """Lexicographic strength keys for a batch of encoded hands.

        Returns:
            [N, 4] long tensor of (rank, k1, k2, k3). Comparing two rows
            lexicographically gives the same outcome as compare_hands.
        """
        tensor = self._as_tensor(hands)
        counts = self._value_counts(tensor[..., 0])
        ranks = self._classify(tensor, counts)

        high_card = self._top_value(counts > 0)
        single = self._top_value(counts == 1)
        high_pair = self._top_value(counts == 2)
        triple = self._top_value(counts == 3)
        quad = self._top_value(counts == 4)
        # Lowest pair: replace the empty slots with a sentinel above any value
        sentinel = torch.full_like(self.value_index, NUM_VALUE_SLOTS)
        low_pair = torch.where(counts == 2, self.value_index, sentinel).min(dim=1).values

        is_pair = ranks == int(HandRank.PAIR)
        is_two_pairs = ranks == int(HandRank.TWO_PAIRS)
        is_triple = (ranks == int(HandRank.THREE_OF_A_KIND)) | (ranks == int(HandRank.FULL_HOUSE))
        is_quad = ranks == int(HandRank.FOUR_OF_A_KIND)
        zeros = torch.zeros_like(ranks)

        k1 = high_card
        k1 = torch.where(is_pair | is_two_pairs, high_pair, k1)
        k1 = torch.where(is_triple, triple, k1)
        k1 = torch.where(is_quad, quad, k1)

        k2 = torch.where(is_pair, single, zeros)
        k2 = torch.where(is_two_pairs, low_pair, k2)

        k3 = torch.where(is_two_pairs, single, zeros)

        return torch.stack([ranks, k1, k2, k3], dim=1)

    def compare(self, first: HandBatch, second: HandBatch) -> torch.Tensor:
        """Compare hand i of `first` with hand i of `second`.

        Returns:
            [N] long tensor: 1 if the first hand wins, -1 if the second wins, 0 for a draw
        """
        keys1 = self.tie_break_keys(first)
        keys2 = self.tie_break_keys(second)
        if keys1.shape != keys2.shape:
            raise ValueError(
                f"Batches must have the same size, got {keys1.shape[0]} vs {keys2.shape[0]}"
            )

        signs = (keys1 - keys2).sign()
        # argmax returns the first maximal index: the first deciding key
        decisive = (signs != 0).long().argmax(dim=1, keepdim=True)
        return signs.gather(1, decisive).squeeze(1)
