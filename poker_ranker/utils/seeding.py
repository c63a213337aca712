"""Deterministic seeding for randomized checks.

Sampling random hands (for the CLI's --random mode and for property tests)
goes through Python's random, NumPy and PyTorch; one call seeds all three.
"""

import random
from typing import List, Optional, Tuple

import numpy as np
import torch

from poker_ranker.rules.cards import Card, create_standard_deck


def set_seed(seed: Optional[int] = None) -> int:
    """Seed random, numpy and torch.

    Args:
        seed: The seed value. If None, one is drawn and returned so the run
              can be reproduced.

    Returns:
        The seed that was used.

    Example:
        >>> from poker_ranker import set_seed
        >>> set_seed(7)
        7
    """
    if seed is None:
        seed = random.randint(0, 2**32 - 1)

    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)

    return seed


def sample_hand_pairs(
    count: int, rng: Optional[random.Random] = None
) -> List[Tuple[List[Card], List[Card]]]:
    """Draw `count` pairs of disjoint five-card hands from a fresh deck each time.

    Args:
        count: Number of pairs
        rng: Random source, defaults to the module-level one seeded by set_seed

    Returns:
        List of (first_cards, second_cards) card lists
    """
    rng = rng or random
    deck = create_standard_deck()
    pairs = []
    for _ in range(count):
        cards = rng.sample(deck, 10)
        pairs.append((cards[:5], cards[5:]))
    return pairs
