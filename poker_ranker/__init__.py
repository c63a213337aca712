"""Poker Ranker - five-card poker hand evaluation.

Classifies five-card hands into standard poker ranks and decides the
winner between two hands using the full tie-break ordering.
"""

__version__ = "0.1.0"
__author__ = "Poker Ranker Team"

from poker_ranker.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]
