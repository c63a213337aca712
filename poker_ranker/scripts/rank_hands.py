#!/usr/bin/env python3
"""Rank two five-card poker hands from the command line.

Prints each hand's rank and the winner. With --random, samples pairs of
hands instead and ranks them in one batch on the selected device.

Usage:
    python -m poker_ranker.scripts.rank_hands "10C 8C QC JC 9C" "3D 8D 3C 3H 3S"
    python -m poker_ranker.scripts.rank_hands "QD AC 4S 2S 8H" "KD JC 4S 2S 4H" --log-level DEBUG
    python -m poker_ranker.scripts.rank_hands --random 20 --seed 42
    python -m poker_ranker.scripts.rank_hands --help
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from poker_ranker.rules import Hand, HandError, HandRank, Winner, rank_hands
from poker_ranker.rules.batch import BatchHandEvaluator, encode_hands
from poker_ranker.utils.seeding import sample_hand_pairs, set_seed

logger = logging.getLogger(__name__)

WINNER_LABELS = {1: "Hand 1", -1: "Hand 2", 0: "Draw"}


@dataclass(frozen=True)
class RankConfig:
    """Command-line configuration."""

    first: Optional[str] = None
    second: Optional[str] = None
    random_pairs: int = 0
    seed: Optional[int] = None
    device: str = "cpu"
    log_level: str = "WARNING"


def rank_pair(config: RankConfig, console: Console) -> Winner:
    """Rank the two hands given on the command line."""
    hand1 = Hand.from_string(config.first)
    hand2 = Hand.from_string(config.second)
    result = rank_hands(hand1, hand2)

    table = Table(title="Hands", box=box.SIMPLE, show_header=True)
    table.add_column("Hand", justify="right")
    table.add_column("Cards")
    table.add_column("Rank")
    for label, hand in (("1", hand1), ("2", hand2)):
        style = "bold green" if result.winning_hand is hand else None
        table.add_row(label, str(hand), hand.rank.display_name, style=style)

    console.print(table)
    console.print(result.description, markup=False)
    return result.winner


def rank_random_pairs(config: RankConfig, console: Console) -> List[int]:
    """Sample and rank random pairs of hands with the batch evaluator."""
    seed = set_seed(config.seed)
    logger.info("Sampling %d hand pairs with seed %d", config.random_pairs, seed)

    pairs = sample_hand_pairs(config.random_pairs)
    first = encode_hands(cards for cards, _ in pairs)
    second = encode_hands(cards for _, cards in pairs)

    evaluator = BatchHandEvaluator(config.device)
    ranks1 = evaluator.classify(first).tolist()
    ranks2 = evaluator.classify(second).tolist()
    outcomes = evaluator.compare(first, second).tolist()

    table = Table(title=f"Random hands (seed={seed})", box=box.SIMPLE, show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Hand 1")
    table.add_column("Rank 1")
    table.add_column("Hand 2")
    table.add_column("Rank 2")
    table.add_column("Winner")

    for i, (cards1, cards2) in enumerate(pairs):
        table.add_row(
            str(i + 1),
            str(Hand.from_cards(cards1)),
            HandRank(ranks1[i]).display_name,
            str(Hand.from_cards(cards2)),
            HandRank(ranks2[i]).display_name,
            WINNER_LABELS[outcomes[i]],
        )

    console.print(table)
    return outcomes


def parse_args(argv: Optional[Sequence[str]] = None) -> RankConfig:
    parser = argparse.ArgumentParser(description="Rank two five-card poker hands")
    parser.add_argument("first", nargs="?", help='First hand, e.g. "10C 8C QC JC 9C"')
    parser.add_argument("second", nargs="?", help='Second hand, e.g. "3D 8D 3C 3H 3S"')
    parser.add_argument(
        "--random",
        type=int,
        default=0,
        dest="random_pairs",
        help="Rank N random hand pairs instead of the given hands",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    parser.add_argument("--device", type=str, default="cpu", help="Torch device for --random")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    if args.random_pairs < 0:
        parser.error("--random must be non-negative")
    if not args.random_pairs and (args.first is None or args.second is None):
        parser.error("two hands are required unless --random is given")
    if not args.random_pairs:
        for text in (args.first, args.second):
            try:
                Hand.from_string(text)
            except (HandError, ValueError) as e:
                parser.error(f"invalid hand {text!r}: {e}")

    return RankConfig(
        first=args.first,
        second=args.second,
        random_pairs=args.random_pairs,
        seed=args.seed,
        device=args.device,
        log_level=args.log_level,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = Console()

    if config.random_pairs:
        rank_random_pairs(config, console)
    else:
        rank_pair(config, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
