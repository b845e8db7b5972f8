"""Deal a batch of seeded rounds and log every hand.

Example:
    python -m holdem --players 4 --rounds 20 --seed 7 --fold-rate 0.2
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from .evaluator import describe_hand
from .models import TableConfig
from .round import Round
from .table import Table

LOGGER = logging.getLogger("round_sim")


def play_round(round_: Round, rng: random.Random, fold_rate: float) -> None:
    """Reveal the board to the river, letting participants fold along the way."""
    while True:
        for name in list(round_.active_participants):
            if len(round_.active_participants) > 1 and rng.random() < fold_rate:
                round_.pass_participant(name)
        if round_.is_finished:
            break
        round_.open_card()


def report(round_: Round) -> None:
    for name in round_.active_participants:
        hand = round_.get_combination(name)
        LOGGER.info(
            "%s: %s holds %s (%s)",
            round_.round_id,
            name,
            describe_hand(hand),
            " ".join(card.label for card in hand.cards),
        )
    LOGGER.info("%s: standings %s", round_.round_id, round_.standings())


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Deal seeded hold'em rounds and log the best hands")
    parser.add_argument("--players", type=int, default=4)
    parser.add_argument("--rounds", type=int, default=10)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--fold-rate", type=float, default=0.0, help="chance a participant folds at each stage")
    parser.add_argument("--table-id", default="SIM")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    table = Table(TableConfig(seats=args.players, table_id=args.table_id))
    for idx in range(args.players):
        table.assign_seat(f"SimPlayer{idx}")

    rng = random.Random(args.seed)
    for offset in range(args.rounds):
        round_ = table.start_round(seed=args.seed + offset, on_finish=report)
        play_round(round_, rng, args.fold_rate)
        table.end_round()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
