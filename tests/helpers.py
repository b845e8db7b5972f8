from __future__ import annotations

import random
from typing import List, Sequence

from holdem.cards import Card, Deck, parse_cards
from holdem.models import Participant, TableConfig
from holdem.round import Round
from holdem.table import Table


def make_participants(count: int) -> List[Participant]:
    return [Participant(name=f"Player{idx}", seat=idx) for idx in range(count)]


def create_table(*, seats: int = 4, table_id: str = "T-TEST") -> Table:
    """Instantiate a table with every seat filled."""
    table = Table(TableConfig(seats=seats, table_id=table_id))
    for idx in range(seats):
        table.assign_seat(f"Player{idx}")
    return table


def start_round(count: int = 3, seed: int = 42, **kwargs) -> Round:
    return Round(make_participants(count), Deck.from_seed(seed), **kwargs)


def undrawn(deck: Deck) -> List[Card]:
    """Copy of the cards still in the deck, next to be drawn first."""
    return list(reversed(deck._cards))


def rigged_deck(labels: Sequence[str]) -> Deck:
    """A deck whose top cards come out in the order given by `labels`."""
    deck = Deck(random.Random(0))
    top = parse_cards(labels)
    rest = [card for card in undrawn(deck) if card not in top]
    # Cards are drawn from the end of the internal list.
    deck._cards = list(reversed(top + rest))
    return deck
