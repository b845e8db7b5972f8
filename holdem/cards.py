from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .errors import DeckExhausted, InvalidCardLabel, InvalidRank, InvalidSuit

RANKS = "23456789TJQKA"
MIN_RANK = 0
MAX_RANK = len(RANKS) - 1
HOLE_CARDS = 2
BOARD_SIZE = 5
FLOP_SIZE = 3


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CROSSES = "c"
    SPADES = "s"


SUITS = "".join(suit.value for suit in Suit)


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            try:
                object.__setattr__(self, "suit", Suit(self.suit))
            except ValueError:
                raise InvalidSuit(f"Invalid suit: {self.suit}") from None
        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            raise InvalidRank(f"Invalid rank: {self.rank!r}")
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise InvalidRank(f"Invalid rank: {self.rank}")

    @property
    def label(self) -> str:
        return f"{RANKS[self.rank]}{self.suit.value}"

    def __str__(self) -> str:
        return self.label


def full_deck() -> List[Card]:
    """All 52 cards in a fixed, unshuffled order."""
    return [Card(suit, rank) for rank in range(MIN_RANK, MAX_RANK + 1) for suit in Suit]


def deal(cards: List[Card], count: int) -> List[Card]:
    if len(cards) < count:
        raise DeckExhausted("Not enough cards left in deck")
    dealt = cards[-count:]
    del cards[-count:]
    dealt.reverse()
    return dealt


class Deck:
    """A shuffled 52-card pool. Cards leave from the top and never come back."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards = full_deck()
        self._rng.shuffle(self._cards)
        self.drawn = 0

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "Deck":
        return cls(random.Random(seed))

    @property
    def remaining(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"

    def are_cards_available(self, active_participants: int) -> bool:
        # Inclusive: a deck holding exactly enough cards for every hole pair
        # plus a full board can still run the round.
        needed = active_participants * HOLE_CARDS + BOARD_SIZE
        return len(self._cards) >= needed

    def draw_pair(self) -> List[Card]:
        cards = deal(self._cards, HOLE_CARDS)
        self.drawn += HOLE_CARDS
        return cards

    def draw_one(self) -> Card:
        card = deal(self._cards, 1)[0]
        self.drawn += 1
        return card


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise InvalidCardLabel(f"Invalid card label: {label}")
    rank_char, suit_char = label[0].upper(), label[1].lower()
    if rank_char not in RANKS:
        raise InvalidRank(f"Invalid rank: {label[0]}")
    if suit_char not in SUITS:
        raise InvalidSuit(f"Invalid suit: {label[1]}")
    return Card(Suit(suit_char), RANKS.index(rank_char))


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
