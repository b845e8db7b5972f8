from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Tuple

from .cards import Card


class Stage(str, Enum):
    DEALING = "DEALING"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"


# Stage reached once the board holds this many cards.
STAGE_BY_BOARD_SIZE = {3: Stage.FLOP, 4: Stage.TURN, 5: Stage.RIVER}


class HandKind(IntEnum):
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self) -> str:
        return self.name.lower()


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, order=True)
class HandClassification:
    # Field order drives comparison: kind first, then kickers.
    kind: HandKind
    kickers: Tuple[int, ...]
    cards: Tuple[Card, ...] = field(default=(), compare=False)


@dataclass
class TableConfig:
    seats: int = 6
    table_id: str = "T-1"


@dataclass
class Participant:
    name: str
    seat: int = 0
    hole_cards: List[Card] = field(default_factory=list)

    def reset_for_round(self) -> None:
        self.hole_cards.clear()
