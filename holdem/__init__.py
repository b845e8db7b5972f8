"""Texas Hold'em rules core: deck, round stages and hand ranking."""

from .cards import Card, Deck, RANKS, SUITS, Suit, cards_to_labels, parse_cards, parse_label
from .errors import (
    DeckExhausted,
    DuplicateCard,
    DuplicateParticipant,
    HoldemError,
    InvalidCardLabel,
    InvalidHandSize,
    InvalidRank,
    InvalidSuit,
    NotEnoughParticipants,
    ParticipantNotFound,
    RoundAlreadyFinished,
    TableFull,
)
from .evaluator import compare_hands, describe_hand, evaluate_best
from .models import HandClassification, HandKind, Ordering, Participant, Stage, TableConfig
from .round import Round
from .table import Table

__all__ = [
    "Card",
    "Deck",
    "RANKS",
    "SUITS",
    "Suit",
    "cards_to_labels",
    "parse_cards",
    "parse_label",
    "HoldemError",
    "InvalidRank",
    "InvalidSuit",
    "InvalidCardLabel",
    "DeckExhausted",
    "RoundAlreadyFinished",
    "ParticipantNotFound",
    "DuplicateParticipant",
    "InvalidHandSize",
    "DuplicateCard",
    "TableFull",
    "NotEnoughParticipants",
    "compare_hands",
    "describe_hand",
    "evaluate_best",
    "HandClassification",
    "HandKind",
    "Ordering",
    "Participant",
    "Stage",
    "TableConfig",
    "Round",
    "Table",
]
