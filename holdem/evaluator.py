from __future__ import annotations

import itertools
from typing import Dict, Iterable, Optional, Sequence, Tuple

from .cards import MAX_RANK, Card
from .errors import DuplicateCard, InvalidHandSize
from .models import HandClassification, HandKind, Ordering

HAND_SIZE = 5
MAX_CARDS = 7
ACE = MAX_RANK
FIVE = 3
WHEEL = frozenset({ACE, 0, 1, 2, FIVE})

_SHAPES = {
    (4, 1): HandKind.FOUR_OF_A_KIND,
    (3, 2): HandKind.FULL_HOUSE,
    (3, 1, 1): HandKind.THREE_OF_A_KIND,
    (2, 2, 1): HandKind.TWO_PAIR,
    (2, 1, 1, 1): HandKind.PAIR,
}


def evaluate_best(cards: Iterable[Card]) -> HandClassification:
    """Return the best 5-card hand available from 5 to 7 distinct cards."""
    pool = tuple(cards)
    _check_pool(pool)
    best: Optional[HandClassification] = None
    for combo in itertools.combinations(pool, HAND_SIZE):
        candidate = classify_five(combo)
        if best is None or candidate > best:
            best = candidate
    assert best is not None
    return best


def classify_five(cards: Sequence[Card]) -> HandClassification:
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(f"Expected {HAND_SIZE} cards, got {len(cards)}")

    counts: Dict[int, int] = {}
    for card in cards:
        counts.setdefault(card.rank, 0)
        counts[card.rank] += 1

    ordered_counts = sorted(counts.items(), key=lambda x: (x[1], x[0]), reverse=True)
    shape = tuple(count for _, count in ordered_counts)
    kickers = tuple(rank for rank, _ in ordered_counts)
    hand = tuple(sorted(cards, key=lambda card: (counts[card.rank], card.rank), reverse=True))

    kind = _SHAPES.get(shape)
    if kind is not None:
        return HandClassification(kind, kickers, hand)

    is_flush = len({card.suit for card in cards}) == 1
    straight_high = _straight_high(counts)

    if straight_high is not None:
        if straight_high == FIVE:
            # Wheel: the ace plays low.
            hand = hand[1:] + hand[:1]
        if is_flush:
            kind = HandKind.ROYAL_FLUSH if straight_high == ACE else HandKind.STRAIGHT_FLUSH
        else:
            kind = HandKind.STRAIGHT
        return HandClassification(kind, (straight_high,), hand)
    if is_flush:
        return HandClassification(HandKind.FLUSH, kickers, hand)
    return HandClassification(HandKind.HIGH_CARD, kickers, hand)


def _straight_high(counts: Dict[int, int]) -> Optional[int]:
    ranks = set(counts)
    if len(ranks) != HAND_SIZE:
        return None
    if ranks == WHEEL:
        return FIVE
    if max(ranks) - min(ranks) == HAND_SIZE - 1:
        return max(ranks)
    return None


def _check_pool(cards: Tuple[Card, ...]) -> None:
    if not HAND_SIZE <= len(cards) <= MAX_CARDS:
        raise InvalidHandSize(f"Expected {HAND_SIZE} to {MAX_CARDS} cards, got {len(cards)}")
    seen = set()
    for card in cards:
        if card in seen:
            raise DuplicateCard(f"Duplicate card: {card.label}")
        seen.add(card)


def compare_hands(left: HandClassification, right: HandClassification) -> Ordering:
    """Order two classifications by kind, then kicker by kicker."""
    if left.kind != right.kind:
        return Ordering.GREATER if left.kind > right.kind else Ordering.LESS
    for mine, theirs in zip(left.kickers, right.kickers):
        if mine != theirs:
            return Ordering.GREATER if mine > theirs else Ordering.LESS
    if len(left.kickers) != len(right.kickers):
        return Ordering.GREATER if len(left.kickers) > len(right.kickers) else Ordering.LESS
    return Ordering.EQUAL


def describe_hand(classification: HandClassification) -> str:
    return classification.kind.label
