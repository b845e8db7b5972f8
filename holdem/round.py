from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from .cards import BOARD_SIZE, FLOP_SIZE, Card, Deck, cards_to_labels
from .errors import DeckExhausted, DuplicateParticipant, ParticipantNotFound, RoundAlreadyFinished
from .evaluator import compare_hands, evaluate_best
from .models import STAGE_BY_BOARD_SIZE, HandClassification, Ordering, Participant, Stage

LOGGER = logging.getLogger("holdem")

# Round keeps the board and the set of live participants. Participants live in
# a registry owned by the caller; the round only remembers their indices.

SettleHook = Callable[["Round"], None]


def _no_settlement(round_: "Round") -> None:
    return None


class Round:
    """One deal: hole cards, flop on construction, then turn and river."""

    def __init__(
        self,
        participants: Sequence[Participant],
        deck: Deck,
        on_finish: Optional[SettleHook] = None,
        round_id: str = "R-0",
    ) -> None:
        names = [participant.name for participant in participants]
        if len(set(names)) != len(names):
            raise DuplicateParticipant("Participant names must be unique")
        if not deck.are_cards_available(len(participants)):
            raise DeckExhausted(
                f"Deck has {deck.remaining} cards, not enough for {len(participants)} participants"
            )

        self.round_id = round_id
        self.stage = Stage.DEALING
        self.community: List[Card] = []
        self._registry = participants
        self._deck = deck
        self._active: List[int] = list(range(len(participants)))
        self._on_finish = on_finish or _no_settlement

        for participant in participants:
            participant.hole_cards = deck.draw_pair()
            LOGGER.debug("%s: dealt %s to %s", round_id, "".join(cards_to_labels(participant.hole_cards)), participant.name)

        for _ in range(FLOP_SIZE):
            self.community.append(deck.draw_one())
        self.stage = Stage.FLOP
        LOGGER.info("%s: %d participants, flop %s", round_id, len(participants), " ".join(cards_to_labels(self.community)))

    # Board -----------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return len(self.community) == BOARD_SIZE

    def open_card(self) -> None:
        if self.is_finished:
            raise RoundAlreadyFinished("Can't open more cards, round finished")

        card = self._deck.draw_one()
        self.community.append(card)
        self.stage = STAGE_BY_BOARD_SIZE[len(self.community)]
        LOGGER.debug("%s: %s %s", self.round_id, self.stage.value, card.label)

        if self.is_finished:
            self._finish()

    def _finish(self) -> None:
        LOGGER.info("%s: finished with %d active participants", self.round_id, len(self._active))
        self._on_finish(self)

    # Participants ----------------------------------------------------
    @property
    def active_participants(self) -> List[str]:
        return [self._registry[idx].name for idx in self._active]

    def _find_active(self, name: str) -> int:
        for position, idx in enumerate(self._active):
            if self._registry[idx].name == name:
                return position
        raise ParticipantNotFound(f"Participant not active: {name}")

    def pass_participant(self, name: str) -> None:
        position = self._find_active(name)
        del self._active[position]
        LOGGER.debug("%s: %s passed", self.round_id, name)

    def get_combination(self, name: str) -> HandClassification:
        participant = self._registry[self._active[self._find_active(name)]]
        return evaluate_best(list(participant.hole_cards) + self.community)

    def standings(self) -> List[List[str]]:
        """Active participants grouped best hand first; exact ties share a group."""
        hands: Dict[str, HandClassification] = {
            name: self.get_combination(name) for name in self.active_participants
        }
        ordered = sorted(hands, key=lambda name: hands[name], reverse=True)
        groups: List[List[str]] = []
        for name in ordered:
            if groups and compare_hands(hands[groups[-1][0]], hands[name]) == Ordering.EQUAL:
                groups[-1].append(name)
            else:
                groups.append([name])
        return groups

    def snapshot(self) -> Dict[str, object]:
        return {
            "round_id": self.round_id,
            "stage": self.stage.value,
            "community": cards_to_labels(self.community),
            "active": self.active_participants,
        }
