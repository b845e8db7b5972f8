from __future__ import annotations

import logging
import time
from typing import List, Optional

from .cards import Deck
from .errors import NotEnoughParticipants, TableFull
from .models import Participant, TableConfig
from .round import Round, SettleHook

LOGGER = logging.getLogger("holdem.table")

# Table is the participant registry the rounds index into. It owns seating and
# hands every round a fresh deck; chips and scoring belong to the caller.


class Table:
    def __init__(self, config: Optional[TableConfig] = None) -> None:
        self.config = config or TableConfig()
        self.seats: List[Optional[Participant]] = [None] * self.config.seats
        self.round_counter = 0
        self.round: Optional[Round] = None

    # Seat management -------------------------------------------------
    def assign_seat(self, name: str) -> Participant:
        display = name.strip()
        if not display:
            raise ValueError("NAME_REQUIRED")

        existing = self.find(display)
        if existing:
            return existing

        for idx in range(self.config.seats):
            if self.seats[idx] is None:
                participant = Participant(name=display, seat=idx)
                self.seats[idx] = participant
                LOGGER.info("%s: seated %s at %d", self.config.table_id, display, idx)
                return participant

        raise TableFull("Table is full")

    def leave(self, name: str) -> None:
        participant = self.find(name)
        if participant is None:
            return
        if self.round is not None and participant.name in self.round.active_participants:
            self.round.pass_participant(participant.name)
        self.seats[participant.seat] = None

    def find(self, name: str) -> Optional[Participant]:
        key = name.strip().casefold()
        for seat in self.seats:
            if seat and seat.name.casefold() == key:
                return seat
        return None

    def seated(self) -> List[Participant]:
        return [seat for seat in self.seats if seat is not None]

    # Round lifecycle -------------------------------------------------
    def can_start_round(self) -> bool:
        return len(self.seated()) >= 2

    def start_round(self, seed: Optional[int] = None, on_finish: Optional[SettleHook] = None) -> Round:
        if not self.can_start_round():
            raise NotEnoughParticipants("Not enough participants to start a round")

        participants = self.seated()
        for participant in participants:
            participant.reset_for_round()

        if seed is None:
            seed = int(time.time() * 1000) & 0xFFFFFFFF

        round_id = f"{self.config.table_id}-R{self.round_counter:05d}"
        self.round_counter += 1
        LOGGER.debug("%s: seed %d", round_id, seed)

        self.round = Round(participants, Deck.from_seed(seed), on_finish=on_finish, round_id=round_id)
        return self.round

    def end_round(self) -> None:
        self.round = None
