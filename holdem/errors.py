from __future__ import annotations

# Every error the rules core raises. Each one also subclasses the builtin a
# caller would naturally catch, so `except ValueError` keeps working.


class HoldemError(Exception):
    """Base class for recoverable rules-core errors."""


class InvalidRank(HoldemError, ValueError):
    pass


class InvalidSuit(HoldemError, ValueError):
    pass


class InvalidCardLabel(HoldemError, ValueError):
    pass


class DeckExhausted(HoldemError, ValueError):
    pass


class RoundAlreadyFinished(HoldemError, RuntimeError):
    pass


class ParticipantNotFound(HoldemError, LookupError):
    pass


class DuplicateParticipant(HoldemError, ValueError):
    pass


class InvalidHandSize(HoldemError, ValueError):
    """Classifier was handed fewer than 5 or more than 7 cards."""


class DuplicateCard(HoldemError, ValueError):
    """Classifier input repeats a card; the caller's bookkeeping is broken."""


class TableFull(HoldemError, RuntimeError):
    pass


class NotEnoughParticipants(HoldemError, RuntimeError):
    pass
