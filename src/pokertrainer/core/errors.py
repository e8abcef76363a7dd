"""Exception hierarchy shared by the card model, generator and advisor.

Construction errors subclass ``ValueError`` and deck exhaustion subclasses
``RuntimeError`` so callers that only know the builtin types still catch them.
Lookup misses are raised inside the advisor and converted into error results
before they reach a caller.
"""

from __future__ import annotations

__all__ = [
    "AdviceLookupError",
    "DeckExhaustedError",
    "EmptyDeckError",
    "InsufficientCardsError",
    "InvalidCardError",
    "NoChartForPositionError",
    "StreetMismatchError",
    "TrainerError",
    "UnparseableHandError",
    "UnsupportedTableSizeError",
]


class TrainerError(Exception):
    """Base class for every error raised by the trainer core."""


class InvalidCardError(TrainerError, ValueError):
    """Suit or rank outside the fixed card domains."""


class UnsupportedTableSizeError(TrainerError, ValueError):
    """The generator only models 6-max tables."""


class DeckExhaustedError(TrainerError, RuntimeError):
    """The deck cannot satisfy a deal request."""


class EmptyDeckError(DeckExhaustedError):
    pass


class InsufficientCardsError(DeckExhaustedError):
    pass


class AdviceLookupError(TrainerError):
    """A scenario could not be mapped to advice."""


class NoChartForPositionError(AdviceLookupError):
    def __init__(self, position: str) -> None:
        super().__init__(f"No RFI chart for position: {position}")
        self.position = position


class UnparseableHandError(AdviceLookupError):
    pass


class StreetMismatchError(AdviceLookupError):
    def __init__(self, expected: str, actual: object) -> None:
        super().__init__(f"Invalid scenario or not a {expected} scenario.")
        self.expected = expected
        self.actual = actual
