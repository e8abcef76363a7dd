"""Seat layout for the 6-max table the trainer models.

Preflop action always runs UTG → MP → CO → BTN → SB → BB; the blinds have
already posted when that order starts, so they never receive scripted folds
ahead of the hero.
"""

from __future__ import annotations

from dataclasses import dataclass

UTG = "UTG"
MP = "MP"
CO = "CO"
BTN = "BTN"
SB = "SB"
BB = "BB"

POSITIONS_6_MAX: tuple[str, ...] = (UTG, MP, CO, BTN, SB, BB)
ACTING_ORDER: tuple[str, ...] = POSITIONS_6_MAX
BLIND_POSITIONS: frozenset[str] = frozenset({SB, BB})


@dataclass(frozen=True)
class SeatAssignment:
    """Hero/villain seat mapping for a single scenario."""

    hero: str
    villain: str

    def __post_init__(self) -> None:
        for seat in (self.hero, self.villain):
            if seat not in POSITIONS_6_MAX:
                raise ValueError(f"Unknown position '{seat}'")
        if self.hero == self.villain:
            raise ValueError("Hero and villain must occupy different seats")


POSTFLOP_SEATS = SeatAssignment(hero=BTN, villain=BB)


def positions_before(position: str) -> tuple[str, ...]:
    """Non-blind seats that act before ``position`` preflop."""

    if position not in ACTING_ORDER:
        raise ValueError(f"Unknown position '{position}'")
    index = ACTING_ORDER.index(position)
    return tuple(seat for seat in ACTING_ORDER[:index] if seat not in BLIND_POSITIONS)
