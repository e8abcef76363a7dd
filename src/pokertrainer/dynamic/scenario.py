"""Scenario snapshot models shared by the generator, advisor and transports.

A ``ScenarioState`` is frozen once built. Later streets are produced as new
snapshots (see ``generator``), so a caller holding the flop snapshot keeps a
consistent view after the turn has been derived from it.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .hand_state import committed_total
from .seating import POSITIONS_6_MAX

PREFLOP = "preflop"
FLOP = "flop"
TURN = "turn"
RIVER = "river"

STREETS: tuple[str, ...] = (PREFLOP, FLOP, TURN, RIVER)
BOARD_SIZES: dict[str, int] = {PREFLOP: 0, FLOP: 3, TURN: 4, RIVER: 5}

POSTS_SB = "posts_sb"
POSTS_BB = "posts_bb"
FOLD = "fold"
CALL = "call"
CHECK = "check"
BET = "bet"
RAISE = "raise"

ACTION_TYPES: frozenset[str] = frozenset({POSTS_SB, POSTS_BB, FOLD, CALL, CHECK, BET, RAISE})
BLIND_POSTS: frozenset[str] = frozenset({POSTS_SB, POSTS_BB})
MONETARY_ACTIONS: frozenset[str] = frozenset({POSTS_SB, POSTS_BB, CALL, BET, RAISE})
AGGRESSIVE_ACTIONS: frozenset[str] = frozenset({BET, RAISE})


@dataclass(frozen=True)
class ActionEvent:
    player: str
    action: str
    amount: float | None = None
    street: str = PREFLOP

    def __post_init__(self) -> None:
        if self.action not in ACTION_TYPES:
            raise ValueError(f"Unknown action '{self.action}'")
        if self.street not in STREETS:
            raise ValueError(f"Unknown street '{self.street}'")
        if self.action in MONETARY_ACTIONS:
            if self.amount is None or self.amount <= 0:
                raise ValueError(f"Action '{self.action}' requires a positive amount")
        elif self.amount is not None:
            raise ValueError(f"Action '{self.action}' does not carry an amount")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.street != PREFLOP:
            data["street"] = self.street
        data["player"] = self.player
        data["action"] = self.action
        if self.amount is not None:
            data["amount"] = self.amount
        return data


@dataclass(frozen=True)
class VillainInfo:
    position: str
    hole_cards: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "hole_cards", tuple(self.hole_cards))

    def to_dict(self) -> dict[str, Any]:
        return {"position": self.position, "hole_cards": list(self.hole_cards)}


@dataclass(frozen=True)
class ScenarioState:
    scenario_type: str
    num_players: int
    hero_position: str
    hero_hole_cards: tuple[str, ...]
    stacks: Mapping[str, float]
    community_cards: tuple[str, ...]
    pot: float
    action_history: tuple[ActionEvent, ...]
    next_to_act: str
    villain_info: VillainInfo | None = field(default=None)

    def __post_init__(self) -> None:
        # Freeze the containers so snapshots never share mutable state.
        object.__setattr__(self, "hero_hole_cards", tuple(self.hero_hole_cards))
        object.__setattr__(self, "community_cards", tuple(self.community_cards))
        object.__setattr__(self, "action_history", tuple(self.action_history))
        object.__setattr__(self, "stacks", MappingProxyType({k: float(v) for k, v in self.stacks.items()}))

        if self.scenario_type not in BOARD_SIZES:
            raise ValueError(f"Unknown scenario type '{self.scenario_type}'")
        if len(self.hero_hole_cards) != 2:
            raise ValueError("Hero must hold exactly two hole cards")
        expected_board = BOARD_SIZES[self.scenario_type]
        if len(self.community_cards) != expected_board:
            raise ValueError(
                f"A {self.scenario_type} scenario needs {expected_board} community cards, "
                f"got {len(self.community_cards)}"
            )
        if set(self.stacks) != set(POSITIONS_6_MAX):
            raise ValueError("Stacks must cover exactly the six table positions")
        if self.hero_position not in POSITIONS_6_MAX:
            raise ValueError(f"Unknown hero position '{self.hero_position}'")
        committed = committed_total(self.action_history)
        if not math.isclose(self.pot, committed, abs_tol=1e-9):
            raise ValueError(f"Pot {self.pot} does not match committed amounts {committed}")

    def history_for(self, street: str) -> tuple[ActionEvent, ...]:
        return tuple(event for event in self.action_history if event.street == street)

    def used_cards(self) -> tuple[str, ...]:
        """Every card visible in the snapshot (hero, villain and board)."""

        villain = self.villain_info.hole_cards if self.villain_info else ()
        return (*self.hero_hole_cards, *villain, *self.community_cards)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "scenario_type": self.scenario_type,
            "num_players": self.num_players,
            "hero_position": self.hero_position,
            "hero_hole_cards": list(self.hero_hole_cards),
            "stacks": dict(self.stacks),
            "community_cards": list(self.community_cards),
            "pot": self.pot,
            "action_history": [event.to_dict() for event in self.action_history],
            "next_to_act": self.next_to_act,
        }
        if self.villain_info is not None:
            data["villain_info"] = self.villain_info.to_dict()
        return data
