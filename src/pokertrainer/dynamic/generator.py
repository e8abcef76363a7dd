"""Scenario generation for the four betting streets.

Preflop spots are raise-first-in decisions at a random seat. Postflop spots
follow one scripted line: the BTN opens, the BB defends, and on each later
street the BB checks, the BTN bets and the BB calls. The turn and river are
built by extending an earlier snapshot with ``extend_to_turn`` and
``extend_to_river``; the earlier snapshot is never modified.

A generator owns a single deck, so one instance must not serve two requests at
the same time. ``features.scenario.service`` provides the lock for that.
"""

from __future__ import annotations

import random
from dataclasses import replace

from ..core.errors import StreetMismatchError, UnsupportedTableSizeError
from .cards import Deck, card_strings, parse_card
from .hand_state import DEFAULT_STACK_SIZE, apply_history, committed_total, fresh_stacks
from .scenario import (
    BET,
    CALL,
    CHECK,
    FLOP,
    FOLD,
    POSTS_BB,
    POSTS_SB,
    PREFLOP,
    RAISE,
    RIVER,
    TURN,
    ActionEvent,
    ScenarioState,
    VillainInfo,
)
from .seating import BB, CO, MP, POSITIONS_6_MAX, POSTFLOP_SEATS, SB, UTG, SeatAssignment, positions_before

__all__ = [
    "FLOP_CBET_SIZE",
    "PREFLOP_RAISE_SIZE",
    "SMALL_BLIND",
    "BIG_BLIND",
    "TURN_BARREL_SIZE",
    "ScenarioGenerator",
    "SUPPORTED_TABLE_SIZE",
]

SUPPORTED_TABLE_SIZE = 6
SMALL_BLIND = 0.5
BIG_BLIND = 1.0
PREFLOP_RAISE_SIZE = 3.0
FLOP_CBET_SIZE = 4.0
TURN_BARREL_SIZE = 8.0
_HEADS_UP = 2


def _blind_posts() -> list[ActionEvent]:
    return [
        ActionEvent(player=SB, action=POSTS_SB, amount=SMALL_BLIND),
        ActionEvent(player=BB, action=POSTS_BB, amount=BIG_BLIND),
    ]


def _bet_and_call_line(street: str, seats: SeatAssignment, size: float) -> list[ActionEvent]:
    return [
        ActionEvent(street=street, player=seats.villain, action=CHECK),
        ActionEvent(street=street, player=seats.hero, action=BET, amount=size),
        ActionEvent(street=street, player=seats.villain, action=CALL, amount=size),
    ]


class ScenarioGenerator:
    """Builds street snapshots from a privately owned deck."""

    def __init__(
        self,
        num_players: int = SUPPORTED_TABLE_SIZE,
        rng: random.Random | None = None,
        stack_size: float = DEFAULT_STACK_SIZE,
    ) -> None:
        if num_players != SUPPORTED_TABLE_SIZE:
            raise UnsupportedTableSizeError(
                f"Currently only supports {SUPPORTED_TABLE_SIZE}-max scenarios (got {num_players})."
            )
        self.num_players = num_players
        self.positions = POSITIONS_6_MAX
        self._rng = rng or random.Random()
        self._stack_size = stack_size
        self.deck = Deck(self._rng)

    # ------------------------------------------------------------------
    # Public operations

    def generate_preflop(self) -> ScenarioState:
        self._fresh_deck()
        hero = self._rng.choice(self.positions)
        hero_cards = card_strings(self.deck.deal(2))

        history = _blind_posts()
        history.extend(ActionEvent(player=seat, action=FOLD) for seat in positions_before(hero))

        return ScenarioState(
            scenario_type=PREFLOP,
            num_players=self.num_players,
            hero_position=hero,
            hero_hole_cards=hero_cards,
            stacks=self._stacks_after(history),
            community_cards=(),
            pot=committed_total(history),
            action_history=history,
            next_to_act=hero,
        )

    def generate_flop(self) -> ScenarioState:
        seats = POSTFLOP_SEATS
        self._fresh_deck()
        hero_cards = card_strings(self.deck.deal(2))
        villain_cards = card_strings(self.deck.deal(2))

        history = _blind_posts()
        history.extend(
            [
                ActionEvent(player=UTG, action=FOLD),
                ActionEvent(player=MP, action=FOLD),
                ActionEvent(player=CO, action=FOLD),
                ActionEvent(player=seats.hero, action=RAISE, amount=PREFLOP_RAISE_SIZE),
                ActionEvent(player=SB, action=FOLD),
                # The big blind is already in, so the call tops up the difference.
                ActionEvent(player=seats.villain, action=CALL, amount=PREFLOP_RAISE_SIZE - BIG_BLIND),
            ]
        )

        self.deck.deal_one()  # burn
        flop = card_strings(self.deck.deal(3))

        return ScenarioState(
            scenario_type=FLOP,
            num_players=_HEADS_UP,
            hero_position=seats.hero,
            hero_hole_cards=hero_cards,
            villain_info=VillainInfo(position=seats.villain, hole_cards=villain_cards),
            stacks=self._stacks_after(history),
            community_cards=flop,
            pot=committed_total(history),
            action_history=history,
            next_to_act=seats.villain,
        )

    def generate_turn(self) -> ScenarioState:
        return self.extend_to_turn(self.generate_flop())

    def generate_river(self) -> ScenarioState:
        return self.extend_to_river(self.generate_turn())

    def extend_to_turn(self, flop_state: ScenarioState) -> ScenarioState:
        """Play the scripted flop line on ``flop_state`` and deal the turn."""

        return self._extend(flop_state, expected=FLOP, street=TURN, size=FLOP_CBET_SIZE)

    def extend_to_river(self, turn_state: ScenarioState) -> ScenarioState:
        """Play the scripted turn line on ``turn_state`` and deal the river."""

        return self._extend(turn_state, expected=TURN, street=RIVER, size=TURN_BARREL_SIZE)

    # ------------------------------------------------------------------
    # Helpers

    def _fresh_deck(self) -> None:
        self.deck.reset()
        self.deck.shuffle()

    def _stacks_after(self, history: list[ActionEvent]) -> dict[str, float]:
        return apply_history(fresh_stacks(self.positions, self._stack_size), history)

    def _extend(self, prior: ScenarioState, *, expected: str, street: str, size: float) -> ScenarioState:
        if prior.scenario_type != expected:
            raise StreetMismatchError(expected, prior.scenario_type)
        if prior.villain_info is None:
            raise ValueError(f"A {expected} snapshot without a villain cannot be extended")
        seats = SeatAssignment(hero=prior.hero_position, villain=prior.villain_info.position)

        # The line played on the prior street: villain checks, hero bets, villain calls.
        line = _bet_and_call_line(expected, seats, size)
        history = (*prior.action_history, *line)

        self._fresh_deck()
        self.deck.remove(parse_card(card) for card in prior.used_cards())
        self.deck.deal_one()  # burn
        next_card = str(self.deck.deal_one())

        return replace(
            prior,
            scenario_type=street,
            stacks=apply_history(prior.stacks, line),
            community_cards=(*prior.community_cards, next_card),
            pot=prior.pot + committed_total(line),
            action_history=history,
            next_to_act=seats.villain,
        )
