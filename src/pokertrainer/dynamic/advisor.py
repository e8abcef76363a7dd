"""Street advisors mapping a scenario snapshot to recommended play.

Preflop advice comes from the raise-first-in chart; flop, turn and river advice
is heuristic text. Lookup misses (wrong street, uncharted seat, unreadable
hand) are returned as error results and never raised to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from ..core.errors import AdviceLookupError, NoChartForPositionError, StreetMismatchError
from ..core.models import AdviceResult
from ..data.chart_loader import DEFAULT_TABLE_PROFILE, ChartEntry, ChartSet, get_chart_set
from .hand_ranges import normalize_hand, resolve_chart_entry
from .scenario import (
    AGGRESSIVE_ACTIONS,
    BET,
    BLIND_POSTS,
    CALL,
    FLOP,
    FOLD,
    PREFLOP,
    RAISE,
    RIVER,
    TURN,
    ScenarioState,
)
from .seating import BB, BTN

__all__ = ["GTOAdvisor", "format_chart_advice", "hero_is_preflop_aggressor"]

logger = logging.getLogger(__name__)

_NON_RFI_ACTIONS = frozenset({RAISE, BET, CALL})

_TURN_ADVICE = (
    "Turn play builds on flop action. Re-evaluate your hand strength and perceived ranges after the turn card.\n"
    "Consider if the turn card changes the board texture significantly (e.g., completes draws, brings overcards).\n"
    "If you were aggressive on the flop and got called, decide whether to continue aggression (barrel) "
    "for value or as a bluff.\n"
    "If facing aggression, pot odds and equity become even more critical."
)

_RIVER_ADVICE = (
    "River play is often about clear value betting or bluffing, as draws are now complete (or missed).\n"
    "If you have a strong hand, bet for value. Size your bet based on what you think your opponent can call.\n"
    "If you missed your draw or have a weak hand, consider bluffing if the story makes sense "
    "and opponent might fold a better hand.\n"
    "If facing a bet, carefully consider pot odds and your opponent's likely holdings. "
    "Hero calling with bluff-catchers can be tricky."
)


def _percent(frequency: float | None) -> str:
    return f"{(frequency or 0.0) * 100:.0f}%"


def format_chart_advice(entry: ChartEntry) -> str:
    text = f"GTO recommends: {entry.action} ({_percent(entry.frequency)})"
    if entry.alternative:
        text += f" or {entry.alternative} ({_percent(entry.alt_frequency)})"
    return text


def hero_is_preflop_aggressor(scenario: ScenarioState) -> bool:
    """Whether hero made the last preflop raise.

    Two checks are combined with OR: the most recent preflop raise/bet belongs
    to hero, or the BTN-vs-BB line where the big blind's call equals hero's
    raise minus the posted blind.
    """

    hero = scenario.hero_position
    preflop = [
        event
        for event in scenario.history_for(PREFLOP)
        if event.action not in BLIND_POSTS and event.action != FOLD
    ]
    last_aggression = next((event for event in reversed(preflop) if event.action in AGGRESSIVE_ACTIONS), None)
    if last_aggression is not None and last_aggression.player == hero:
        return True

    villain = scenario.villain_info
    if hero == BTN and villain is not None and villain.position == BB:
        hero_raise = next(
            (e for e in scenario.action_history if e.player == hero and e.action == RAISE),
            None,
        )
        if hero_raise is not None and hero_raise.amount is not None:
            return any(
                e.player == villain.position and e.action == CALL and e.amount == hero_raise.amount - 1
                for e in scenario.action_history
            )
    return False


class GTOAdvisor:
    """Maps scenario snapshots to advice using an injected chart set."""

    def __init__(self, charts: ChartSet | None = None, table_profile: str = DEFAULT_TABLE_PROFILE) -> None:
        self.charts = charts if charts is not None else get_chart_set()
        self.table_profile = table_profile
        self._dispatch: Mapping[str, Callable[[ScenarioState], AdviceResult]] = {
            PREFLOP: self.preflop_advice,
            FLOP: self.flop_advice,
            TURN: self.turn_advice,
            RIVER: self.river_advice,
        }

    def advise(self, scenario: ScenarioState) -> AdviceResult:
        street = getattr(scenario, "scenario_type", None)
        handler = self._dispatch.get(street) if isinstance(street, str) else None
        if handler is None:
            return AdviceResult.failure(
                "Advice for this scenario type is not yet implemented.",
                strategy="unsupported_street",
            )
        return handler(scenario)

    # ------------------------------------------------------------------ preflop
    def preflop_advice(self, scenario: ScenarioState) -> AdviceResult:
        try:
            self._require_street(scenario, PREFLOP)
            if not self._is_rfi(scenario):
                return AdviceResult.ok(
                    "Chart not available (not a clear RFI spot).",
                    strategy="unknown_preflop_situation",
                )
            return self._chart_advice(scenario)
        except AdviceLookupError as exc:
            logger.debug("Preflop advice unavailable: %s", exc)
            return AdviceResult.failure(str(exc), strategy="lookup_miss")

    def _is_rfi(self, scenario: ScenarioState) -> bool:
        return not any(
            event.action in _NON_RFI_ACTIONS
            for event in scenario.history_for(PREFLOP)
            if event.action not in BLIND_POSTS
        )

    def _chart_advice(self, scenario: ScenarioState) -> AdviceResult:
        position = scenario.hero_position
        chart = self.charts.position_chart(self.table_profile, position)
        if chart is None:
            raise NoChartForPositionError(position)
        hand = normalize_hand(scenario.hero_hole_cards)
        resolved = resolve_chart_entry(chart, hand)
        if resolved is None:
            return AdviceResult.ok(
                f"GTO recommends: fold (hand {hand} not in RFI chart for {position})",
                action="fold",
                frequency=1.0,
                strategy="default_fold_rfi",
                hand=hand,
            )
        chart_key, entry = resolved
        return AdviceResult.ok(
            format_chart_advice(entry),
            **entry.to_dict(),
            strategy="rfi_chart",
            hand=hand,
            chart_key=chart_key,
        )

    # ------------------------------------------------------------------ postflop
    def flop_advice(self, scenario: ScenarioState) -> AdviceResult:
        try:
            self._require_street(scenario, FLOP)
        except StreetMismatchError as exc:
            return AdviceResult.failure(str(exc), strategy="lookup_miss")

        hero_is_pfr = hero_is_preflop_aggressor(scenario)
        next_to_act = scenario.next_to_act
        hero = scenario.hero_position
        villain = scenario.villain_info.position if scenario.villain_info else None

        advice = "Flop play strategy is highly contextual.\n"
        if hero_is_pfr:
            advice += "As PFR: "
            if next_to_act == hero:
                advice += (
                    "Opponent checked. Consider board texture, hand strength. "
                    "C-betting common, especially IP or on favorable boards."
                )
            elif next_to_act == villain:
                advice += (
                    "Waiting for OOP opponent. If they check, decision is on you. "
                    "If they bet (donk), proceed cautiously."
                )
        else:
            advice += "As pre-flop caller: "
            if next_to_act == hero:
                advice += (
                    "PFR checked. Consider betting for value/bluff (probe/float), especially if IP. "
                    "Or check OOP to keep pot small."
                )
            elif next_to_act == villain:
                advice += "Waiting for PFR. Face a c-bet with strong hands/draws. Fold weaker holdings."
        advice += "\nTips: Consider board texture, #opponents, SPR."
        return AdviceResult.ok(
            advice,
            strategy="general_heuristic_flop",
            hero_is_pfr=hero_is_pfr,
            next_to_act=next_to_act,
        )

    def turn_advice(self, scenario: ScenarioState) -> AdviceResult:
        return self._fixed_advice(scenario, TURN, _TURN_ADVICE)

    def river_advice(self, scenario: ScenarioState) -> AdviceResult:
        return self._fixed_advice(scenario, RIVER, _RIVER_ADVICE)

    # ------------------------------------------------------------------ helpers
    @staticmethod
    def _require_street(scenario: ScenarioState, street: str) -> None:
        actual = getattr(scenario, "scenario_type", None)
        if actual != street:
            raise StreetMismatchError(street, actual)

    def _fixed_advice(self, scenario: ScenarioState, street: str, text: str) -> AdviceResult:
        try:
            self._require_street(scenario, street)
        except StreetMismatchError as exc:
            return AdviceResult.failure(str(exc), strategy="lookup_miss")
        return AdviceResult.ok(text, strategy=f"general_heuristic_{street}")
