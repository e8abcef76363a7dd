from __future__ import annotations

from dataclasses import replace
from types import SimpleNamespace

import pytest

from pokertrainer.data.chart_loader import ChartEntry, ChartSet
from pokertrainer.dynamic.advisor import GTOAdvisor, format_chart_advice, hero_is_preflop_aggressor
from pokertrainer.dynamic.generator import ScenarioGenerator
from pokertrainer.dynamic.scenario import ActionEvent, ScenarioState, VillainInfo
from pokertrainer.dynamic.seating import POSITIONS_6_MAX, positions_before


def _preflop(position: str, cards: tuple[str, str], *, extra: tuple[ActionEvent, ...] = ()) -> ScenarioState:
    history = [
        ActionEvent(player="SB", action="posts_sb", amount=0.5),
        ActionEvent(player="BB", action="posts_bb", amount=1.0),
        *extra,
    ]
    acted = {event.player for event in extra}
    history.extend(ActionEvent(player=p, action="fold") for p in positions_before(position) if p not in acted)
    return ScenarioState(
        scenario_type="preflop",
        num_players=6,
        hero_position=position,
        hero_hole_cards=cards,
        stacks={p: 100.0 for p in POSITIONS_6_MAX},
        community_cards=(),
        pot=sum(e.amount or 0.0 for e in history),
        action_history=history,
        next_to_act=position,
    )


def test_btn_aces_raise_always(advisor: GTOAdvisor) -> None:
    result = advisor.advise(_preflop("BTN", ("As", "Ah")))
    assert not result.is_error
    assert result.advice == "GTO recommends: raise (100%)"
    assert result.details["action"] == "raise"
    assert result.details["frequency"] == 1.0
    assert result.details["strategy"] == "rfi_chart"
    assert result.details["hand"] == "AA"
    assert result.details["chart_key"] == "AA"


def test_mixed_entry_reports_alternative(advisor: GTOAdvisor) -> None:
    result = advisor.advise(_preflop("BTN", ("Kc", "9d")))
    assert result.advice == "GTO recommends: raise (70%) or fold (30%)"
    assert result.details["alternative"] == "fold"
    assert result.details["alt_frequency"] == pytest.approx(0.3)


def test_generic_row_lookup(advisor: GTOAdvisor) -> None:
    result = advisor.advise(_preflop("BTN", ("2h", "Ah")))
    assert result.details["hand"] == "A2s"
    assert result.details["chart_key"] == "Axs"
    qj = advisor.advise(_preflop("BTN", ("Qd", "Jd")))
    assert qj.details["chart_key"] == "Q9s+"


def test_hand_missing_from_chart_defaults_to_fold(advisor: GTOAdvisor) -> None:
    result = advisor.advise(_preflop("UTG", ("7c", "2d")))
    assert result.advice == "GTO recommends: fold (hand 72o not in RFI chart for UTG)"
    assert result.details == {"action": "fold", "frequency": 1.0, "strategy": "default_fold_rfi", "hand": "72o"}
    assert advisor.advise(_preflop("UTG", ("Ac", "3c"))).details["strategy"] == "default_fold_rfi"


def test_open_raise_ahead_makes_spot_non_rfi(advisor: GTOAdvisor) -> None:
    spot = _preflop("CO", ("As", "Ah"), extra=(ActionEvent(player="UTG", action="raise", amount=3.0),))
    result = advisor.advise(spot)
    assert not result.is_error
    assert result.advice == "Chart not available (not a clear RFI spot)."
    assert result.details == {"strategy": "unknown_preflop_situation"}


def test_big_blind_has_no_rfi_chart(advisor: GTOAdvisor) -> None:
    result = advisor.advise(_preflop("BB", ("As", "Ah")))
    assert result.is_error
    assert result.error == "No RFI chart for position: BB"
    assert result.details["strategy"] == "lookup_miss"


def test_unparseable_hand_is_error_result(advisor: GTOAdvisor) -> None:
    result = advisor.advise(_preflop("BTN", ("Xs", "Kd")))
    assert result.is_error
    assert "Invalid card rank" in result.error


def test_empty_chart_set_gives_error_for_every_seat() -> None:
    advisor = GTOAdvisor(ChartSet.empty())
    assert advisor.advise(_preflop("BTN", ("As", "Ah"))).is_error


def test_custom_profile_is_used() -> None:
    charts = ChartSet({"HU": {"BTN": {"72o": ChartEntry("raise", 1.0)}}})
    advisor = GTOAdvisor(charts, table_profile="HU")
    assert advisor.advise(_preflop("BTN", ("7c", "2d"))).details["chart_key"] == "72o"


def test_street_mismatch_is_error_result(advisor: GTOAdvisor, generator: ScenarioGenerator) -> None:
    flop = generator.generate_flop()
    result = advisor.preflop_advice(flop)
    assert result.is_error
    assert result.error == "Invalid scenario or not a preflop scenario."
    assert advisor.turn_advice(flop).error == "Invalid scenario or not a turn scenario."
    assert advisor.flop_advice(_preflop("BTN", ("As", "Ah"))).is_error


def test_unknown_street_not_implemented(advisor: GTOAdvisor) -> None:
    result = advisor.advise(SimpleNamespace(scenario_type="showdown"))  # type: ignore[arg-type]
    assert result.error == "Advice for this scenario type is not yet implemented."


def test_flop_advice_for_preflop_raiser(advisor: GTOAdvisor, generator: ScenarioGenerator) -> None:
    flop = generator.generate_flop()
    assert hero_is_preflop_aggressor(flop)

    waiting = advisor.advise(flop)
    assert waiting.details == {"strategy": "general_heuristic_flop", "hero_is_pfr": True, "next_to_act": "BB"}
    assert "As PFR: Waiting for OOP opponent" in waiting.advice

    checked_to = advisor.advise(replace(flop, next_to_act="BTN"))
    assert "As PFR: Opponent checked" in checked_to.advice
    assert checked_to.advice.endswith("Tips: Consider board texture, #opponents, SPR.")


def test_flop_advice_for_preflop_caller(advisor: GTOAdvisor, generator: ScenarioGenerator) -> None:
    flop = generator.generate_flop()
    assert flop.villain_info is not None
    as_caller = replace(
        flop,
        hero_position="BB",
        hero_hole_cards=flop.villain_info.hole_cards,
        villain_info=VillainInfo(position="BTN", hole_cards=flop.hero_hole_cards),
    )
    assert not hero_is_preflop_aggressor(as_caller)

    to_act = advisor.advise(as_caller)
    assert "As pre-flop caller: PFR checked." in to_act.advice
    waiting = advisor.advise(replace(as_caller, next_to_act="BTN"))
    assert "Waiting for PFR." in waiting.advice
    assert waiting.details["hero_is_pfr"] is False


def test_turn_and_river_heuristics(advisor: GTOAdvisor, generator: ScenarioGenerator) -> None:
    turn = advisor.advise(generator.generate_turn())
    assert turn.advice.startswith("Turn play builds on flop action.")
    assert turn.details == {"strategy": "general_heuristic_turn"}
    river = advisor.advise(generator.generate_river())
    assert river.advice.startswith("River play is often about clear value betting or bluffing")
    assert river.details == {"strategy": "general_heuristic_river"}


def test_format_chart_advice() -> None:
    assert format_chart_advice(ChartEntry("raise", 0.8, "call", 0.2)) == "GTO recommends: raise (80%) or call (20%)"
