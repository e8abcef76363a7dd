from __future__ import annotations

import pytest

from pokertrainer.dynamic.hand_state import (
    apply_contribution,
    apply_history,
    committed_by,
    committed_total,
    fresh_stacks,
)
from pokertrainer.dynamic.scenario import ActionEvent
from pokertrainer.dynamic.seating import POSITIONS_6_MAX


def _history() -> list[ActionEvent]:
    return [
        ActionEvent(player="SB", action="posts_sb", amount=0.5),
        ActionEvent(player="BB", action="posts_bb", amount=1.0),
        ActionEvent(player="BTN", action="raise", amount=3.0),
        ActionEvent(player="SB", action="fold"),
        ActionEvent(player="BB", action="call", amount=2.0),
    ]


def test_committed_total_includes_blinds() -> None:
    assert committed_total(_history()) == pytest.approx(6.5)


def test_committed_by_position() -> None:
    history = _history()
    assert committed_by(history, "BB") == pytest.approx(3.0)
    assert committed_by(history, "SB") == pytest.approx(0.5)
    assert committed_by(history, "UTG") == 0


def test_apply_contribution_returns_copy() -> None:
    stacks = fresh_stacks(POSITIONS_6_MAX)
    updated = apply_contribution(stacks, "BTN", 3.0)
    assert updated["BTN"] == pytest.approx(97.0)
    assert stacks["BTN"] == pytest.approx(100.0)


def test_apply_contribution_caps_at_stack() -> None:
    updated = apply_contribution({"BTN": 2.0}, "BTN", 5.0)
    assert updated["BTN"] == 0


def test_apply_contribution_unknown_position() -> None:
    with pytest.raises(KeyError):
        apply_contribution({"BTN": 10.0}, "HJ", 1.0)


def test_apply_history_deducts_every_commitment() -> None:
    stacks = apply_history(fresh_stacks(POSITIONS_6_MAX), _history())
    assert stacks["BTN"] == pytest.approx(97.0)
    assert stacks["BB"] == pytest.approx(97.0)
    assert stacks["SB"] == pytest.approx(99.5)
    assert stacks["UTG"] == pytest.approx(100.0)
