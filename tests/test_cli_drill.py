from __future__ import annotations

import io
import random

import pytest
from rich.console import Console

from pokertrainer import cli
from pokertrainer.dynamic.generator import ScenarioGenerator
from pokertrainer.features.scenario import ScenarioService
from pokertrainer.ui.presenters import RichPresenter


def _presenter() -> tuple[RichPresenter, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, color_system=None, width=120)
    return RichPresenter(no_color=True, console=console), buffer


def test_presenter_renders_scenario_with_suit_symbols() -> None:
    presenter, buffer = _presenter()
    service = ScenarioService(generator=ScenarioGenerator(rng=random.Random(4)))
    scenario = service.generate("turn")
    presenter.show_scenario(scenario)
    out = buffer.getvalue()
    assert "TURN" in out
    assert "Table Status" in out
    assert "14.50bb" in out
    assert "posts_bb" in out
    assert any(symbol in out for symbol in "♠♥♦♣")


def test_presenter_renders_review_and_error() -> None:
    presenter, buffer = _presenter()
    service = ScenarioService(generator=ScenarioGenerator(rng=random.Random(4)))
    review = service.submit_action(service.generate("river"), "bet", 15.0)
    presenter.show_review(review)
    assert "bet 15.00bb" in buffer.getvalue()
    assert "GTO Advice" in buffer.getvalue()


def test_format_cards_plain_and_colored() -> None:
    plain, _ = _presenter()
    assert plain.format_cards(["As", "Td"]) == "A♠ T♦"
    colored = RichPresenter(console=Console(file=io.StringIO()))
    assert colored.format_cards(["Kh"]) == "[bold #c14657]K♥[/]"


def test_cli_deals_and_reviews(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--street", "flop", "--action", "bet", "--amount", "4", "--seed", "3", "--no-color"])
    assert code == 0
    out = capsys.readouterr().out
    assert "FLOP" in out
    assert "You chose: bet 4.00bb" in out


def test_cli_deal_only(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--street", "preflop", "--seed", "1", "--no-color"]) == 0
    assert "PREFLOP" in capsys.readouterr().out


def test_cli_bet_requires_amount() -> None:
    with pytest.raises(SystemExit):
        cli.main(["--action", "raise"])
