from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..dynamic.cards import SUIT_SYMBOLS
from ..dynamic.scenario import ScenarioState
from ..features.scenario.schemas import ActionReviewPayload

__all__ = ["RichPresenter"]

# Four-color deck palette readable on light and dark terminals.
_SUIT_COLORS = {
    "s": "bold white",
    "h": "bold #c14657",
    "d": "bold #2f73d2",
    "c": "bold #2f8a5e",
}


class RichPresenter:
    def __init__(self, *, no_color: bool = False, console: Console | None = None):
        if console is not None:
            self.console = console
        elif no_color:
            self.console = Console(force_terminal=False, color_system=None)
        else:
            self.console = Console(force_terminal=True, color_system="auto")
        self.no_color = no_color

    def show_scenario(self, scenario: ScenarioState) -> None:
        self.console.rule(scenario.scenario_type.upper())

        info = Table.grid(padding=(0, 1))
        info.add_column(style="bold cyan", justify="right")
        info.add_column(justify="left")
        info.add_row("Position", scenario.hero_position)
        info.add_row("Your hand", self.format_cards(scenario.hero_hole_cards))
        if scenario.community_cards:
            info.add_row("Board", self.format_cards(scenario.community_cards))
        info.add_row("Pot", f"{scenario.pot:.2f}bb")
        info.add_row("Your stack", f"{scenario.stacks[scenario.hero_position]:.2f}bb")
        if scenario.villain_info is not None:
            info.add_row("Villain", scenario.villain_info.position)
        info.add_row("To act", scenario.next_to_act)
        self.console.print(Panel(info, title="Table Status", border_style="magenta", expand=False))

        history = Table(show_header=True, header_style="bold blue", box=box.SIMPLE_HEAVY)
        history.add_column("Street")
        history.add_column("Player", style="bold")
        history.add_column("Action")
        history.add_column("Amount", justify="right")
        for event in scenario.action_history:
            amount = "" if event.amount is None else f"{event.amount:.2f}"
            history.add_row(event.street, event.player, event.action, amount)
        self.console.print(history)

    def show_review(self, review: ActionReviewPayload) -> None:
        amount = f" {review.your_amount:.2f}bb" if review.your_amount is not None else ""
        self.console.print(f"You chose: [bold]{review.your_action}{amount}[/]")
        if review.error:
            self.console.print(Panel(review.error, title="No advice", border_style="yellow"))
            return
        strategy = review.gto_details.get("strategy", "")
        self.console.print(
            Panel(review.gto_advice or "", title="GTO Advice", subtitle=str(strategy), border_style="green")
        )

    def format_cards(self, cards: Iterable[str]) -> str:
        parts: list[str] = []
        for card in cards:
            rank, suit = card[:-1], card[-1:]
            text = f"{rank}{SUIT_SYMBOLS.get(suit, suit)}"
            if self.no_color:
                parts.append(text)
            else:
                parts.append(f"[{_SUIT_COLORS.get(suit, 'bold')}]{text}[/]")
        return " ".join(parts)
