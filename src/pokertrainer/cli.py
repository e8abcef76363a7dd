from __future__ import annotations

import argparse
import logging
import random
import sys

from .core.errors import TrainerError
from .core.settings import load_settings
from .data.chart_loader import load_chart_set
from .dynamic.advisor import GTOAdvisor
from .dynamic.generator import ScenarioGenerator
from .dynamic.scenario import STREETS
from .features.scenario.schemas import USER_ACTIONS
from .features.scenario.service import ScenarioService
from .ui.presenters import RichPresenter


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pokertrainer-drill", description="Deal one poker spot and review your action")
    p.add_argument("--street", choices=STREETS, default="preflop", help="Street to deal")
    p.add_argument("--action", choices=sorted(USER_ACTIONS), default=None, help="Your action (omit to only deal)")
    p.add_argument("--amount", type=float, default=None, help="Size in bb for bet or raise")
    # If omitted, the seed comes from POKERTRAINER_SEED, else the deal is random.
    p.add_argument("--seed", type=int, default=None, help="RNG seed (random if omitted)")
    p.add_argument("--no-color", action="store_true", help="Disable colored output (default is colored)")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.action in ("bet", "raise") and (args.amount is None or args.amount <= 0):
        parser.error(f"--amount must be positive for {args.action}")

    settings = load_settings()
    logging.basicConfig(level=settings.log_level_value)
    seed = args.seed if args.seed is not None else settings.seed
    service = ScenarioService(
        generator=ScenarioGenerator(rng=random.Random(seed)),
        advisor=GTOAdvisor(load_chart_set(settings.charts_path), table_profile=settings.table_profile),
    )
    presenter = RichPresenter(no_color=args.no_color)

    try:
        scenario = service.generate(args.street)
    except TrainerError as exc:
        presenter.console.print(f"[red]Failed to generate scenario[/]: {exc}")
        return 1
    presenter.show_scenario(scenario)
    if args.action is None:
        return 0

    amount = args.amount if args.action in ("bet", "raise") else None
    presenter.show_review(service.submit_action(scenario, args.action, amount))
    return 0


if __name__ == "__main__":
    sys.exit(main())
