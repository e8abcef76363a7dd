from __future__ import annotations

import logging
import random
import threading
from collections.abc import Callable

from ...core.errors import TrainerError
from ...core.settings import TrainerSettings
from ...data.chart_loader import load_chart_set
from ...dynamic.advisor import GTOAdvisor
from ...dynamic.generator import ScenarioGenerator
from ...dynamic.scenario import FLOP, PREFLOP, RIVER, STREETS, TURN, ScenarioState
from .concurrency import run_blocking
from .schemas import ActionReviewPayload

__all__ = ["ScenarioService"]

logger = logging.getLogger(__name__)


class ScenarioService:
    """Owns one generator and one advisor for the transport layers.

    The generator's deck is mutated on every call, so generation runs under a
    lock. Advice only reads the immutable chart set and needs no locking.
    """

    def __init__(self, generator: ScenarioGenerator | None = None, advisor: GTOAdvisor | None = None) -> None:
        self._generator = generator or ScenarioGenerator()
        self._advisor = advisor or GTOAdvisor()
        self._lock = threading.Lock()
        self._builders: dict[str, Callable[[], ScenarioState]] = {
            PREFLOP: self._generator.generate_preflop,
            FLOP: self._generator.generate_flop,
            TURN: self._generator.generate_turn,
            RIVER: self._generator.generate_river,
        }

    @classmethod
    def from_settings(cls, settings: TrainerSettings) -> ScenarioService:
        rng = random.Random(settings.seed) if settings.seed is not None else None
        charts = load_chart_set(settings.charts_path)
        return cls(
            generator=ScenarioGenerator(rng=rng),
            advisor=GTOAdvisor(charts, table_profile=settings.table_profile),
        )

    @property
    def advisor(self) -> GTOAdvisor:
        return self._advisor

    def generate(self, street: str) -> ScenarioState:
        key = (street or "").strip().lower()
        if key not in STREETS:
            raise ValueError(f"Unknown street '{street}'. Options: {', '.join(STREETS)}")
        with self._lock:
            try:
                return self._builders[key]()
            except TrainerError:
                logger.exception("Error generating %s scenario", key)
                raise

    async def generate_async(self, street: str) -> ScenarioState:
        return await run_blocking(self.generate, street)

    def submit_action(
        self,
        scenario: ScenarioState,
        user_action: str,
        amount: float | None = None,
    ) -> ActionReviewPayload:
        logger.info(
            "Received user action for %s scenario: hero=%s cards=%s board=%s action=%s %s",
            scenario.scenario_type,
            scenario.hero_position,
            " ".join(scenario.hero_hole_cards),
            " ".join(scenario.community_cards) or "-",
            user_action,
            "" if amount is None else amount,
        )
        result = self._advisor.advise(scenario)
        if result.is_error:
            logger.info("No advice for %s scenario: %s", scenario.scenario_type, result.error)
        else:
            logger.info("GTO advice: %s", result.details.get("strategy"))
        return ActionReviewPayload(
            message="Action processed.",
            your_action=user_action,
            your_amount=amount,
            gto_advice=result.advice,
            gto_details=result.details,
            error=result.error,
        )

    async def submit_action_async(
        self,
        scenario: ScenarioState,
        user_action: str,
        amount: float | None = None,
    ) -> ActionReviewPayload:
        return await run_blocking(self.submit_action, scenario, user_action, amount)
