"""Scenario feature: service layer, schemas, and API router."""

from .router import create_scenario_routers
from .schemas import (
    ActionEventPayload,
    ActionRequest,
    ActionReviewPayload,
    ScenarioPayload,
    VillainInfoPayload,
)
from .service import ScenarioService

__all__ = [
    "ActionEventPayload",
    "ActionRequest",
    "ActionReviewPayload",
    "ScenarioPayload",
    "ScenarioService",
    "VillainInfoPayload",
    "create_scenario_routers",
]
