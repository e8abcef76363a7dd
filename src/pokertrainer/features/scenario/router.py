from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ...core.errors import TrainerError
from .schemas import ActionRequest, ScenarioPayload
from .service import ScenarioService

__all__ = ["create_scenario_routers"]


class _ScenarioController:
    def __init__(self, service: ScenarioService) -> None:
        self.service = service

    async def scenario(self, street: str) -> JSONResponse:
        try:
            state = await self.service.generate_async(street)
        except TrainerError as exc:
            return JSONResponse(
                {"error": "Failed to generate scenario", "details": str(exc)},
                status_code=500,
            )
        except ValueError as exc:
            raise HTTPException(404, str(exc)) from exc
        return JSONResponse(ScenarioPayload.from_state(state).to_dict())

    async def action(self, body: ActionRequest) -> JSONResponse:
        try:
            state = body.scenario.to_state()
        except ValueError as exc:
            raise HTTPException(400, f"Invalid scenario: {exc}") from exc
        review = await self.service.submit_action_async(state, body.user_action, body.amount)
        return JSONResponse(review.to_dict())


def create_scenario_routers(service: ScenarioService) -> tuple[APIRouter, APIRouter]:
    controller = _ScenarioController(service)

    router_v1 = APIRouter(prefix="/api/v1", tags=["scenario"])
    router_legacy = APIRouter(prefix="/api", tags=["scenario-legacy"])

    @router_v1.get("/scenario/{street}")
    async def get_scenario(street: str) -> JSONResponse:
        return await controller.scenario(street)

    @router_legacy.get("/scenario/{street}")
    async def get_scenario_legacy(street: str) -> JSONResponse:
        return await controller.scenario(street)

    @router_v1.post("/action")
    async def post_action(body: ActionRequest) -> JSONResponse:
        return await controller.action(body)

    @router_legacy.post("/action")
    async def post_action_legacy(body: ActionRequest) -> JSONResponse:
        return await controller.action(body)

    return router_v1, router_legacy
