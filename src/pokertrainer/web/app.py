from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..core.settings import TrainerSettings, load_settings
from ..features.scenario import ScenarioService, create_scenario_routers
from ..features.scenario.concurrency import shutdown_executor

__all__ = ["app", "create_app", "main"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(_app: FastAPI) -> AsyncIterator[None]:
    yield
    shutdown_executor()


def create_app(settings: TrainerSettings | None = None, service: ScenarioService | None = None) -> FastAPI:
    settings = settings or load_settings()
    service = service or ScenarioService.from_settings(settings)

    application = FastAPI(title="Poker Trainer", lifespan=_lifespan)
    application.state.service = service

    @application.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    router_v1, router_legacy = create_scenario_routers(service)
    application.include_router(router_v1)
    application.include_router(router_legacy)
    return application


app = create_app()


def main() -> None:  # pragma: no cover - runner
    import uvicorn

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Poker trainer listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":  # pragma: no cover
    main()
