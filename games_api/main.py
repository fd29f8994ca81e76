from __future__ import annotations

import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from games_api.api.routes import router as games_router
from games_api.application.ports.game_repository import GameRepository
from games_api.config import Settings
from games_api.infrastructure.persistence.example_data import example_games
from games_api.infrastructure.persistence.memory_game_repository import (
    InMemoryGameRepository,
)
from games_api.logger import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(
    repository: Optional[GameRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the API around a store, seeding one from example data when none is given."""
    resolved_settings = settings or Settings.from_env()
    configure_logging(resolved_settings.log_level)

    if repository is None:
        seed = example_games() if resolved_settings.seed_example_data else []
        repository = InMemoryGameRepository(seed)

    app = FastAPI(title="Games API")
    app.state.settings = resolved_settings
    app.state.repository = repository

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("rejecting request %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.include_router(games_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "games_api.main:app",
        host=app.state.settings.host,
        port=app.state.settings.port,
        reload=False,
    )
