"""Request pipeline stages shared by the game routes.

Each stage is a FastAPI dependency that turns the raw request into a typed
value for the handler, or rejects the request with an ``HTTPException``.
"""
from __future__ import annotations

from typing import Mapping, Optional

from fastapi import Depends, HTTPException, Request
from pydantic import ValidationError

from games_api.api.schemas import GameSchema
from games_api.application.list_options import ListOptions
from games_api.application.ports.game_repository import GameRepository
from games_api.application.services.create_game_service import CreateGameService
from games_api.application.services.delete_game_service import DeleteGameService
from games_api.application.services.list_games_service import ListGamesService
from games_api.application.services.update_game_service import UpdateGameService
from games_api.domain.entities.game import Game
from games_api.domain.errors import RatingOutOfRangeError
from games_api.logger import get_logger

logger = get_logger(__name__)


def parse_list_options(query: Mapping[str, str]) -> ListOptions:
    """Read ``offset``/``limit``; absent or malformed values fall back to defaults."""
    offset = _unsigned(query.get("offset"))
    return ListOptions(
        offset=offset if offset is not None else 0,
        limit=_unsigned(query.get("limit")),
    )


def _unsigned(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        logger.debug("ignoring malformed pagination value: %r", raw)
        return None
    return int(raw)


def list_options(request: Request) -> ListOptions:
    return parse_list_options(request.query_params)


async def json_body(request: Request) -> Game:
    max_bytes: int = request.app.state.settings.max_body_bytes
    declared = request.headers.get("content-length")
    if declared is not None:
        try:
            length = int(declared)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail="Invalid content-length header.") from exc
        if length > max_bytes:
            logger.debug("rejecting payload: declared %s bytes, limit %s", length, max_bytes)
            raise HTTPException(status_code=413, detail="Payload too large.")

    content_type = request.headers.get("content-type")
    if content_type is not None and not _is_json(content_type):
        logger.debug("rejecting payload: content-type %r", content_type)
        raise HTTPException(status_code=415, detail="Expected a JSON body.")

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            logger.debug("rejecting payload: streamed body over %s bytes", max_bytes)
            raise HTTPException(status_code=413, detail="Payload too large.")

    return decode_game(bytes(body))


def _is_json(content_type: str) -> bool:
    """Accept ``application/json`` and ``application/*+json``, with any parameters."""
    mime = content_type.split(";", 1)[0].strip().lower()
    kind, _, subtype = mime.partition("/")
    return kind == "application" and (subtype == "json" or subtype.endswith("+json"))


def decode_game(body: bytes) -> Game:
    """Parse a JSON body into a validated ``Game`` or fail with a 400."""
    try:
        schema = GameSchema.model_validate_json(body)
    except ValidationError as exc:
        logger.debug("malformed game payload: %s", exc)
        raise HTTPException(
            status_code=400,
            detail=exc.errors(include_url=False, include_context=False, include_input=False),
        ) from exc
    try:
        return schema.to_entity()
    except RatingOutOfRangeError as exc:
        logger.debug("rejected game payload: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def get_repository(request: Request) -> GameRepository:
    return request.app.state.repository


def get_list_games_service(
    repository: GameRepository = Depends(get_repository),
) -> ListGamesService:
    return ListGamesService(repository)


def get_create_game_service(
    repository: GameRepository = Depends(get_repository),
) -> CreateGameService:
    return CreateGameService(repository)


def get_update_game_service(
    repository: GameRepository = Depends(get_repository),
) -> UpdateGameService:
    return UpdateGameService(repository)


def get_delete_game_service(
    repository: GameRepository = Depends(get_repository),
) -> DeleteGameService:
    return DeleteGameService(repository)
