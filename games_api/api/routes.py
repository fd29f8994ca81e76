"""RESTful API for games.

- ``GET /games``: JSON list of games, ``?offset=3&limit=5`` for pagination
- ``POST /games``: create a new game entry
- ``PUT /games/{id}``: replace a specific game
- ``DELETE /games/{id}``: delete a specific game
"""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from games_api.api.filters import (
    get_create_game_service,
    get_delete_game_service,
    get_list_games_service,
    get_update_game_service,
    json_body,
    list_options,
)
from games_api.api.schemas import GameSchema
from games_api.application.list_options import ListOptions
from games_api.application.services.create_game_service import CreateGameService
from games_api.application.services.delete_game_service import DeleteGameService
from games_api.application.services.list_games_service import ListGamesService
from games_api.application.services.update_game_service import UpdateGameService
from games_api.domain.entities.game import Game
from games_api.domain.errors import (
    DuplicateGameError,
    GameNotFoundError,
    RatingOutOfRangeError,
)
from games_api.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["games"])


@router.get("/games", response_model=List[GameSchema])
async def list_games(
    options: ListOptions = Depends(list_options),
    service: ListGamesService = Depends(get_list_games_service),
) -> List[GameSchema]:
    games = service.execute(options)
    try:
        return [GameSchema.from_entity(game) for game in games]
    except RatingOutOfRangeError as exc:
        logger.error("stored game cannot be serialized: %s", exc)
        raise HTTPException(status_code=500, detail="Stored game cannot be serialized.") from exc


@router.post("/games", status_code=201)
async def create_game(
    game: Game = Depends(json_body),
    service: CreateGameService = Depends(get_create_game_service),
) -> Response:
    try:
        service.execute(game)
    except DuplicateGameError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return Response(status_code=201)


@router.put("/games/{game_id:int}")
async def update_game(
    game_id: int,
    game: Game = Depends(json_body),
    service: UpdateGameService = Depends(get_update_game_service),
) -> Response:
    try:
        service.execute(game_id, game)
    except GameNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=200)


@router.delete("/games/{game_id:int}", status_code=204)
async def delete_game(
    game_id: int,
    service: DeleteGameService = Depends(get_delete_game_service),
) -> Response:
    try:
        service.execute(game_id)
    except GameNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
