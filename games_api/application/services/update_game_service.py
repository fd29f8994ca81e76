from __future__ import annotations

from games_api.application.ports.game_repository import GameRepository
from games_api.domain.entities.game import Game
from games_api.domain.errors import GameNotFoundError
from games_api.logger import get_logger

logger = get_logger(__name__)


class UpdateGameService:
    """Fully replaces a stored game; the path id is only used for lookup."""

    def __init__(self, repository: GameRepository) -> None:
        self._repository = repository

    def execute(self, game_id: int, game: Game) -> Game:
        logger.debug("update existing game: id=%s, game=%r", game_id, game)
        try:
            self._repository.replace(game_id, game)
        except GameNotFoundError:
            logger.debug("game of given id not found: %s", game_id)
            raise
        return game
