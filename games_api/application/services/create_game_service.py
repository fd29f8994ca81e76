from __future__ import annotations

from games_api.application.ports.game_repository import GameRepository
from games_api.domain.entities.game import Game
from games_api.domain.errors import DuplicateGameError
from games_api.logger import get_logger

logger = get_logger(__name__)


class CreateGameService:
    def __init__(self, repository: GameRepository) -> None:
        self._repository = repository

    def execute(self, game: Game) -> Game:
        logger.debug("create new game: %r", game)
        try:
            self._repository.add(game)
        except DuplicateGameError:
            logger.debug("game of given id already exists: %s", game.id)
            raise
        return game
