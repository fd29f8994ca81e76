from __future__ import annotations

from games_api.application.ports.game_repository import GameRepository
from games_api.domain.errors import GameNotFoundError
from games_api.logger import get_logger

logger = get_logger(__name__)


class DeleteGameService:
    def __init__(self, repository: GameRepository) -> None:
        self._repository = repository

    def execute(self, game_id: int) -> None:
        logger.debug("delete game: id=%s", game_id)
        removed = self._repository.remove(game_id)
        if not removed:
            logger.debug("game of given id not found: %s", game_id)
            raise GameNotFoundError(game_id)
