from __future__ import annotations

from typing import List

from games_api.application.list_options import ListOptions
from games_api.application.ports.game_repository import GameRepository
from games_api.domain.entities.game import Game
from games_api.logger import get_logger

logger = get_logger(__name__)


class ListGamesService:
    def __init__(self, repository: GameRepository) -> None:
        self._repository = repository

    def execute(self, options: ListOptions) -> List[Game]:
        logger.debug("list games: offset=%s limit=%s", options.offset, options.limit)
        return self._repository.list(offset=options.offset, limit=options.limit)
