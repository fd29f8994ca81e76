from __future__ import annotations

from threading import Lock
from typing import Iterable, List, Optional

from games_api.application.ports.game_repository import GameRepository
from games_api.domain.entities.game import Game
from games_api.domain.errors import DuplicateGameError, GameNotFoundError


class InMemoryGameRepository(GameRepository):
    """Thread-safe in-memory storage for games.

    A single lock guards the whole sequence: reads and writes take it for the
    full traversal, so no caller ever sees a half-applied mutation.
    """

    def __init__(self, games: Optional[Iterable[Game]] = None) -> None:
        self._games: List[Game] = list(games or [])
        self._lock = Lock()

    def list(self, offset: int = 0, limit: Optional[int] = None) -> List[Game]:
        with self._lock:
            end = None if limit is None else offset + limit
            return self._games[offset:end]

    def add(self, game: Game) -> None:
        with self._lock:
            if any(stored.id == game.id for stored in self._games):
                raise DuplicateGameError(game.id)
            self._games.append(game)

    def replace(self, game_id: int, game: Game) -> None:
        with self._lock:
            for index, stored in enumerate(self._games):
                if stored.id == game_id:
                    self._games[index] = game
                    return
            raise GameNotFoundError(game_id)

    def remove(self, game_id: int) -> int:
        with self._lock:
            before = len(self._games)
            # Removes every match, not only the first one.
            self._games = [game for game in self._games if game.id != game_id]
            return before - len(self._games)

    def count(self) -> int:
        with self._lock:
            return len(self._games)
