from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from games_api.domain.entities.game import Game


class GameRepository(ABC):
    """Storage boundary for game records, kept in insertion order."""

    @abstractmethod
    def list(self, offset: int = 0, limit: Optional[int] = None) -> List[Game]:
        ...

    @abstractmethod
    def add(self, game: Game) -> None:
        """Append ``game``; raise ``DuplicateGameError`` if its id is taken."""

    @abstractmethod
    def replace(self, game_id: int, game: Game) -> None:
        """Swap the record stored under ``game_id``; raise ``GameNotFoundError`` if absent."""

    @abstractmethod
    def remove(self, game_id: int) -> int:
        """Drop every record with ``game_id`` and return how many went away."""

    @abstractmethod
    def count(self) -> int:
        ...
