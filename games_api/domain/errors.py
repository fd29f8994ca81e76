from __future__ import annotations


class GameError(Exception):
    """Base class for game-related domain errors."""


class GameNotFoundError(GameError):
    """Raised when the requested game does not exist."""

    def __init__(self, game_id: int) -> None:
        super().__init__(f"Game {game_id} not found.")
        self.game_id = game_id


class DuplicateGameError(GameError):
    """Raised when a game with the same id is already stored."""

    def __init__(self, game_id: int) -> None:
        super().__init__(f"Game {game_id} already exists.")
        self.game_id = game_id


class RatingOutOfRangeError(GameError):
    """Raised when a rating falls outside the accepted range."""

    def __init__(self, value: object, expected: str) -> None:
        super().__init__(f"{expected}, got {value!r}")
        self.value = value
        self.expected = expected
