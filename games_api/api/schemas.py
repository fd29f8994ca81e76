from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from games_api.domain.entities.game import Game, Genre
from games_api.domain.validators import validate_rating

MAX_GAME_ID = 2**64 - 1


class GameSchema(BaseModel):
    """Wire representation of a game.

    The rating range is not a schema constraint: ``to_entity`` and
    ``from_entity`` run ``validate_rating`` explicitly on the way in and out.
    """

    id: int = Field(..., ge=0, le=MAX_GAME_ID, strict=True)
    title: str = Field(..., strict=True)
    rating: int = Field(..., strict=True)
    genre: Genre
    description: Optional[str] = None
    release_date: datetime = Field(..., alias="releaseDate", strict=True)

    class Config:
        populate_by_name = True

    @field_validator("release_date")
    @classmethod
    def _require_naive(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            raise ValueError("releaseDate must not carry a timezone")
        return value

    @field_serializer("release_date", when_used="json")
    def _format_release_date(self, value: datetime) -> str:
        return value.isoformat()

    def to_entity(self) -> Game:
        return Game(
            id=self.id,
            title=self.title,
            rating=validate_rating(self.rating),
            genre=self.genre,
            description=self.description,
            release_date=self.release_date,
        )

    @classmethod
    def from_entity(cls, game: Game) -> "GameSchema":
        return cls(
            id=game.id,
            title=game.title,
            rating=validate_rating(game.rating),
            genre=game.genre,
            description=game.description,
            release_date=game.release_date,
        )
