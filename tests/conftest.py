from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from games_api.config import Settings
from games_api.domain.entities.game import Game, Genre
from games_api.infrastructure.persistence.memory_game_repository import (
    InMemoryGameRepository,
)
from games_api.main import create_app


@pytest.fixture
def mocked_games():
    return [
        Game(
            id=1,
            title="Crappy title",
            rating=35,
            genre=Genre.ROLE_PLAYING,
            description="Test description...",
            release_date=datetime(2011, 9, 22),
        ),
        Game(
            id=2,
            title="Decent game",
            rating=84,
            genre=Genre.STRATEGY,
            description=None,
            release_date=datetime(2014, 3, 11),
        ),
    ]


@pytest.fixture
def repository(mocked_games):
    return InMemoryGameRepository(mocked_games)


@pytest.fixture
def settings():
    return Settings(log_level="DEBUG", seed_example_data=False)


@pytest.fixture
def client(repository, settings):
    app = create_app(repository=repository, settings=settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def mocked_game_payload():
    """Wire form of a game that is not in the mocked store."""
    return {
        "id": 3,
        "title": "Another game",
        "rating": 65,
        "genre": "STRATEGY",
        "description": None,
        "releaseDate": "2016-03-11T00:00:00",
    }
