from __future__ import annotations

from datetime import datetime
from typing import List

from games_api.domain.entities.game import Game, Genre


def example_games() -> List[Game]:
    """Mocked records the service starts with when seeding is enabled."""
    return [
        Game(
            id=1,
            title="Dark Souls",
            rating=91,
            genre=Genre.ROLE_PLAYING,
            description=(
                "Takes place in the fictional kingdom of Lordran, where players assume "
                "the role of a cursed undead character who begins a pilgrimage to "
                "discover the fate of their kind."
            ),
            release_date=datetime(2011, 9, 22),
        ),
        Game(
            id=2,
            title="Dark Souls 2",
            rating=87,
            genre=Genre.ROLE_PLAYING,
            description=None,
            release_date=datetime(2014, 3, 11),
        ),
        Game(
            id=3,
            title="Dark Souls 3",
            rating=89,
            genre=Genre.ROLE_PLAYING,
            description=(
                "The latest chapter in the series with its trademark sword and sorcery "
                "combat and rewarding action RPG gameplay."
            ),
            release_date=datetime(2016, 3, 24),
        ),
    ]
