from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Genre(str, Enum):
    ROLE_PLAYING = "ROLE_PLAYING"
    STRATEGY = "STRATEGY"
    SHOOTER = "SHOOTER"


@dataclass
class Game:
    id: int
    title: str
    rating: int
    genre: Genre
    release_date: datetime
    description: Optional[str] = None
