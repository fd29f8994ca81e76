from __future__ import annotations

from games_api.domain.errors import RatingOutOfRangeError

MIN_RATING = 0
MAX_RATING = 100
RATING_RANGE = f"rating must be a number between {MIN_RATING} and {MAX_RATING}"


def validate_rating(value: int) -> int:
    """Return ``value`` unchanged when it is a valid rating."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise RatingOutOfRangeError(value, RATING_RANGE)
    if not MIN_RATING <= value <= MAX_RATING:
        raise RatingOutOfRangeError(value, RATING_RANGE)
    return value
