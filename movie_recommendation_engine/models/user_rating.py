"""User rating triple."""
from dataclasses import dataclass

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class UserRating:
    """A single (user, movie, score) rating with score in [1, 5]."""
    user_id: int
    movie_id: int
    rating: int

    def __post_init__(self):
        if isinstance(self.rating, bool) or not isinstance(self.rating, int):
            raise ValueError(f"Rating must be an integer, got {self.rating!r}")
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {self.rating}"
            )
