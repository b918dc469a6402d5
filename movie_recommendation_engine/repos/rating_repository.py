"""Rating snapshots and the store that publishes them."""
from typing import Dict, Iterable, List, Optional, Set, Tuple
import logging

from movie_recommendation_engine.models.user_rating import UserRating

logger = logging.getLogger(__name__)


class RatingSnapshot:
    """
    Immutable point-in-time view of the rating set.

    Duplicate (user, movie) entries are kept as given. Per-user and per-movie
    indexes preserve input order and are built once.
    """

    def __init__(self, ratings: Iterable[UserRating] = ()):
        self._ratings: Tuple[UserRating, ...] = tuple(ratings)
        by_user: Dict[int, List[UserRating]] = {}
        by_movie: Dict[int, List[UserRating]] = {}

        for rating in self._ratings:
            by_user.setdefault(rating.user_id, []).append(rating)
            by_movie.setdefault(rating.movie_id, []).append(rating)

        self._by_user = {k: tuple(v) for k, v in by_user.items()}
        self._by_movie = {k: tuple(v) for k, v in by_movie.items()}

    def __iter__(self):
        return iter(self._ratings)

    def __len__(self) -> int:
        return len(self._ratings)

    @property
    def ratings(self) -> Tuple[UserRating, ...]:
        return self._ratings

    def ratings_for_user(self, user_id: int) -> Tuple[UserRating, ...]:
        """All ratings by a user, in input order."""
        return self._by_user.get(user_id, ())

    def ratings_for_movie(self, movie_id: int) -> Tuple[UserRating, ...]:
        """All ratings a movie received, in input order."""
        return self._by_movie.get(movie_id, ())

    def user_ids(self) -> List[int]:
        """Every user with at least one rating, in order of first appearance."""
        return list(self._by_user.keys())

    def rated_movie_ids(self, user_id: int) -> Set[int]:
        """IDs of every movie the user has rated, at any score."""
        return {r.movie_id for r in self.ratings_for_user(user_id)}

    def liked(self, user_id: int, threshold: int) -> Tuple[UserRating, ...]:
        """Ratings by the user at or above the threshold."""
        return tuple(r for r in self.ratings_for_user(user_id) if r.rating >= threshold)


class RatingRepository:
    """
    Single-writer rating store.

    Every write publishes a fresh RatingSnapshot; published snapshots are never
    modified, so readers holding one keep a consistent view.
    """

    def __init__(self, ratings: Iterable[UserRating] = ()):
        self._snapshot = RatingSnapshot(ratings)

    def snapshot(self) -> RatingSnapshot:
        """Get the most recently published snapshot."""
        return self._snapshot

    def record_rating(self, user_id: int, movie_id: int, rating: int) -> RatingSnapshot:
        """
        Record a rating, updating the existing (user, movie) entry or appending a new one.

        Args:
            user_id: Rating user
            movie_id: Rated movie
            rating: Score in [1, 5]

        Returns:
            The newly published snapshot
        """
        new_rating = UserRating(user_id=user_id, movie_id=movie_id, rating=rating)
        current = self._snapshot.ratings
        updated: List[UserRating] = []
        replaced = False

        for existing in current:
            if existing.user_id == user_id and existing.movie_id == movie_id:
                updated.append(new_rating)
                replaced = True
            else:
                updated.append(existing)

        if not replaced:
            updated.append(new_rating)

        self._snapshot = RatingSnapshot(updated)
        logger.debug(
            f"{'Updated' if replaced else 'Added'} rating user={user_id} movie={movie_id} rating={rating}"
        )
        return self._snapshot

    def remove_rating(self, user_id: int, movie_id: int) -> RatingSnapshot:
        """Remove every rating the user gave the movie and publish a new snapshot."""
        remaining = [
            r for r in self._snapshot.ratings
            if not (r.user_id == user_id and r.movie_id == movie_id)
        ]
        if len(remaining) != len(self._snapshot):
            self._snapshot = RatingSnapshot(remaining)
        return self._snapshot

    def get_user_ratings(self, user_id: int) -> Dict[int, int]:
        """Map of movie ID to rating for a user (later duplicates win)."""
        return {r.movie_id: r.rating for r in self._snapshot.ratings_for_user(user_id)}

    def get_rating(self, user_id: int, movie_id: int) -> Optional[int]:
        return self.get_user_ratings(user_id).get(movie_id)
