"""Compute cosine similarity between users and between movies."""
import numpy as np
from typing import Dict, Iterable, List, Tuple
from sklearn.metrics.pairwise import cosine_similarity as _sk_cosine_similarity
import logging

from movie_recommendation_engine.models.user_rating import UserRating
from movie_recommendation_engine.repos.rating_repository import RatingSnapshot

logger = logging.getLogger(__name__)


def cosine_similarity(pairs: Iterable[Tuple[float, float]]) -> float:
    """
    Cosine similarity of two vectors given as paired components.

    Args:
        pairs: (score_a, score_b) for every shared dimension

    Returns:
        Similarity, or 0.0 when there are no pairs or either norm is zero
    """
    matrix = np.array(list(pairs), dtype=float)
    if matrix.size == 0:
        return 0.0

    vector_a = matrix[:, 0]
    vector_b = matrix[:, 1]
    if not np.any(vector_a) or not np.any(vector_b):
        return 0.0

    similarity = _sk_cosine_similarity(vector_a.reshape(1, -1), vector_b.reshape(1, -1))
    return float(np.clip(similarity[0, 0], -1.0, 1.0))


def _first_scores(ratings: Iterable[UserRating], key: str) -> Dict[int, int]:
    """Map dimension -> score, keeping the first entry when duplicates exist."""
    scores: Dict[int, int] = {}
    for rating in ratings:
        scores.setdefault(getattr(rating, key), rating.rating)
    return scores


class SimilarityComputer:
    """Pairwise user-user and item-item similarity over a rating snapshot."""

    def __init__(self, snapshot: RatingSnapshot):
        self.snapshot = snapshot

    def _paired_scores(
        self,
        ratings_a: Iterable[UserRating],
        ratings_b: Iterable[UserRating],
        key: str
    ) -> List[Tuple[int, int]]:
        scores_a = _first_scores(ratings_a, key)
        scores_b = _first_scores(ratings_b, key)
        return [
            (score, scores_b[dimension])
            for dimension, score in scores_a.items()
            if dimension in scores_b
        ]

    def compute_user_similarity(self, user_a: int, user_b: int) -> float:
        """
        Cosine similarity of two users over the movies both have rated.

        Args:
            user_a: First user ID
            user_b: Second user ID

        Returns:
            Similarity in [0, 1] for positive ratings, 0.0 with no common movies
        """
        pairs = self._paired_scores(
            self.snapshot.ratings_for_user(user_a),
            self.snapshot.ratings_for_user(user_b),
            key='movie_id'
        )
        return cosine_similarity(pairs)

    def compute_item_similarity(self, movie_a: int, movie_b: int) -> float:
        """
        Cosine similarity of two movies over the users who rated both.

        Args:
            movie_a: First movie ID
            movie_b: Second movie ID

        Returns:
            Similarity in [0, 1] for positive ratings, 0.0 with no common users
        """
        pairs = self._paired_scores(
            self.snapshot.ratings_for_movie(movie_a),
            self.snapshot.ratings_for_movie(movie_b),
            key='user_id'
        )
        return cosine_similarity(pairs)

    def get_similar_users(self, user_id: int) -> List[Tuple[int, float]]:
        """
        Every other user with strictly positive similarity to user_id.

        Returns:
            (user_id, similarity) sorted by similarity descending, ties by user ID
        """
        similar = []
        for other_id in self.snapshot.user_ids():
            if other_id == user_id:
                continue
            similarity = self.compute_user_similarity(user_id, other_id)
            if similarity > 0:
                similar.append((other_id, similarity))

        similar.sort(key=lambda pair: (-pair[1], pair[0]))
        logger.debug(f"User {user_id}: {len(similar)} similar users")
        return similar
