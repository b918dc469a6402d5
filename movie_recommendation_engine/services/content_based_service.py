"""Genre-affinity content-based recommendations."""
from typing import Dict, List
import logging

from movie_recommendation_engine.models.movie import Movie
from movie_recommendation_engine.models.recommendation import RecommendationResult
from movie_recommendation_engine.services.base_service import BaseRecommendationService

logger = logging.getLogger(__name__)


def content_reason(movie: Movie) -> str:
    return f"Because you enjoy {', '.join(movie.genres)} movies"


class ContentBasedRecommendationService(BaseRecommendationService):
    """
    Recommend movies whose genres match what the user rated highly.

    Genre affinity is the sum of the user's liked ratings per genre tag; a
    candidate's score is the mean affinity over its tags.
    """

    def get_genre_affinity(self, user_id: int) -> Dict[str, float]:
        """
        Sum of liked ratings per genre.

        A tag repeated on one movie counts once per occurrence. Liked ratings
        for movies not in the catalog are ignored.
        """
        affinity: Dict[str, float] = {}
        for rating in self.snapshot.liked(user_id, self.liked_threshold):
            movie = self.catalog.get_movie(rating.movie_id)
            if movie is None:
                continue
            for genre in movie.genres:
                affinity[genre] = affinity.get(genre, 0.0) + rating.rating
        return affinity

    def score_movie(self, movie: Movie, affinity: Dict[str, float]) -> float:
        if not movie.genres:
            return 0.0
        total = sum(affinity.get(genre, 0.0) for genre in movie.genres)
        return total / len(movie.genres)

    def recommend(self, user_id: int, limit: int = 10) -> List[RecommendationResult]:
        """
        Rank unrated catalog movies by mean genre affinity.

        Args:
            user_id: Target user
            limit: Maximum number of results

        Returns:
            Results sorted by score descending, empty if the user liked nothing
        """
        if not self.snapshot.liked(user_id, self.liked_threshold):
            return []

        affinity = self.get_genre_affinity(user_id)
        excluded = self.snapshot.rated_movie_ids(user_id)

        results = [
            RecommendationResult(
                movie=movie,
                score=self.score_movie(movie, affinity),
                reason=content_reason(movie)
            )
            for movie in self.catalog
            if movie.id not in excluded
        ]

        logger.debug(f"Content-based: user {user_id}, {len(affinity)} genres, {len(results)} candidates")
        return self.rank(results, limit)
