"""User-based and item-based collaborative filtering."""
from typing import List, Optional
import logging

from movie_recommendation_engine.ml.similarity_computer import SimilarityComputer
from movie_recommendation_engine.models.recommendation import RecommendationResult
from movie_recommendation_engine.repos.catalog_repository import MovieCatalog
from movie_recommendation_engine.repos.rating_repository import RatingSnapshot
from movie_recommendation_engine.services.base_service import (
    BaseRecommendationService,
    ScoreAccumulator,
)

logger = logging.getLogger(__name__)

USER_BASED_REASON = "Based on users with similar taste"
ITEM_BASED_REASON = "Because you liked similar movies"


class _CollaborativeService(BaseRecommendationService):

    def __init__(
            self,
            catalog: MovieCatalog,
            snapshot: RatingSnapshot,
            liked_threshold: Optional[int] = None,
            similarity_computer: Optional[SimilarityComputer] = None
    ):
        super().__init__(catalog, snapshot, liked_threshold)
        self.similarity_computer = similarity_computer or SimilarityComputer(snapshot)


class UserBasedRecommendationService(_CollaborativeService):
    """Recommend movies that similar users rated highly."""

    def recommend(self, user_id: int, limit: int = 10) -> List[RecommendationResult]:
        """
        Score unrated movies by similarity-weighted votes of similar users.

        Each vote is rating * similarity for a neighbour rating at or above the
        liked threshold; a movie's score is the mean of its votes.

        Args:
            user_id: Target user
            limit: Maximum number of results

        Returns:
            Results sorted by score descending
        """
        rated = self.snapshot.rated_movie_ids(user_id)
        if not rated:
            return []

        similar_users = self.similarity_computer.get_similar_users(user_id)
        accumulator = ScoreAccumulator()

        for neighbour_id, similarity in similar_users:
            for rating in self.snapshot.ratings_for_user(neighbour_id):
                if rating.movie_id in rated or rating.rating < self.liked_threshold:
                    continue
                accumulator.add(rating.movie_id, rating.rating * similarity)

        logger.debug(
            f"User-based: user {user_id}, {len(similar_users)} neighbours, {len(accumulator)} candidates"
        )
        results = self.build_results(accumulator.averages(), USER_BASED_REASON)
        return self.rank(results, limit)


class ItemBasedRecommendationService(_CollaborativeService):
    """Recommend movies whose rating patterns resemble the user's liked movies."""

    def recommend(self, user_id: int, limit: int = 10) -> List[RecommendationResult]:
        """
        Score unrated catalog movies by similarity to each liked movie.

        Compares every liked movie with every unrated catalog movie, so the
        cost grows with liked x catalog size.

        Args:
            user_id: Target user
            limit: Maximum number of results

        Returns:
            Results sorted by score descending
        """
        liked = self.snapshot.liked(user_id, self.liked_threshold)
        if not liked:
            return []

        excluded = self.snapshot.rated_movie_ids(user_id)
        candidates = [movie for movie in self.catalog if movie.id not in excluded]
        accumulator = ScoreAccumulator()

        for liked_rating in liked:
            for movie in candidates:
                similarity = self.similarity_computer.compute_item_similarity(
                    liked_rating.movie_id, movie.id
                )
                if similarity > 0:
                    accumulator.add(movie.id, liked_rating.rating * similarity)

        logger.debug(
            f"Item-based: user {user_id}, {len(liked)} liked, {len(accumulator)} candidates"
        )
        results = self.build_results(accumulator.averages(), ITEM_BASED_REASON)
        return self.rank(results, limit)
