"""Entry point tying the strategies to one catalog/rating snapshot."""
from typing import Dict, Iterable, List, Optional
import logging

from movie_recommendation_engine.config import get_default_limit, get_liked_threshold
from movie_recommendation_engine.models.movie import Movie
from movie_recommendation_engine.models.recommendation import RecommendationResult
from movie_recommendation_engine.models.user_rating import UserRating
from movie_recommendation_engine.repos.catalog_repository import MovieCatalog
from movie_recommendation_engine.repos.rating_repository import RatingSnapshot
from movie_recommendation_engine.services.collaborative_service import (
    ItemBasedRecommendationService,
    UserBasedRecommendationService,
)
from movie_recommendation_engine.services.content_based_service import ContentBasedRecommendationService
from movie_recommendation_engine.services.hybrid_service import HybridRecommendationService

logger = logging.getLogger(__name__)


def _validate_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return limit


class RecommendationEngine:
    """
    Recommendation engine over an immutable (catalog, ratings) snapshot.

    Build a new engine whenever the ratings change; recommendation calls never
    modify the snapshot and are safe to run concurrently.
    """

    def __init__(
            self,
            movies: Iterable[Movie] | MovieCatalog,
            ratings: Iterable[UserRating] | RatingSnapshot,
            liked_threshold: Optional[int] = None,
            default_limit: Optional[int] = None
    ):
        self.catalog = movies if isinstance(movies, MovieCatalog) else MovieCatalog(movies)
        self.snapshot = ratings if isinstance(ratings, RatingSnapshot) else RatingSnapshot(ratings)
        self.liked_threshold = liked_threshold if liked_threshold is not None else get_liked_threshold()
        self.default_limit = default_limit if default_limit is not None else get_default_limit()

        self.user_based = UserBasedRecommendationService(
            self.catalog, self.snapshot, self.liked_threshold
        )
        self.item_based = ItemBasedRecommendationService(
            self.catalog, self.snapshot, self.liked_threshold,
            similarity_computer=self.user_based.similarity_computer
        )
        self.content_based = ContentBasedRecommendationService(
            self.catalog, self.snapshot, self.liked_threshold
        )
        self.hybrid = HybridRecommendationService(
            self.catalog, self.snapshot, self.liked_threshold,
            user_based=self.user_based,
            item_based=self.item_based,
            content_based=self.content_based
        )

        logger.info(
            f"Initialized RecommendationEngine ({len(self.catalog)} movies, {len(self.snapshot)} ratings)"
        )

    def _limit(self, limit: Optional[int]) -> int:
        return _validate_limit(self.default_limit if limit is None else limit)

    def get_user_based_recommendations(
            self, user_id: int, limit: Optional[int] = None
    ) -> List[RecommendationResult]:
        return self.user_based.recommend(user_id, self._limit(limit))

    def get_item_based_recommendations(
            self, user_id: int, limit: Optional[int] = None
    ) -> List[RecommendationResult]:
        return self.item_based.recommend(user_id, self._limit(limit))

    def get_content_based_recommendations(
            self, user_id: int, limit: Optional[int] = None
    ) -> List[RecommendationResult]:
        return self.content_based.recommend(user_id, self._limit(limit))

    def get_hybrid_recommendations(
            self, user_id: int, limit: Optional[int] = None
    ) -> List[RecommendationResult]:
        return self.hybrid.recommend(user_id, self._limit(limit))

    def get_all_recommendations(
            self, user_id: int, limit: Optional[int] = None
    ) -> Dict[str, List[RecommendationResult]]:
        """
        Run every strategy for a user.

        Args:
            user_id: Target user
            limit: Maximum results per strategy (None = default limit)

        Returns:
            Dict with user_based, item_based, content_based and hybrid lists,
            all empty when the user has not rated anything
        """
        limit = self._limit(limit)
        if not self.snapshot.ratings_for_user(user_id):
            logger.info(f"User {user_id} has no ratings, nothing to recommend")
            return {'user_based': [], 'item_based': [], 'content_based': [], 'hybrid': []}

        return {
            'user_based': self.user_based.recommend(user_id, limit),
            'item_based': self.item_based.recommend(user_id, limit),
            'content_based': self.content_based.recommend(user_id, limit),
            'hybrid': self.hybrid.recommend(user_id, limit),
        }
