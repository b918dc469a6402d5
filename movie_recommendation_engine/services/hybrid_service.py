"""Weighted merge of the user-based, item-based and content-based strategies."""
from typing import Dict, List, Optional
import logging

from movie_recommendation_engine.config import get_hybrid_candidate_limit, get_hybrid_weights
from movie_recommendation_engine.models.recommendation import RecommendationResult
from movie_recommendation_engine.repos.catalog_repository import MovieCatalog
from movie_recommendation_engine.repos.rating_repository import RatingSnapshot
from movie_recommendation_engine.services.base_service import BaseRecommendationService
from movie_recommendation_engine.services.collaborative_service import (
    ItemBasedRecommendationService,
    UserBasedRecommendationService,
)
from movie_recommendation_engine.services.content_based_service import ContentBasedRecommendationService

logger = logging.getLogger(__name__)

HYBRID_REASON = "Personalized recommendation"


class HybridRecommendationService(BaseRecommendationService):
    """
    Blend the three base strategies into one ranked list.

    Each strategy contributes its top ``candidate_limit`` results; a movie's
    hybrid score is the weighted sum of its strategy scores.
    """

    def __init__(
            self,
            catalog: MovieCatalog,
            snapshot: RatingSnapshot,
            liked_threshold: Optional[int] = None,
            user_weight: Optional[float] = None,
            item_weight: Optional[float] = None,
            content_weight: Optional[float] = None,
            candidate_limit: Optional[int] = None,
            user_based: Optional[UserBasedRecommendationService] = None,
            item_based: Optional[ItemBasedRecommendationService] = None,
            content_based: Optional[ContentBasedRecommendationService] = None
    ):
        """
        Initialize the hybrid service.

        Args:
            catalog: Movie catalog
            snapshot: Rating snapshot
            liked_threshold: Minimum "liked" rating (None = from config)
            user_weight: Weight for user-based scores (None = from config)
            item_weight: Weight for item-based scores (None = from config)
            content_weight: Weight for content-based scores (None = from config)
            candidate_limit: Results taken from each strategy (None = from config)
            user_based: Existing user-based service to reuse
            item_based: Existing item-based service to reuse
            content_based: Existing content-based service to reuse
        """
        super().__init__(catalog, snapshot, liked_threshold)

        weights = get_hybrid_weights()
        self.user_weight = user_weight if user_weight is not None else weights['user_based']
        self.item_weight = item_weight if item_weight is not None else weights['item_based']
        self.content_weight = content_weight if content_weight is not None else weights['content_based']
        self.candidate_limit = (
            candidate_limit if candidate_limit is not None else get_hybrid_candidate_limit()
        )
        if self.candidate_limit < 1:
            raise ValueError(f"candidate_limit must be at least 1, got {self.candidate_limit}")

        self.user_based = user_based or UserBasedRecommendationService(
            catalog, snapshot, self.liked_threshold
        )
        self.item_based = item_based or ItemBasedRecommendationService(
            catalog, snapshot, self.liked_threshold,
            similarity_computer=self.user_based.similarity_computer
        )
        self.content_based = content_based or ContentBasedRecommendationService(
            catalog, snapshot, self.liked_threshold
        )

    def recommend(self, user_id: int, limit: int = 10) -> List[RecommendationResult]:
        """
        Merge the strategies' top picks with fixed weights.

        Args:
            user_id: Target user
            limit: Maximum number of results

        Returns:
            Results sorted by combined score descending
        """
        sources = [
            (self.user_based.recommend(user_id, self.candidate_limit), self.user_weight),
            (self.item_based.recommend(user_id, self.candidate_limit), self.item_weight),
            (self.content_based.recommend(user_id, self.candidate_limit), self.content_weight),
        ]

        combined: Dict[int, RecommendationResult] = {}
        for results, weight in sources:
            for result in results:
                existing = combined.get(result.movie.id)
                if existing is not None:
                    existing.score += result.score * weight
                else:
                    combined[result.movie.id] = RecommendationResult(
                        movie=result.movie,
                        score=result.score * weight,
                        reason=HYBRID_REASON
                    )

        logger.debug(f"Hybrid: user {user_id}, {len(combined)} merged candidates")
        return self.rank(list(combined.values()), limit)
