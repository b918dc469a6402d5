"""Shared pieces of the recommendation strategies."""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import logging

from movie_recommendation_engine.config import get_liked_threshold
from movie_recommendation_engine.models.recommendation import RecommendationResult
from movie_recommendation_engine.repos.catalog_repository import MovieCatalog
from movie_recommendation_engine.repos.rating_repository import RatingSnapshot

logger = logging.getLogger(__name__)


class ScoreAccumulator:
    """Running (total, count) per movie ID; the final score is the mean."""

    def __init__(self):
        self._totals: Dict[int, float] = {}
        self._counts: Dict[int, int] = {}

    def add(self, movie_id: int, value: float) -> None:
        self._totals[movie_id] = self._totals.get(movie_id, 0.0) + value
        self._counts[movie_id] = self._counts.get(movie_id, 0) + 1

    def __len__(self) -> int:
        return len(self._totals)

    def averages(self) -> Dict[int, float]:
        return {
            movie_id: total / self._counts[movie_id]
            for movie_id, total in self._totals.items()
        }


class BaseRecommendationService(ABC):
    """Holds the catalog and rating snapshot a strategy reads from."""

    def __init__(
            self,
            catalog: MovieCatalog,
            snapshot: RatingSnapshot,
            liked_threshold: Optional[int] = None
    ):
        self.catalog = catalog
        self.snapshot = snapshot
        self.liked_threshold = liked_threshold if liked_threshold is not None else get_liked_threshold()

    def rank(self, results: List[RecommendationResult], limit: int) -> List[RecommendationResult]:
        """Sort by score descending (ties in catalog order) and truncate."""
        ordered = sorted(
            results,
            key=lambda result: (-result.score, self.catalog.position(result.movie.id))
        )
        return ordered[:limit]

    def build_results(
            self,
            scores: Dict[int, float],
            reason: str
    ) -> List[RecommendationResult]:
        """
        Resolve scored movie IDs against the catalog.

        IDs missing from the catalog are skipped.
        """
        results = []
        for movie_id, score in scores.items():
            movie = self.catalog.get_movie(movie_id)
            if movie is None:
                logger.debug(f"Skipping movie {movie_id}: not in catalog")
                continue
            results.append(RecommendationResult(movie=movie, score=score, reason=reason))
        return results

    @abstractmethod
    def recommend(self, user_id: int, limit: int = 10) -> List[RecommendationResult]:
        """Ranked recommendations for a user, at most limit long."""
