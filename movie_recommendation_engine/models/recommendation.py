"""Recommendation result returned by every strategy."""
from dataclasses import dataclass
from typing import Any, Dict

from movie_recommendation_engine.models.movie import Movie


@dataclass
class RecommendationResult:
    """
    A ranked recommendation.

    Attributes:
        movie: The catalog entry itself (never a copy)
        score: Unbounded positive strategy score
        reason: Short human-readable provenance
    """
    movie: Movie
    score: float
    reason: str

    def display_score(self, max_score: float) -> float:
        """
        Scale the score into [0, 1] relative to the best score in a list.

        Args:
            max_score: Highest score in the list being displayed

        Returns:
            Normalized score, 0.0 when max_score is not positive
        """
        if max_score <= 0:
            return 0.0
        return min(self.score / max_score, 1.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'movie_id': self.movie.id,
            'title': self.movie.title,
            'genres': list(self.movie.genres),
            'score': float(self.score),
            'reason': self.reason,
        }
