"""Hybrid movie recommendation engine."""

from movie_recommendation_engine.models import Movie, RecommendationResult, UserRating
from movie_recommendation_engine.repos import MovieCatalog, RatingRepository, RatingSnapshot
from movie_recommendation_engine.services import RecommendationEngine

__all__ = [
    "Movie",
    "MovieCatalog",
    "RatingRepository",
    "RatingSnapshot",
    "RecommendationEngine",
    "RecommendationResult",
    "UserRating",
]
