"""Domain models"""

from movie_recommendation_engine.models.movie import Movie
from movie_recommendation_engine.models.recommendation import RecommendationResult
from movie_recommendation_engine.models.user_rating import UserRating

__all__ = [
    "Movie",
    "RecommendationResult",
    "UserRating",
]
