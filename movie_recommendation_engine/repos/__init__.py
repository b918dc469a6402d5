"""Repository classes"""

from movie_recommendation_engine.repos.catalog_repository import MovieCatalog
from movie_recommendation_engine.repos.rating_repository import RatingRepository, RatingSnapshot

__all__ = [
    "MovieCatalog",
    "RatingRepository",
    "RatingSnapshot",
]
