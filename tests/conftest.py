"""Shared test fixtures and configuration for pytest."""
import json
from typing import List

import pytest

from movie_recommendation_engine.models.movie import Movie
from movie_recommendation_engine.models.user_rating import UserRating
from movie_recommendation_engine.repos.catalog_repository import MovieCatalog
from movie_recommendation_engine.repos.rating_repository import RatingSnapshot
from movie_recommendation_engine.services.recommendation_engine import RecommendationEngine


CONFIG_KEYS = [
    "LIKED_RATING_THRESHOLD",
    "HYBRID_USER_WEIGHT",
    "HYBRID_ITEM_WEIGHT",
    "HYBRID_CONTENT_WEIGHT",
    "HYBRID_CANDIDATE_LIMIT",
    "DEFAULT_RECOMMENDATION_LIMIT",
    "DATA_DIR",
]


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Make sure no engine settings leak in from the environment."""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)


def make_ratings(rows) -> List[UserRating]:
    return [UserRating(user_id=u, movie_id=m, rating=r) for u, m, r in rows]


# ===== Sample Data Fixtures =====

@pytest.fixture
def sample_movies() -> List[Movie]:
    """Small catalog with overlapping genres."""
    return [
        Movie(id=1, title='The Shawshank Redemption', genres=('Drama',), year=1994),
        Movie(id=2, title='The Godfather', genres=('Crime', 'Drama'), year=1972),
        Movie(id=3, title='The Dark Knight', genres=('Action', 'Crime'), year=2008),
        Movie(id=4, title='Groundhog Day', genres=('Comedy',), year=1993),
        Movie(id=5, title='Parasite', genres=('Drama', 'Thriller'), year=2019),
        Movie(id=6, title='Notting Hill', genres=('Comedy', 'Romance'), year=1999),
    ]


@pytest.fixture
def sample_ratings() -> List[UserRating]:
    """Ratings for four users over the sample catalog."""
    return make_ratings([
        (1, 1, 5), (1, 2, 4), (1, 4, 2),
        (2, 1, 4), (2, 2, 5), (2, 3, 5), (2, 5, 4),
        (3, 1, 1), (3, 4, 5), (3, 6, 5),
        (4, 2, 3), (4, 5, 5),
    ])


@pytest.fixture
def sample_catalog(sample_movies) -> MovieCatalog:
    return MovieCatalog(sample_movies)


@pytest.fixture
def sample_snapshot(sample_ratings) -> RatingSnapshot:
    return RatingSnapshot(sample_ratings)


@pytest.fixture
def sample_engine(sample_movies, sample_ratings) -> RecommendationEngine:
    return RecommendationEngine(sample_movies, sample_ratings)


@pytest.fixture
def drama_movies() -> List[Movie]:
    """Three movies all tagged Drama."""
    return [
        Movie(id=1, title='Drama One', genres=('Drama',)),
        Movie(id=2, title='Drama Two', genres=('Drama',)),
        Movie(id=3, title='Drama Three', genres=('Drama',)),
    ]


@pytest.fixture
def drama_ratings() -> List[UserRating]:
    """User 1 rates movie 1; user 2 rates movies 1 and 2."""
    return make_ratings([(1, 1, 5), (2, 1, 4), (2, 2, 5)])


# ===== File Fixtures =====

@pytest.fixture
def temp_data_dir(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def movies_json_file(temp_data_dir, sample_movies):
    path = temp_data_dir / "movies.json"
    records = [
        {'id': m.id, 'title': m.title, 'genre': list(m.genres), 'year': m.year}
        for m in sample_movies
    ]
    path.write_text(json.dumps(records))
    return path


@pytest.fixture
def ratings_csv_file(temp_data_dir, sample_ratings):
    path = temp_data_dir / "ratings.csv"
    lines = ["userId,movieId,rating"]
    lines += [f"{r.user_id},{r.movie_id},{r.rating}" for r in sample_ratings]
    path.write_text("\n".join(lines) + "\n")
    return path
