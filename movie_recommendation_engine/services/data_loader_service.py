"""Service to load the movie catalog and user ratings from CSV or JSON files"""
from pathlib import Path
from typing import List, Optional
import json
import logging

import pandas as pd

from movie_recommendation_engine.config import get_data_dir
from movie_recommendation_engine.models.movie import Movie
from movie_recommendation_engine.models.user_rating import UserRating

logger = logging.getLogger(__name__)

RATING_COLUMNS = {
    'userId': 'user_id',
    'movieId': 'movie_id',
    'score': 'rating',
}


def _whole_number(value, column: str) -> int:
    """Convert a numeric cell to int, rejecting fractional values such as 4.5."""
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"Column '{column}' must hold whole numbers, got {value!r}")
    return int(number)


class CatalogDataLoader:
    """Load catalog and rating records into domain objects."""

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else get_data_dir()

    def _resolve(self, path) -> Path:
        path = Path(path)
        if not path.is_absolute() and not path.exists():
            path = self.data_dir / path
        if not path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")
        return path

    def _read_frame(self, path: Path) -> pd.DataFrame:
        suffix = path.suffix.lower()
        if suffix == '.csv':
            return pd.read_csv(path)
        if suffix == '.json':
            with open(path) as f:
                records = json.load(f)
            return pd.DataFrame(records)
        raise ValueError(f"Unsupported file type: {path.suffix} (expected .csv or .json)")

    # ===== CATALOG =====

    def load_movies(self, path) -> List[Movie]:
        """
        Load the movie catalog.

        Args:
            path: CSV or JSON file, absolute or relative to data_dir

        Returns:
            Movies in file order
        """
        path = self._resolve(path)
        logger.info(f"Loading movies from {path}...")

        df = self._read_frame(path)
        if 'id' not in df.columns:
            raise ValueError(f"Movie file {path} has no 'id' column")

        before = len(df)
        df = df.dropna(subset=['id'])
        if len(df) < before:
            logger.warning(f"Dropped {before - len(df)} movies without an id")

        movies = []
        for record in df.to_dict(orient='records'):
            # NaN -> None for optional fields
            cleaned = {
                key: (None if isinstance(value, float) and pd.isna(value) else value)
                for key, value in record.items()
            }
            movies.append(Movie.from_dict(cleaned))

        logger.info(f"✓ Loaded {len(movies)} movies")
        return movies

    # ===== RATINGS =====

    def load_ratings(self, path) -> List[UserRating]:
        """
        Load user ratings.

        Accepts userId/movieId or user_id/movie_id column names.

        Args:
            path: CSV or JSON file, absolute or relative to data_dir

        Returns:
            Ratings in file order
        """
        path = self._resolve(path)
        logger.info(f"Loading ratings from {path}...")

        df = self._read_frame(path).rename(columns=RATING_COLUMNS)
        missing = {'user_id', 'movie_id', 'rating'} - set(df.columns)
        if missing:
            raise ValueError(f"Rating file {path} is missing columns: {sorted(missing)}")

        before = len(df)
        df = df.dropna(subset=['user_id', 'movie_id', 'rating'])
        if len(df) < before:
            logger.warning(f"Dropped {before - len(df)} incomplete ratings")

        ratings = [
            UserRating(
                user_id=_whole_number(user_id, 'user_id'),
                movie_id=_whole_number(movie_id, 'movie_id'),
                rating=_whole_number(rating, 'rating')
            )
            for user_id, movie_id, rating in zip(df['user_id'], df['movie_id'], df['rating'])
        ]

        logger.info(f"✓ Loaded {len(ratings)} ratings from {df['user_id'].nunique()} users")
        return ratings
