"""Read-only movie catalog."""
from typing import Dict, Iterable, Iterator, List, Optional
import logging

from movie_recommendation_engine.models.movie import Movie

logger = logging.getLogger(__name__)


class MovieCatalog:
    """
    Immutable, ordered view over the movie catalog.

    Holds references to the given Movie objects; nothing is copied.
    """

    def __init__(self, movies: Iterable[Movie]):
        self._movies = tuple(movies)
        self._by_id: Dict[int, Movie] = {}
        self._positions: Dict[int, int] = {}

        for position, movie in enumerate(self._movies):
            if movie.id in self._by_id:
                logger.warning(f"Duplicate movie id {movie.id} in catalog, keeping first entry")
                continue
            self._by_id[movie.id] = movie
            self._positions[movie.id] = position

    def __iter__(self) -> Iterator[Movie]:
        return iter(self._movies)

    def __len__(self) -> int:
        return len(self._movies)

    def __contains__(self, movie_id: int) -> bool:
        return movie_id in self._by_id

    @property
    def movies(self) -> tuple:
        return self._movies

    def get_movie(self, movie_id: int) -> Optional[Movie]:
        """Fetch a movie by ID, or None if it is not in the catalog."""
        return self._by_id.get(movie_id)

    def position(self, movie_id: int) -> int:
        """Catalog order of a movie, used to break score ties."""
        return self._positions.get(movie_id, len(self._movies))

    def all_genres(self) -> List[str]:
        """Sorted list of every genre tag used in the catalog."""
        genres = set()
        for movie in self._movies:
            genres.update(movie.genres)
        return sorted(genres)
