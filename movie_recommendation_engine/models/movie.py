"""Movie catalog entry."""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


def _as_tuple(value) -> Tuple[str, ...]:
    """Normalize a list, tuple or pipe/comma separated string into a tuple of strings."""
    if value is None:
        return ()
    if isinstance(value, str):
        separator = '|' if '|' in value else ','
        return tuple(part.strip() for part in value.split(separator) if part.strip())
    return tuple(str(part) for part in value)


@dataclass(frozen=True)
class Movie:
    """
    A catalog item.

    Only ``id`` and ``genres`` are interpreted by the recommenders; the rest is
    carried along for display.
    """
    id: int
    title: str
    genres: Tuple[str, ...] = ()
    year: Optional[int] = None
    rating: Optional[float] = None
    plot: str = ''
    cast: Tuple[str, ...] = ()
    director: str = ''
    poster: str = ''
    runtime: Optional[int] = None
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        # read-only view
        object.__setattr__(self, 'extra', MappingProxyType(dict(self.extra)))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Movie':
        """
        Build a movie from a raw record.

        Accepts either ``genre`` or ``genres`` as the tag field.
        """
        genres = data.get('genres', data.get('genre'))
        known = {
            'id', 'title', 'genre', 'genres', 'year', 'rating', 'plot',
            'cast', 'director', 'poster', 'runtime'
        }
        year = data.get('year')
        runtime = data.get('runtime')
        rating = data.get('rating')
        return cls(
            id=int(data['id']),
            title=str(data.get('title', '')),
            genres=_as_tuple(genres),
            year=int(year) if year is not None else None,
            rating=float(rating) if rating is not None else None,
            plot=data.get('plot') or '',
            cast=_as_tuple(data.get('cast')),
            director=data.get('director') or '',
            poster=data.get('poster') or '',
            runtime=int(runtime) if runtime is not None else None,
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'genres': list(self.genres),
            'year': self.year,
            'rating': self.rating,
            'plot': self.plot,
            'cast': list(self.cast),
            'director': self.director,
            'poster': self.poster,
            'runtime': self.runtime,
        }
