"""Movie Snapshot — capture and restore all seven Movie attributes.

Invariants:
    - movie_to_snapshot copies every attribute (including movie_id)
    - restore_movie writes attributes back directly, bypassing setters,
      so the movie ends bit-for-bit equal to the snapshot
    - Snapshots are immutable (frozen dataclass)

Design Decisions:
    - Extracted from the store: rollback is a core concern, testable without a store
    - Direct assignment on restore: re-running setters could reject a value
      that was accepted under an earlier clock
"""

from dataclasses import dataclass, fields

from moviedms.core.movie import Movie


@dataclass(frozen=True)
class MovieSnapshot:
    """Point-in-time copy of a Movie's attributes."""
    movie_id: str
    title: str
    director: str
    year: int
    duration_minutes: float
    genre: str
    rating: float


_SNAPSHOT_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(MovieSnapshot))


def movie_to_snapshot(movie: Movie) -> MovieSnapshot:
    """Capture the movie's current state. Pure, no side effects."""
    return MovieSnapshot(**{name: getattr(movie, name) for name in _SNAPSHOT_FIELDS})


def restore_movie(movie: Movie, snapshot: MovieSnapshot) -> None:
    """Overwrite every attribute of *movie* from *snapshot*."""
    for name in _SNAPSHOT_FIELDS:
        setattr(movie, name, getattr(snapshot, name))
