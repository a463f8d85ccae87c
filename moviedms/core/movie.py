"""Movie — a single movie record with per-field guarded mutation.

Invariants:
    - Construction is unchecked: any values are accepted
    - validate() reports EVERY violated rule, in field order
    - A setter either commits a valid value (strings trimmed) and returns True,
      or returns False and leaves the movie untouched
    - movie_id has no setter: it is the store key

Design Decisions:
    - Construct-then-validate: the CSV loader builds a candidate, inspects all
      reasons it is invalid, and decides without exceptions interrupting a batch
    - Setters return bool instead of raising: bad input is an ordinary outcome
"""

from dataclasses import dataclass

from moviedms.core.enforce_fields import (
    check_movie_id,
    check_title,
    check_director,
    check_year,
    check_duration,
    check_genre,
    check_rating,
)


@dataclass
class Movie:
    """One movie. Fields are plain attributes; use set_* to mutate safely."""

    movie_id: str
    title: str
    director: str
    year: int
    duration_minutes: float
    genre: str
    rating: float

    def validate(self) -> list[str]:
        """Return a list of validation errors (empty list means valid)."""
        checks = (
            check_movie_id(self.movie_id),
            check_title(self.title),
            check_director(self.director),
            check_year(self.year),
            check_duration(self.duration_minutes),
            check_genre(self.genre),
            check_rating(self.rating),
        )
        return [err for err in checks if err is not None]

    # --- Guarded setters ------------------------------------------------------

    def set_title(self, value: str) -> bool:
        if check_title(value):
            return False
        self.title = value.strip()
        return True

    def set_director(self, value: str) -> bool:
        if check_director(value):
            return False
        self.director = value.strip()
        return True

    def set_year(self, value: int) -> bool:
        if check_year(value):
            return False
        self.year = value
        return True

    def set_duration_minutes(self, value: float) -> bool:
        if check_duration(value):
            return False
        self.duration_minutes = value
        return True

    def set_genre(self, value: str) -> bool:
        if check_genre(value):
            return False
        self.genre = value.strip()
        return True

    def set_rating(self, value: float) -> bool:
        if check_rating(value):
            return False
        self.rating = value
        return True

    def __str__(self) -> str:
        return (
            f"{self.movie_id} | {self.title} | {self.director} | {self.year} | "
            f"{self.duration_minutes:.1f} min | {self.genre} | {self.rating:.1f}"
        )
