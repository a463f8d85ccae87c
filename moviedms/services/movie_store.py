"""Movie Store — in-memory owner of all managed movies.

Invariants:
    - Insertion order preserved; no two movies share an id (case-insensitive)
    - Only valid movies are stored: add() validates before appending
    - update_fields() is atomic: the movie ends fully updated or bit-for-bit
      identical to before the call, whatever exception interrupts it
    - all() returns a read-only view over the store's own list (no copy);
      the movies inside are the stored instances
    - Bad input never raises: results are bool / None / LoadReport

Design Decisions:
    - Plain list, not dict: insertion order and the "first match" lookup are
      both native; the expected collection is small
    - Rollback via snapshot-and-restore: one movie per call, synchronous,
      so no transaction log is needed
    - Not thread-safe: callers sharing a store across threads must wrap it
      in a single coarse lock
"""

import logging
import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import overload

from moviedms.core.domain_types import (
    ID_FILLER,
    ID_PREFIX_LENGTH,
    MovieId,
    UpdatableField,
    normalize_movie_id,
)
from moviedms.core.errors import MovieDMSError, UnknownFieldError, ErrorContext
from moviedms.core.field_parsing import parse_int, parse_float
from moviedms.core.load_report import LoadReport
from moviedms.core.movie import Movie
from moviedms.core.movie_snapshot import movie_to_snapshot, restore_movie
from moviedms.services.csv_ingest import (
    is_blank_line,
    parse_csv_line,
    read_source_lines,
)

logger = logging.getLogger(__name__)

_NON_LETTERS = re.compile(r"[^A-Za-z]")


class MovieView(Sequence[Movie]):
    """Read-only, live view over a store's movie list."""

    __slots__ = ("_movies",)

    def __init__(self, movies: list[Movie]):
        self._movies = movies

    @overload
    def __getitem__(self, index: int) -> Movie: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Movie, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._movies[index])
        return self._movies[index]

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self) -> Iterator[Movie]:
        return iter(self._movies)

    def __repr__(self) -> str:
        return f"MovieView({len(self._movies)} movies)"


class MovieStore:
    """CRUD, atomic multi-field update, average duration, id generation, CSV load."""

    def __init__(self) -> None:
        self._movies: list[Movie] = []

    def __len__(self) -> int:
        return len(self._movies)

    # ─── CRUD ────────────────────────────────────────────────────

    def add(self, movie: Movie) -> bool:
        """Store *movie* if it is valid and its id is unused."""
        errors = movie.validate()
        if errors:
            logger.info(
                f"Rejected invalid movie: {'; '.join(errors)}",
                extra={"movie_id": movie.movie_id, "error_code": "VALIDATION_FAILED"},
            )
            return False
        if self.find_by_id(movie.movie_id) is not None:
            logger.info(
                "Rejected duplicate movie id",
                extra={"movie_id": movie.movie_id, "error_code": "DUPLICATE_ID"},
            )
            return False
        self._movies.append(movie)
        logger.debug("Movie added", extra={"movie_id": movie.movie_id})
        return True

    def find_by_id(self, movie_id: str | None) -> Movie | None:
        """Case-insensitive exact id match; None when absent."""
        index = self._index_of(movie_id)
        return None if index is None else self._movies[index]

    def all(self) -> MovieView:
        return MovieView(self._movies)

    def remove(self, movie_id: str | None) -> bool:
        """Delete by id; False (not an error) when absent."""
        index = self._index_of(movie_id)
        if index is None:
            return False
        removed = self._movies.pop(index)
        logger.debug("Movie removed", extra={"movie_id": removed.movie_id})
        return True

    # ─── Update ──────────────────────────────────────────────────

    def update_field(self, movie_id: str, field: str, value: str) -> bool:
        """Single-field form of update_fields."""
        return self.update_fields(movie_id, {field: value})

    def update_fields(self, movie_id: str, fields: Mapping[str, str]) -> bool:
        """Apply textual field updates atomically.

        Keys: title, director, year, duration, genre, rating (case-insensitive).
        Entries are applied in mapping order; the first unknown key, unparseable
        number, or rejected value stops processing and rolls every attribute back.
        """
        movie = self.find_by_id(movie_id)
        if movie is None:
            return False

        snapshot = movie_to_snapshot(movie)
        try:
            ok = all(
                self._apply_field(movie, key, value) for key, value in fields.items()
            )
        except MovieDMSError as exc:
            logger.info(
                exc.message,
                extra={"movie_id": movie.movie_id, "error_code": exc.code, **exc.to_dict()},
            )
            ok = False
        except Exception as exc:
            logger.error(
                "Unexpected error updating movie: %s", exc,
                extra={"movie_id": movie.movie_id, "error_code": "UPDATE_FAILED"},
                exc_info=True,
            )
            ok = False

        if not ok:
            restore_movie(movie, snapshot)
            logger.info("Update rolled back", extra={"movie_id": movie.movie_id})
        return ok

    @staticmethod
    def _apply_field(movie: Movie, key: str, value: str) -> bool:
        """Parse and set one field. Raises on unknown key or bad number."""
        context = ErrorContext(movie_id=movie.movie_id)
        field = UpdatableField.from_key(key)
        if field is None:
            raise UnknownFieldError(str(key), context)

        if field is UpdatableField.TITLE:
            return movie.set_title(value)
        if field is UpdatableField.DIRECTOR:
            return movie.set_director(value)
        if field is UpdatableField.GENRE:
            return movie.set_genre(value)
        if field is UpdatableField.YEAR:
            return movie.set_year(parse_int(value, field.value, context))
        if field is UpdatableField.DURATION:
            return movie.set_duration_minutes(parse_float(value, field.value, context))
        return movie.set_rating(parse_float(value, field.value, context))

    # ─── Custom Action ───────────────────────────────────────────

    def average_duration(self) -> float | None:
        """Mean duration in minutes, or None when the store is empty."""
        if not self._movies:
            return None
        total = sum(m.duration_minutes for m in self._movies)
        return total / len(self._movies)

    # ─── Id Helper ───────────────────────────────────────────────

    def generate_id(self, title: str | None, year: int) -> MovieId:
        """Title letters + year, e.g. ("Inception", 2010) -> "INC2010".

        Collisions get a numeric suffix: INC2010-1, INC2010-2, ...
        """
        letters = "" if title is None else _NON_LETTERS.sub("", title).upper()
        prefix = (letters + ID_FILLER * ID_PREFIX_LENGTH)[:ID_PREFIX_LENGTH]
        base = f"{prefix}{year}"

        candidate = base
        suffix = 1
        while self.find_by_id(candidate) is not None:
            candidate = f"{base}-{suffix}"
            suffix += 1
        return MovieId(candidate)

    # ─── CSV Loader ──────────────────────────────────────────────

    def load_csv(self, path: str | Path) -> LoadReport:
        """Load movies from a CSV file. Never raises for bad rows or a bad path."""
        try:
            lines = read_source_lines(path)
        except MovieDMSError as exc:
            report = LoadReport()
            report.errors.append(exc.message)
            logger.info(
                report.summary(),
                extra={"path": str(path), "error_code": exc.code, **exc.to_dict()},
            )
            return report

        report = self.load_lines(lines)
        logger.info(report.summary(), extra={"path": str(path)})
        return report

    def load_lines(self, lines: Iterable[str]) -> LoadReport:
        """Ingest CSV lines; each bad line becomes one error, the rest still load."""
        report = LoadReport()
        for line_number, line in enumerate(lines, start=1):
            if is_blank_line(line):
                continue

            row = parse_csv_line(line, line_number)
            if row.error is not None:
                _reject(report, line_number, row.error)
                continue

            violations = row.movie.validate()
            if violations:
                _reject(
                    report, line_number,
                    f"Validation failed at line {line_number}: {'; '.join(violations)}",
                )
                continue

            if self.add(row.movie):
                report.loaded += 1
            else:
                _reject(
                    report, line_number,
                    f"Add failed at line {line_number} (duplicate ID or invalid data).",
                )
        return report

    # ─── Helpers ─────────────────────────────────────────────────

    def _index_of(self, movie_id: str | None) -> int | None:
        if movie_id is None:
            return None
        key = normalize_movie_id(movie_id)
        for index, movie in enumerate(self._movies):
            if normalize_movie_id(movie.movie_id) == key:
                return index
        return None


def _reject(report: LoadReport, line_number: int, message: str) -> None:
    report.errors.append(message)
    logger.debug(message, extra={"line_number": line_number})
