"""CSV Ingestion — read a CSV source and turn lines into Movie candidates.

Invariants:
    - read_source_lines drains the file inside a context manager: the handle is
      released on every exit path
    - read_source_lines raises only SourceNotFoundError / SourceUnreadableError
    - parse_csv_line never raises: a bad line yields a RowResult with an error
    - Line format: id,title,director,year,duration,genre,rating (no quoting);
      columns beyond the seventh are ignored

Design Decisions:
    - Whole-file read before ingestion: an unreadable file loads zero rows
      instead of a partial batch
    - utf-8-sig decoding: a leading BOM must not leak into the first movie id
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from moviedms.core.domain_types import CSV_DELIMITER, EXPECTED_COLUMNS
from moviedms.core.errors import (
    ErrorContext,
    FieldParseError,
    SourceNotFoundError,
    SourceUnreadableError,
)
from moviedms.core.field_parsing import parse_int, parse_float
from moviedms.core.movie import Movie

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowResult:
    """One parsed line: either a candidate movie or an error message."""
    line_number: int
    movie: Movie | None = None
    error: str | None = None


def read_source_lines(path: str | Path) -> list[str]:
    """Return every line of the file at *path*, newline characters removed."""
    source = Path(path)
    if not source.exists() or source.is_dir():
        raise SourceNotFoundError(str(path))
    try:
        with source.open(encoding="utf-8-sig") as fh:
            return [line.rstrip("\r\n") for line in fh]
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(
            f"CSV source unreadable: {exc}",
            extra={"path": str(path), "error_code": "SOURCE_UNREADABLE"},
        )
        raise SourceUnreadableError(str(path), str(exc)) from exc


def is_blank_line(line: str) -> bool:
    return not line.strip()


def parse_csv_line(line: str, line_number: int) -> RowResult:
    """Split one non-blank line into a Movie candidate (unvalidated)."""
    cells = line.split(CSV_DELIMITER)
    if len(cells) < EXPECTED_COLUMNS:
        return RowResult(
            line_number,
            error=f"Bad columns at line {line_number} (expected {EXPECTED_COLUMNS})",
        )

    movie_id, title, director, raw_year, raw_duration, genre, raw_rating = (
        cell.strip() for cell in cells[:EXPECTED_COLUMNS]
    )
    context = ErrorContext(movie_id=movie_id or None, line_number=line_number)
    try:
        year = parse_int(raw_year, "year", context)
        duration = parse_float(raw_duration, "duration", context)
        rating = parse_float(raw_rating, "rating", context)
    except FieldParseError as exc:
        logger.debug(exc.message, extra={"line_number": line_number, **exc.to_dict()})
        return RowResult(line_number, error=f"Bad numeric values at line {line_number}")

    return RowResult(
        line_number,
        movie=Movie(movie_id, title, director, year, duration, genre, rating),
    )
