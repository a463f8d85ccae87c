"""Domain Types — rich types and constants that replace bare primitives.

Invariants:
    - MovieId wraps str; ids compare case-insensitively via normalize_movie_id
    - Year lower bound (MIN_YEAR) is fixed; the upper bound is clock-derived
      and lives in enforce_fields
    - Rating is bounded MIN_RATING–MAX_RATING inclusive
    - UpdatableField lists the only keys update_fields accepts

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: field names round-trip through CLI text and mapping keys unchanged
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MovieId = NewType("MovieId", str)


# ─── Constants ───────────────────────────────────────────────────

MIN_YEAR: int = 1888
MIN_RATING: float = 1.0
MAX_RATING: float = 10.0

CSV_DELIMITER: str = ","
CSV_COLUMNS: tuple[str, ...] = (
    "id", "title", "director", "year", "duration", "genre", "rating",
)
EXPECTED_COLUMNS: int = len(CSV_COLUMNS)

ID_PREFIX_LENGTH: int = 3
ID_FILLER: str = "X"


# ─── Enums ───────────────────────────────────────────────────────

class UpdatableField(str, Enum):
    """Keys accepted by MovieStore.update_fields (id is immutable)."""
    TITLE = "title"
    DIRECTOR = "director"
    YEAR = "year"
    DURATION = "duration"
    GENRE = "genre"
    RATING = "rating"

    @classmethod
    def from_key(cls, key: str) -> "UpdatableField | None":
        """Case-insensitive lookup; None for unknown or non-str keys."""
        if not isinstance(key, str):
            return None
        try:
            return cls(key.strip().lower())
        except ValueError:
            return None


def normalize_movie_id(movie_id: str) -> str:
    """Comparison key for case-insensitive id matching."""
    return movie_id.casefold()
