"""Field Rule Enforcement — one check per Movie field.

Invariants:
    - All check_* functions are PURE: no IO, no side effects
    - Return an error message on violation, None on success
    - The year upper bound is read from the clock on every call, never cached
    - Movie.validate() and every Movie setter use these same checks

Design Decisions:
    - Pure functions over methods: testable without building a Movie
    - Return strings (not exceptions): a batch can collect every violation
      of a row instead of stopping at the first one
"""

import math
from datetime import date

from moviedms.core.domain_types import MIN_YEAR, MIN_RATING, MAX_RATING


def current_year() -> int:
    """Wall-clock year. Patched in tests to pin the clock."""
    return date.today().year


def max_allowed_year() -> int:
    """Upper bound for movie year: current year + 1 (allows early releases)."""
    return current_year() + 1


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


# ─── Text fields ─────────────────────────────────────────────────

def check_movie_id(value: str | None) -> str | None:
    return "movieID required" if is_blank(value) else None


def check_title(value: str | None) -> str | None:
    return "title required" if is_blank(value) else None


def check_director(value: str | None) -> str | None:
    return "director required" if is_blank(value) else None


def check_genre(value: str | None) -> str | None:
    return "genre required" if is_blank(value) else None


# ─── Numeric fields ──────────────────────────────────────────────

def check_year(value: int) -> str | None:
    """Year must sit in [MIN_YEAR, current year + 1]."""
    if value < MIN_YEAR:
        return f"year must be >= {MIN_YEAR}"
    upper = max_allowed_year()
    if value > upper:
        return f"year must be <= {upper}"
    return None


def check_duration(value: float) -> str | None:
    """Duration must be a finite number of minutes above zero."""
    if not (value > 0) or math.isinf(value):
        return "duration must be > 0"
    return None


def check_rating(value: float) -> str | None:
    """Rating must sit in [1.0, 10.0]; NaN fails the comparison."""
    if not (MIN_RATING <= value <= MAX_RATING):
        return f"rating must be {MIN_RATING}..{MAX_RATING}"
    return None
