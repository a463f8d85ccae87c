"""Movie — tests for construct-then-validate, guarded setters, and rendering.

Tests cover:
    - Construction never rejects, validate() reports every violation
    - Each setter commits valid values (trimming text) and returns True
    - Each setter rejects invalid values, returns False, keeps the old value
    - str(movie) is the fixed pipe-delimited line
"""

import math

from moviedms.core.movie import Movie


def _make_movie(**overrides) -> Movie:
    """Helper: a valid movie, with any field overridden."""
    values = dict(
        movie_id="INC2010", title="Inception", director="Christopher Nolan",
        year=2010, duration_minutes=148.0, genre="Science Fiction", rating=8.8,
    )
    values.update(overrides)
    return Movie(**values)


# ─── validate ────────────────────────────────────────────────────

def test_valid_movie_has_no_errors():
    movie = _make_movie()
    assert movie.validate() == []


def test_construction_accepts_invalid_values():
    movie = _make_movie(title="", year=1700, rating=42.0)
    assert movie.title == ""
    assert movie.year == 1700
    assert movie.rating == 42.0


def test_validate_reports_every_violation():
    movie = Movie("", " ", "", 1700, 0.0, "", 0.5)
    errors = movie.validate()
    assert errors == [
        "movieID required",
        "title required",
        "director required",
        "year must be >= 1888",
        "duration must be > 0",
        "genre required",
        "rating must be 1.0..10.0",
    ]


def test_validate_has_no_side_effects():
    movie = _make_movie(title="  padded  ")
    assert movie.validate() == movie.validate()
    assert movie.title == "  padded  "


def test_single_violation_mentions_the_field():
    cases = {
        "movie_id": "",
        "title": "",
        "director": "   ",
        "year": 1800,
        "duration_minutes": -5.0,
        "genre": "",
        "rating": 10.5,
    }
    names = {
        "movie_id": "movie_id", "title": "title", "director": "director",
        "year": "year", "duration_minutes": "duration", "genre": "genre",
        "rating": "rating",
    }
    for field, bad in cases.items():
        errors = _make_movie(**{field: bad}).validate()
        assert len(errors) == 1, field
        assert names[field] in errors[0]


def test_none_text_fields_count_as_blank():
    movie = _make_movie(director=None)
    assert movie.validate() == ["director required"]


def test_nan_rating_and_duration_are_invalid():
    movie = _make_movie(duration_minutes=math.nan, rating=math.nan)
    errors = movie.validate()
    assert "duration must be > 0" in errors
    assert "rating must be 1.0..10.0" in errors


def test_infinite_duration_is_invalid():
    assert _make_movie(duration_minutes=math.inf).validate() == ["duration must be > 0"]


# ─── text setters ────────────────────────────────────────────────

def test_set_title_trims_and_commits():
    movie = _make_movie()
    assert movie.set_title("  Memento  ") is True
    assert movie.title == "Memento"


def test_set_title_rejects_blank_and_keeps_old_value():
    movie = _make_movie()
    assert movie.set_title("   ") is False
    assert movie.set_title("") is False
    assert movie.set_title(None) is False
    assert movie.title == "Inception"


def test_set_director_and_genre():
    movie = _make_movie()
    assert movie.set_director(" Denis Villeneuve ") is True
    assert movie.set_genre("Drama\t") is True
    assert movie.director == "Denis Villeneuve"
    assert movie.genre == "Drama"
    assert movie.set_director("") is False
    assert movie.set_genre(" ") is False
    assert movie.director == "Denis Villeneuve"
    assert movie.genre == "Drama"


# ─── numeric setters ─────────────────────────────────────────────

def test_set_duration_accepts_positive_only():
    movie = _make_movie()
    assert movie.set_duration_minutes(0.5) is True
    assert movie.duration_minutes == 0.5
    assert movie.set_duration_minutes(0) is False
    assert movie.set_duration_minutes(-1.0) is False
    assert movie.set_duration_minutes(math.nan) is False
    assert movie.duration_minutes == 0.5


def test_set_rating_bounds_are_inclusive():
    movie = _make_movie()
    assert movie.set_rating(1.0) is True
    assert movie.set_rating(10.0) is True
    assert movie.rating == 10.0
    assert movie.set_rating(0.99) is False
    assert movie.set_rating(10.01) is False
    assert movie.rating == 10.0


# ─── rendering ───────────────────────────────────────────────────

def test_str_is_pipe_delimited_with_one_decimal():
    movie = _make_movie(duration_minutes=148, rating=8.8)
    assert str(movie) == (
        "INC2010 | Inception | Christopher Nolan | 2010 | 148.0 min | "
        "Science Fiction | 8.8"
    )


def test_str_fixed_field_order():
    movie = Movie("A1", "T", "D", 1999, 90.5, "G", 7)
    assert str(movie) == "A1 | T | D | 1999 | 90.5 min | G | 7.0"
