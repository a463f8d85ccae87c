"""Movie Snapshot — tests for capture/restore used by rollback.

Invariants:
    - Snapshot holds all seven attributes
    - restore_movie makes the movie equal to the snapshot again, even for
      values a setter would now reject
"""

import dataclasses

import pytest

from moviedms.core.movie import Movie
from moviedms.core.movie_snapshot import (
    MovieSnapshot,
    movie_to_snapshot,
    restore_movie,
)


def _make_movie() -> Movie:
    return Movie("U1", "Old", "Dir", 2000, 100.0, "Drama", 7.0)


def test_snapshot_captures_all_seven_attributes():
    snap = movie_to_snapshot(_make_movie())
    assert snap == MovieSnapshot("U1", "Old", "Dir", 2000, 100.0, "Drama", 7.0)


def test_snapshot_is_immutable():
    snap = movie_to_snapshot(_make_movie())
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.title = "changed"


def test_snapshot_is_independent_of_later_mutation():
    movie = _make_movie()
    snap = movie_to_snapshot(movie)
    movie.set_title("New")
    assert snap.title == "Old"
    assert movie_to_snapshot(movie) != snap


def test_restore_undoes_every_change():
    movie = _make_movie()
    snap = movie_to_snapshot(movie)
    movie.set_title("New")
    movie.set_director("Other")
    movie.set_year(2001)
    movie.set_duration_minutes(1.5)
    movie.set_genre("Horror")
    movie.set_rating(2.0)
    movie.movie_id = "CHANGED"

    restore_movie(movie, snap)

    assert movie_to_snapshot(movie) == snap
    assert movie == _make_movie()


def test_restore_bypasses_setter_rules():
    movie = Movie("X", "T", "D", 1700, 1.0, "G", 5.0)
    snap = movie_to_snapshot(movie)
    movie.year = 2000
    restore_movie(movie, snap)
    assert movie.year == 1700
