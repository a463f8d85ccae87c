"""Observability — tests for the JSON formatter and logging setup."""

import json
import logging
import sys

import pytest

from moviedms.core.errors import ErrorContext, FieldParseError
from moviedms.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="moviedms.services.movie_store", level=logging.INFO,
        pathname=__file__, lineno=1, msg="Loaded=%d", args=(2,), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "moviedms.services.movie_store"
    assert payload["message"] == "Loaded=2"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(movie_id="INC2010", line_number=4, error_code="DUPLICATE_ID", color="red")
    ))
    assert payload["movie_id"] == "INC2010"
    assert payload["line_number"] == 4
    assert payload["error_code"] == "DUPLICATE_ID"
    assert "color" not in payload


def test_json_formatter_embeds_error_envelope():
    err = FieldParseError("year", "2_010", "integer", ErrorContext(line_number=3))
    payload = json.loads(JSONFormatter().format(_record(**err.to_dict())))
    assert payload["error"]["code"] == "FIELD_PARSE_ERROR"
    assert payload["error"]["context"]["line_number"] == 3


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in payload["exception"]


def test_setup_logging_installs_one_handler(restore_root_logging):
    setup_logging("debug", "json")
    handler = setup_logging("info", "json")
    ours = [h for h in logging.root.handlers if h.get_name() == "moviedms"]
    assert ours == [handler]
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.INFO


def test_setup_logging_text_format(restore_root_logging):
    handler = setup_logging("WARNING", "text")
    assert not isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING


def test_setup_logging_unknown_level_falls_back(restore_root_logging):
    setup_logging("chatty")
    assert logging.root.level == logging.WARNING
