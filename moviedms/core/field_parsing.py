"""Field Parsing — convert external text into typed field values.

Invariants:
    - parse_* raise FieldParseError on unparseable text (never return garbage)
    - Surrounding whitespace is ignored for numeric text
    - Only plain ASCII numerals are accepted: no digit-group underscores,
      no non-ASCII digits
    - Float text accepts NaN / Infinity spelled exactly; range checks reject them later

Design Decisions:
    - Raise, don't return None: callers (update_fields, CSV rows, CLI prompts)
      each decide how a bad number surfaces
    - Grammar checked by regex before int()/float(): the builtins accept
      "2_010", full-width digits, and "inf" in any case
"""

import re

from moviedms.core.errors import ErrorContext, FieldParseError

_INT_TEXT = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_TEXT = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)


def _numeric_text(text: str, pattern: re.Pattern) -> str | None:
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    return stripped if pattern.fullmatch(stripped) else None


def parse_int(
    text: str, field_name: str = "value", context: ErrorContext | None = None,
) -> int:
    """Parse a whole number, e.g. ' 2010 ' -> 2010. '2010.0' is rejected."""
    stripped = _numeric_text(text, _INT_TEXT)
    if stripped is None:
        raise FieldParseError(field_name, str(text), "integer", context)
    return int(stripped)


def parse_float(
    text: str, field_name: str = "value", context: ErrorContext | None = None,
) -> float:
    """Parse a decimal number, e.g. '123.5' -> 123.5, '1e2' -> 100.0."""
    stripped = _numeric_text(text, _FLOAT_TEXT)
    if stripped is None:
        raise FieldParseError(field_name, str(text), "number", context)
    return float(stripped)
