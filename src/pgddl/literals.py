"""
Literal and identifier formatting for PostgreSQL DDL.

Values are rendered as SQL literals (single-quoted strings, bare numbers,
``true``/``false``, ``NULL``) and identifiers are double-quoted. Fragments
wrapped in :class:`PgLiteral` are trusted as raw SQL and emitted verbatim.
"""

import math
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, NamedTuple, Union

from .exceptions import ValidationError


class PgLiteral:
    """A raw SQL fragment that must not be escaped (e.g. ``now()``)."""

    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"PgLiteral({self.value!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, PgLiteral):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("PgLiteral", self.value))


class QualifiedName(NamedTuple):
    """A schema-qualified object name."""

    schema: str
    name: str


Identifier = Union[str, QualifiedName]


def escape_string(value: str) -> str:
    """Quote a string as a SQL literal, doubling embedded quotes."""
    return "'" + value.replace("'", "''") + "'"


def _escape_number(value: Union[int, float, Decimal]) -> str:
    """Render a number; NaN and infinities become quoted special values."""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        is_nan, is_infinite = value.is_nan(), value.is_infinite()
    else:
        is_nan, is_infinite = math.isnan(value), math.isinf(value)
    if is_nan:
        return "'NaN'"
    if is_infinite:
        return "'-Infinity'" if value < 0 else "'Infinity'"
    return str(value)


def escape_value(value: Any) -> str:
    """
    Render a Python value as a DDL literal.

    Args:
        value: None, bool, number, string, date/time, sequence or PgLiteral

    Returns:
        Literal text suitable for a DEFAULT clause

    Raises:
        ValidationError: If the value has no literal rendition
    """
    if value is None:
        return "NULL"
    if isinstance(value, PgLiteral):
        return value.value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return _escape_number(value)
    if isinstance(value, str):
        return escape_string(value)
    if isinstance(value, (datetime, date, time)):
        return escape_string(value.isoformat())
    if isinstance(value, (list, tuple)):
        return f"ARRAY[{', '.join(escape_value(item) for item in value)}]"

    raise ValidationError(
        f"Cannot render value of type {type(value).__name__} as a SQL literal",
        {"value": repr(value)},
    )


def quote_identifier(name: Identifier) -> str:
    """Double-quote an identifier; qualified names render as "schema"."name"."""
    if isinstance(name, QualifiedName):
        return f"{quote_identifier(name.schema)}.{quote_identifier(name.name)}"
    return '"' + str(name).replace('"', '""') + '"'


def object_name(name: Identifier) -> str:
    """Get the unqualified part of an identifier."""
    if isinstance(name, QualifiedName):
        return name.name
    return str(name)
