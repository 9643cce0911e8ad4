"""
Unit tests for literal escaping and identifier quoting.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from pgddl.exceptions import ValidationError
from pgddl.literals import (
    PgLiteral,
    QualifiedName,
    escape_string,
    escape_value,
    object_name,
    quote_identifier,
)


class TestEscapeValue:
    """Test rendering of Python values as SQL literals."""

    def test_none_is_null(self):
        assert escape_value(None) == "NULL"

    def test_booleans(self):
        assert escape_value(True) == "true"
        assert escape_value(False) == "false"

    def test_numbers(self):
        assert escape_value(0) == "0"
        assert escape_value(42) == "42"
        assert escape_value(1.5) == "1.5"
        assert escape_value(Decimal("10.20")) == "10.20"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (float("inf"), "'Infinity'"),
            (float("-inf"), "'-Infinity'"),
            (float("nan"), "'NaN'"),
            (Decimal("Infinity"), "'Infinity'"),
            (Decimal("-Infinity"), "'-Infinity'"),
            (Decimal("NaN"), "'NaN'"),
        ],
    )
    def test_non_finite_numbers_are_quoted(self, value, expected):
        assert escape_value(value) == expected

    def test_strings_are_single_quoted(self):
        assert escape_value("active") == "'active'"
        assert escape_value("") == "''"

    def test_embedded_quotes_are_doubled(self):
        assert escape_value("it's") == "'it''s'"
        assert escape_string("''") == "''''''"

    def test_dates_use_iso_format(self):
        assert escape_value(date(2024, 1, 2)) == "'2024-01-02'"
        assert escape_value(datetime(2024, 1, 2, 3, 4, 5)) == "'2024-01-02T03:04:05'"

    def test_sequences_become_arrays(self):
        assert escape_value([1, 2]) == "ARRAY[1, 2]"
        assert escape_value(("a", None)) == "ARRAY['a', NULL]"

    def test_raw_literal_passes_through(self):
        assert escape_value(PgLiteral("now()")) == "now()"
        assert escape_value([PgLiteral("current_date")]) == "ARRAY[current_date]"

    def test_unsupported_value_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            escape_value(object())

        assert "object" in str(exc_info.value)


class TestPgLiteral:
    """Test raw literal wrapper."""

    def test_equality_and_hash(self):
        assert PgLiteral("now()") == PgLiteral("now()")
        assert PgLiteral("now()") != PgLiteral("today()")
        assert len({PgLiteral("now()"), PgLiteral("now()")}) == 1

    def test_str_and_repr(self):
        literal = PgLiteral("now()")
        assert str(literal) == "now()"
        assert repr(literal) == "PgLiteral('now()')"


class TestQuoteIdentifier:
    """Test identifier quoting."""

    def test_plain_identifier(self):
        assert quote_identifier("users") == '"users"'

    def test_embedded_double_quote_is_doubled(self):
        assert quote_identifier('we"ird') == '"we""ird"'

    def test_qualified_name(self):
        assert quote_identifier(QualifiedName("app", "users")) == '"app"."users"'

    def test_object_name(self):
        assert object_name("users") == "users"
        assert object_name(QualifiedName("app", "users")) == "users"
