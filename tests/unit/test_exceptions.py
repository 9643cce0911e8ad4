"""
Unit tests for the pgddl exception hierarchy.
"""

from pgddl.exceptions import (
    ConfigurationError,
    IrreversibleOperationError,
    PgDDLError,
    SchemaError,
    UnsupportedOperationError,
    ValidationError,
)


class TestPgDDLError:
    """Test base error formatting."""

    def test_message_only(self):
        assert str(PgDDLError("boom")) == "boom"

    def test_details_and_cause(self):
        error = PgDDLError("boom", {"table": "users"}, cause=ValueError("bad"))

        assert str(error) == "boom [table=users] (caused by: bad)"
        assert error.details == {"table": "users"}

    def test_hierarchy(self):
        for error_class in (ConfigurationError, ValidationError, SchemaError):
            assert issubclass(error_class, PgDDLError)
        assert issubclass(UnsupportedOperationError, SchemaError)
        assert issubclass(IrreversibleOperationError, SchemaError)


class TestOperationErrors:
    """Test operation-specific errors."""

    def test_unsupported_operation(self):
        error = UnsupportedOperationError("alter_type")

        assert error.operation == "alter_type"
        assert str(error) == "Operation 'alter_type' is not supported"

    def test_irreversible_operation(self):
        error = IrreversibleOperationError("add_constraint", "no name", {"table": "users"})

        assert error.reason == "no name"
        assert str(error) == (
            "Operation 'add_constraint' cannot be reversed: no name [table=users]"
        )
