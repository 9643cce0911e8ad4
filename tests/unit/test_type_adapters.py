"""
Unit tests for type adapters and shorthand merging.
"""

import pytest

from pgddl.exceptions import ValidationError
from pgddl.models import ColumnOptions
from pgddl.schema.type_adapters import (
    DEFAULT_TYPE_SHORTHANDS,
    TYPE_ADAPTERS,
    apply_type_adapters,
    merge_type_shorthands,
)


class TestApplyTypeAdapters:
    """Test type name resolution."""

    @pytest.mark.parametrize(
        "type_name,expected",
        [
            ("int", "integer"),
            ("string", "text"),
            ("float", "real"),
            ("double", "double precision"),
            ("datetime", "timestamp"),
            ("bool", "boolean"),
        ],
    )
    def test_adapted_types(self, type_name, expected):
        assert apply_type_adapters(type_name) == expected

    @pytest.mark.parametrize(
        "type_name", ["varchar(40)", "uuid", "jsonb", "my_enum", "integer", "INT"]
    )
    def test_unknown_types_pass_through(self, type_name):
        assert apply_type_adapters(type_name) == type_name

    def test_none_passes_through(self):
        assert apply_type_adapters(None) is None

    def test_adapter_table_is_read_only(self):
        with pytest.raises(TypeError):
            TYPE_ADAPTERS["text"] = "varchar"


class TestMergeTypeShorthands:
    """Test layering caller shorthands over the built-ins."""

    def test_builtin_id_shorthand(self):
        merged = merge_type_shorthands()
        assert merged["id"] == ColumnOptions(type="serial", primary_key=True)

    def test_caller_entry_replaces_builtin(self):
        merged = merge_type_shorthands({"id": {"type": "uuid"}})

        assert merged["id"].type == "uuid"
        assert merged["id"].primary_key is False
        assert DEFAULT_TYPE_SHORTHANDS["id"].type == "serial"

    def test_caller_entries_are_added(self):
        merged = merge_type_shorthands({"email": {"type": "text", "unique": True}})

        assert set(merged) == {"id", "email"}
        assert merged["email"].unique is True

    def test_merged_table_is_read_only(self):
        merged = merge_type_shorthands()
        with pytest.raises(TypeError):
            merged["other"] = ColumnOptions(type="text")

    def test_invalid_shorthand_raises(self):
        with pytest.raises(ValidationError):
            merge_type_shorthands({"flag": {"type": "bool", "notNull": "sometimes"}})
