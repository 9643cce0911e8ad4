"""
DDL generation package for pgddl.

This package provides:
- Type adapters and column shorthands
- Column compilation with composite primary key handling
- Table, column, constraint and type statement builders
- Inverse operation registry and migration builder
"""

from .type_adapters import TYPE_ADAPTERS, DEFAULT_TYPE_SHORTHANDS, apply_type_adapters
from .columns import ColumnCompiler, parse_columns
from .tables import (
    create_table,
    drop_table,
    add_columns,
    drop_columns,
    alter_column,
    rename_table,
    rename_column,
    add_constraint,
    drop_constraint,
)
from .custom_types import create_type, drop_type, alter_type
from .operations import (
    ChangeType,
    BUILDERS,
    INVERSE_OPERATIONS,
    SchemaChange,
    MigrationBuilder,
    build_statement,
    reverse_statement,
    is_reversible,
)

__all__ = [
    "TYPE_ADAPTERS",
    "DEFAULT_TYPE_SHORTHANDS",
    "apply_type_adapters",
    "ColumnCompiler",
    "parse_columns",
    "create_table",
    "drop_table",
    "add_columns",
    "drop_columns",
    "alter_column",
    "rename_table",
    "rename_column",
    "add_constraint",
    "drop_constraint",
    "create_type",
    "drop_type",
    "alter_type",
    "ChangeType",
    "BUILDERS",
    "INVERSE_OPERATIONS",
    "SchemaChange",
    "MigrationBuilder",
    "build_statement",
    "reverse_statement",
    "is_reversible",
]
