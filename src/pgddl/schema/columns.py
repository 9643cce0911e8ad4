"""
Column compilation for pgddl.

Turns a column set (column name -> shorthand string or option record) into
column definition fragments. A single primary-key column is rendered with an
inline PRIMARY KEY; two or more become one table-level
``CONSTRAINT "<table>_pkey" PRIMARY KEY (...)`` appended after the columns.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from ..literals import Identifier, escape_value, object_name, quote_identifier
from ..models import ColumnOptions, ColumnSet, ColumnSpec, to_column_options
from .type_adapters import apply_type_adapters, merge_type_shorthands


logger = logging.getLogger(__name__)


class ColumnCompiler:
    """Compiles column sets into DDL fragments using a fixed shorthand table."""

    def __init__(
        self,
        type_shorthands: Optional[Mapping[str, Union[ColumnOptions, Mapping[str, Any]]]] = None,
    ):
        self.type_shorthands = merge_type_shorthands(type_shorthands)

    def expand(self, spec: ColumnSpec) -> ColumnOptions:
        """
        Expand a column spec into a full option record.

        Strings are looked up in the shorthand table and otherwise taken as
        a type name. The record's type is resolved through the type adapters.
        """
        if isinstance(spec, str):
            shorthand = self.type_shorthands.get(spec)
            options = shorthand if shorthand is not None else ColumnOptions(type=spec)
        else:
            options = to_column_options(spec)

        return options.model_copy(update={"type": apply_type_adapters(options.type)})

    def expand_columns(self, columns: ColumnSet) -> Dict[str, ColumnOptions]:
        """Expand every column of a column set, preserving order."""
        return {name: self.expand(spec) for name, spec in columns.items()}

    @staticmethod
    def primary_key_columns(expanded: Mapping[str, ColumnOptions]) -> List[str]:
        """Names of the columns declaring primary_key, in column order."""
        return [name for name, options in expanded.items() if options.primary_key]

    def column_definition(
        self,
        column_name: str,
        options: ColumnOptions,
        inline_primary_key: bool = True,
    ) -> str:
        """Render one column definition from an expanded option record."""
        parts = [quote_identifier(column_name)]
        if options.type:
            parts.append(options.type)
        if options.has_default:
            parts.append(f"DEFAULT {escape_value(options.default)}")

        if options.unique:
            parts.append("UNIQUE")
        if options.primary_key and inline_primary_key:
            parts.append("PRIMARY KEY")
        if options.not_null:
            parts.append("NOT NULL")
        if options.check:
            parts.append(f"CHECK ({options.check})")
        if options.references:
            parts.append(f"REFERENCES {options.references}")
            if options.on_delete:
                parts.append(f"ON DELETE {options.on_delete}")
            if options.on_update:
                parts.append(f"ON UPDATE {options.on_update}")

        return " ".join(parts)

    def compile(self, columns: ColumnSet, table_name: Identifier) -> List[str]:
        """
        Compile a column set into ordered DDL fragments.

        Args:
            columns: Mapping of column name to shorthand or option record
            table_name: Owning table, used to name a composite primary key

        Returns:
            One fragment per column, followed by the composite primary key
            constraint when more than one column is a primary key
        """
        expanded = self.expand_columns(columns)
        primary_columns = self.primary_key_columns(expanded)
        composite_key = len(primary_columns) > 1

        fragments = [
            self.column_definition(name, options, inline_primary_key=not composite_key)
            for name, options in expanded.items()
        ]

        if composite_key:
            constraint_name = quote_identifier(f"{object_name(table_name)}_pkey")
            key_columns = ", ".join(quote_identifier(name) for name in primary_columns)
            fragments.append(f"CONSTRAINT {constraint_name} PRIMARY KEY ({key_columns})")
            logger.debug(f"Composite primary key on {object_name(table_name)}: {primary_columns}")

        return fragments


def parse_columns(
    columns: ColumnSet,
    table_name: Identifier,
    type_shorthands: Optional[Mapping[str, Any]] = None,
) -> str:
    """Compile a column set and join the fragments one per line."""
    return ",\n".join(ColumnCompiler(type_shorthands).compile(columns, table_name))
