"""
Table, column and constraint statement builders.

Each builder returns a single PostgreSQL statement terminated by a
semicolon. Column and clause lists are written one per line with two-space
indentation so generated migrations diff cleanly.
"""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from ..exceptions import ValidationError
from ..literals import Identifier, escape_value, quote_identifier
from ..models import AlterColumnOptions, ColumnSet, to_alter_options
from .columns import ColumnCompiler
from .type_adapters import apply_type_adapters


logger = logging.getLogger(__name__)

INDENT = "  "


def clause_list(prefix: str, clauses: Sequence[str]) -> str:
    """Indent each clause, prefix it and join them one per line."""
    return ",\n".join(f"{INDENT}{prefix}{clause}" for clause in clauses)


def create_table(
    table_name: Identifier,
    columns: ColumnSet,
    inherits: Optional[Identifier] = None,
    type_shorthands: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Build CREATE TABLE.

    Args:
        table_name: Table to create
        columns: Mapping of column name to shorthand or option record
        inherits: Optional parent table
        type_shorthands: Extra shorthands layered over the built-ins
    """
    fragments = ColumnCompiler(type_shorthands).compile(columns, table_name)
    columns_sql = clause_list("", fragments)
    inherits_sql = f" INHERITS ({quote_identifier(inherits)})" if inherits else ""

    sql = f"CREATE TABLE {quote_identifier(table_name)} (\n{columns_sql}\n){inherits_sql};"
    logger.debug(f"Generated: {sql}")
    return sql


def drop_table(table_name: Identifier) -> str:
    """Build DROP TABLE."""
    sql = f"DROP TABLE {quote_identifier(table_name)};"
    logger.debug(f"Generated: {sql}")
    return sql


def add_columns(
    table_name: Identifier,
    columns: ColumnSet,
    type_shorthands: Optional[Mapping[str, Any]] = None,
) -> str:
    """Build ALTER TABLE ... ADD for every column of a column set."""
    fragments = ColumnCompiler(type_shorthands).compile(columns, table_name)

    sql = f"ALTER TABLE {quote_identifier(table_name)}\n{clause_list('ADD ', fragments)};"
    logger.debug(f"Generated: {sql}")
    return sql


def drop_columns(
    table_name: Identifier,
    columns: Union[str, Sequence[str], ColumnSet],
) -> str:
    """
    Build ALTER TABLE ... DROP.

    ``columns`` is a single name, a sequence of names or a column set, in
    which case only its keys are used.
    """
    if isinstance(columns, str):
        names = [columns]
    elif isinstance(columns, Mapping):
        names = list(columns.keys())
    else:
        names = list(columns)

    if not names:
        raise ValidationError(f"No columns given to drop from {quote_identifier(table_name)}")

    quoted = [quote_identifier(name) for name in names]
    sql = f"ALTER TABLE {quote_identifier(table_name)}\n{clause_list('DROP ', quoted)};"
    logger.debug(f"Generated: {sql}")
    return sql


def alter_column(
    table_name: Identifier,
    column_name: str,
    options: Union[AlterColumnOptions, Mapping[str, Any]],
) -> str:
    """
    Build ALTER TABLE ... ALTER for one column.

    Clauses are emitted in a fixed order: default (a None default drops
    it), data type, then nullability.
    """
    options = to_alter_options(options)
    actions = []

    if options.has_default:
        if options.default is None:
            actions.append("DROP DEFAULT")
        else:
            actions.append(f"SET DEFAULT {escape_value(options.default)}")

    if options.type:
        actions.append(f"SET DATA TYPE {apply_type_adapters(options.type)}")

    if options.not_null:
        actions.append("SET NOT NULL")
    elif options.not_null is False or options.allow_null:
        actions.append("DROP NOT NULL")

    if not actions:
        raise ValidationError(
            f"Nothing to alter for column {quote_identifier(column_name)}",
            {"table": str(table_name)},
        )

    prefix = f"ALTER {quote_identifier(column_name)} "
    sql = f"ALTER TABLE {quote_identifier(table_name)}\n{clause_list(prefix, actions)};"
    logger.debug(f"Generated: {sql}")
    return sql


def rename_table(table_name: Identifier, new_name: Identifier) -> str:
    """Build ALTER TABLE ... RENAME TO."""
    sql = f"ALTER TABLE {quote_identifier(table_name)} RENAME TO {quote_identifier(new_name)};"
    logger.debug(f"Generated: {sql}")
    return sql


def rename_column(table_name: Identifier, column_name: str, new_name: str) -> str:
    """Build ALTER TABLE ... RENAME column TO."""
    sql = (
        f"ALTER TABLE {quote_identifier(table_name)} "
        f"RENAME {quote_identifier(column_name)} TO {quote_identifier(new_name)};"
    )
    logger.debug(f"Generated: {sql}")
    return sql


def add_constraint(
    table_name: Identifier,
    constraint_name: Optional[str],
    expression: str,
) -> str:
    """Build ALTER TABLE ... ADD [CONSTRAINT name] expression."""
    name_sql = f" CONSTRAINT {quote_identifier(constraint_name)}" if constraint_name else ""
    sql = f"ALTER TABLE {quote_identifier(table_name)} ADD{name_sql} {expression};"
    logger.debug(f"Generated: {sql}")
    return sql


def drop_constraint(table_name: Identifier, constraint_name: Optional[str]) -> str:
    """Build ALTER TABLE ... DROP CONSTRAINT; a constraint name is required."""
    if not constraint_name:
        raise ValidationError(
            "A constraint name is required to drop a constraint",
            {"table": str(table_name)},
        )
    sql = (
        f"ALTER TABLE {quote_identifier(table_name)} "
        f"DROP CONSTRAINT {quote_identifier(constraint_name)};"
    )
    logger.debug(f"Generated: {sql}")
    return sql
