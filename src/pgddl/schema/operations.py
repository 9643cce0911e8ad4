"""
Schema operations and their inverses.

Provides a static registry pairing every reversible statement builder with
the function that builds its inverse, and a MigrationBuilder that records
forward statements together with their rollback statements.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from ..config import PgDDLConfig
from ..exceptions import IrreversibleOperationError
from ..literals import Identifier, object_name
from ..models import AlterColumnOptions, ColumnSet
from .custom_types import alter_type, create_type, drop_type
from .tables import (
    add_columns,
    add_constraint,
    alter_column,
    create_table,
    drop_columns,
    drop_constraint,
    drop_table,
    rename_column,
    rename_table,
)


logger = logging.getLogger(__name__)


class ChangeType(str, Enum):
    """Kinds of schema changes."""

    CREATE_TABLE = "create_table"
    DROP_TABLE = "drop_table"
    ADD_COLUMNS = "add_columns"
    DROP_COLUMNS = "drop_columns"
    ALTER_COLUMN = "alter_column"
    RENAME_TABLE = "rename_table"
    RENAME_COLUMN = "rename_column"
    ADD_CONSTRAINT = "add_constraint"
    DROP_CONSTRAINT = "drop_constraint"
    CREATE_TYPE = "create_type"
    DROP_TYPE = "drop_type"
    ALTER_TYPE = "alter_type"


BUILDERS: Mapping[ChangeType, Callable[..., str]] = MappingProxyType({
    ChangeType.CREATE_TABLE: create_table,
    ChangeType.DROP_TABLE: drop_table,
    ChangeType.ADD_COLUMNS: add_columns,
    ChangeType.DROP_COLUMNS: drop_columns,
    ChangeType.ALTER_COLUMN: alter_column,
    ChangeType.RENAME_TABLE: rename_table,
    ChangeType.RENAME_COLUMN: rename_column,
    ChangeType.ADD_CONSTRAINT: add_constraint,
    ChangeType.DROP_CONSTRAINT: drop_constraint,
    ChangeType.CREATE_TYPE: create_type,
    ChangeType.DROP_TYPE: drop_type,
    ChangeType.ALTER_TYPE: alter_type,
})


# Inverse constructors take the forward builder's arguments

def _reverse_create_table(table_name: Identifier, *args: Any, **kwargs: Any) -> str:
    return drop_table(table_name)


def _reverse_drop_table(
    table_name: Identifier,
    columns: Optional[ColumnSet] = None,
    inherits: Optional[Identifier] = None,
    type_shorthands: Optional[Mapping[str, Any]] = None,
) -> str:
    if not columns:
        raise IrreversibleOperationError(
            ChangeType.DROP_TABLE.value,
            "the original columns are required to recreate the table",
            {"table": object_name(table_name)},
        )
    return create_table(table_name, columns, inherits=inherits, type_shorthands=type_shorthands)


def _reverse_add_columns(
    table_name: Identifier,
    columns: ColumnSet,
    type_shorthands: Optional[Mapping[str, Any]] = None,
) -> str:
    return drop_columns(table_name, list(columns.keys()))


def _reverse_drop_columns(
    table_name: Identifier,
    columns: Union[str, Sequence[str], ColumnSet],
    type_shorthands: Optional[Mapping[str, Any]] = None,
) -> str:
    if not isinstance(columns, Mapping):
        raise IrreversibleOperationError(
            ChangeType.DROP_COLUMNS.value,
            "column definitions are required to add the columns back",
            {"table": object_name(table_name)},
        )
    return add_columns(table_name, columns, type_shorthands=type_shorthands)


def _reverse_rename_table(table_name: Identifier, new_name: Identifier) -> str:
    return rename_table(new_name, table_name)


def _reverse_rename_column(table_name: Identifier, column_name: str, new_name: str) -> str:
    return rename_column(table_name, new_name, column_name)


def _reverse_add_constraint(
    table_name: Identifier,
    constraint_name: Optional[str],
    expression: str = "",
) -> str:
    if not constraint_name:
        raise IrreversibleOperationError(
            ChangeType.ADD_CONSTRAINT.value,
            "unnamed constraints cannot be dropped by name",
            {"table": object_name(table_name), "expression": expression},
        )
    return drop_constraint(table_name, constraint_name)


def _reverse_create_type(type_name: Identifier, *args: Any, **kwargs: Any) -> str:
    return drop_type(type_name)


INVERSE_OPERATIONS: Mapping[ChangeType, Callable[..., str]] = MappingProxyType({
    ChangeType.CREATE_TABLE: _reverse_create_table,
    ChangeType.DROP_TABLE: _reverse_drop_table,
    ChangeType.ADD_COLUMNS: _reverse_add_columns,
    ChangeType.DROP_COLUMNS: _reverse_drop_columns,
    ChangeType.RENAME_TABLE: _reverse_rename_table,
    ChangeType.RENAME_COLUMN: _reverse_rename_column,
    ChangeType.ADD_CONSTRAINT: _reverse_add_constraint,
    ChangeType.CREATE_TYPE: _reverse_create_type,
})


def build_statement(change_type: Union[ChangeType, str], *args: Any, **kwargs: Any) -> str:
    """Build the forward statement for a change type."""
    return BUILDERS[ChangeType(change_type)](*args, **kwargs)


def reverse_statement(change_type: Union[ChangeType, str], *args: Any, **kwargs: Any) -> str:
    """
    Build the statement undoing a change, given the forward arguments.

    Raises:
        IrreversibleOperationError: If the change type has no inverse or the
            arguments do not carry enough information to build one
    """
    change_type = ChangeType(change_type)
    inverse = INVERSE_OPERATIONS.get(change_type)
    if inverse is None:
        raise IrreversibleOperationError(change_type.value, "no inverse operation is registered")
    return inverse(*args, **kwargs)


def is_reversible(change_type: Union[ChangeType, str]) -> bool:
    """Check whether a change type has a registered inverse."""
    return ChangeType(change_type) in INVERSE_OPERATIONS


@dataclass
class SchemaChange:
    """A recorded schema change with its rollback statement."""

    change_type: ChangeType
    target: Identifier
    description: str
    sql: str
    rollback_sql: Optional[str] = None
    is_destructive: bool = False

    @property
    def can_rollback(self) -> bool:
        """Check if this change can be rolled back."""
        return self.rollback_sql is not None and len(self.rollback_sql.strip()) > 0

    @property
    def change_id(self) -> str:
        """Get identifier for this change."""
        return f"{self.change_type.value}_{object_name(self.target)}"


class MigrationBuilder:
    """Records schema changes and produces up and down statement lists."""

    def __init__(self, config: Optional[PgDDLConfig] = None):
        self.config = config or PgDDLConfig()
        self.type_shorthands = dict(self.config.type_shorthands)
        self._changes: List[SchemaChange] = []

    @property
    def changes(self) -> List[SchemaChange]:
        return list(self._changes)

    def _record(
        self,
        change_type: ChangeType,
        target: Identifier,
        description: str,
        args: Sequence[Any],
        kwargs: Optional[Dict[str, Any]] = None,
        reverse_kwargs: Optional[Dict[str, Any]] = None,
        is_destructive: bool = False,
    ) -> SchemaChange:
        kwargs = kwargs or {}
        sql = build_statement(change_type, *args, **kwargs)

        try:
            rollback_sql = reverse_statement(
                change_type, *args, **(kwargs if reverse_kwargs is None else reverse_kwargs)
            )
        except IrreversibleOperationError as e:
            logger.debug(f"No rollback for {change_type.value} on {object_name(target)}: {e.reason}")
            rollback_sql = None

        change = SchemaChange(
            change_type=change_type,
            target=target,
            description=description,
            sql=sql,
            rollback_sql=rollback_sql,
            is_destructive=is_destructive,
        )
        self._changes.append(change)
        logger.info(f"Recorded {change.change_id}")
        return change

    def create_table(
        self,
        table_name: Identifier,
        columns: ColumnSet,
        inherits: Optional[Identifier] = None,
    ) -> SchemaChange:
        """Create a table."""
        return self._record(
            ChangeType.CREATE_TABLE,
            table_name,
            f"Create table {object_name(table_name)}",
            (table_name, columns),
            {"inherits": inherits, "type_shorthands": self.type_shorthands},
        )

    def drop_table(
        self,
        table_name: Identifier,
        columns: Optional[ColumnSet] = None,
        inherits: Optional[Identifier] = None,
    ) -> SchemaChange:
        """
        Drop a table.

        Passing the table's original columns makes the drop reversible.
        """
        return self._record(
            ChangeType.DROP_TABLE,
            table_name,
            f"Drop table {object_name(table_name)}",
            (table_name,),
            reverse_kwargs={
                "columns": columns,
                "inherits": inherits,
                "type_shorthands": self.type_shorthands,
            },
            is_destructive=True,
        )

    def add_columns(self, table_name: Identifier, columns: ColumnSet) -> SchemaChange:
        """Add columns to a table."""
        return self._record(
            ChangeType.ADD_COLUMNS,
            table_name,
            f"Add columns {', '.join(columns)} to {object_name(table_name)}",
            (table_name, columns),
            {"type_shorthands": self.type_shorthands},
        )

    def drop_columns(
        self,
        table_name: Identifier,
        columns: Union[str, Sequence[str], ColumnSet],
    ) -> SchemaChange:
        """Drop columns; a full column set makes the drop reversible."""
        names = [columns] if isinstance(columns, str) else list(columns)
        return self._record(
            ChangeType.DROP_COLUMNS,
            table_name,
            f"Drop columns {', '.join(names)} from {object_name(table_name)}",
            (table_name, columns),
            reverse_kwargs={"type_shorthands": self.type_shorthands},
            is_destructive=True,
        )

    def alter_column(
        self,
        table_name: Identifier,
        column_name: str,
        options: Union[AlterColumnOptions, Mapping[str, Any]],
    ) -> SchemaChange:
        """Alter a column's default, type or nullability."""
        return self._record(
            ChangeType.ALTER_COLUMN,
            table_name,
            f"Alter column {column_name} on {object_name(table_name)}",
            (table_name, column_name, options),
        )

    def rename_table(self, table_name: Identifier, new_name: Identifier) -> SchemaChange:
        """Rename a table."""
        return self._record(
            ChangeType.RENAME_TABLE,
            table_name,
            f"Rename table {object_name(table_name)} to {object_name(new_name)}",
            (table_name, new_name),
        )

    def rename_column(
        self,
        table_name: Identifier,
        column_name: str,
        new_name: str,
    ) -> SchemaChange:
        """Rename a column."""
        return self._record(
            ChangeType.RENAME_COLUMN,
            table_name,
            f"Rename column {column_name} to {new_name} on {object_name(table_name)}",
            (table_name, column_name, new_name),
        )

    def add_constraint(
        self,
        table_name: Identifier,
        constraint_name: Optional[str],
        expression: str,
    ) -> SchemaChange:
        """Add a table constraint; only named constraints can be rolled back."""
        return self._record(
            ChangeType.ADD_CONSTRAINT,
            table_name,
            f"Add constraint {constraint_name or expression} to {object_name(table_name)}",
            (table_name, constraint_name, expression),
        )

    def drop_constraint(self, table_name: Identifier, constraint_name: str) -> SchemaChange:
        """Drop a named constraint."""
        return self._record(
            ChangeType.DROP_CONSTRAINT,
            table_name,
            f"Drop constraint {constraint_name} from {object_name(table_name)}",
            (table_name, constraint_name),
            is_destructive=True,
        )

    def create_type(
        self,
        type_name: Identifier,
        options: Union[Sequence[str], ColumnSet],
    ) -> SchemaChange:
        """Create an enum or composite type."""
        return self._record(
            ChangeType.CREATE_TYPE,
            type_name,
            f"Create type {object_name(type_name)}",
            (type_name, options),
            {"type_shorthands": self.type_shorthands},
        )

    def drop_type(self, type_name: Identifier) -> SchemaChange:
        """Drop a type."""
        return self._record(
            ChangeType.DROP_TYPE,
            type_name,
            f"Drop type {object_name(type_name)}",
            (type_name,),
            is_destructive=True,
        )

    def alter_type(self, type_name: Identifier, *args: Any, **kwargs: Any) -> SchemaChange:
        """Not supported; raises UnsupportedOperationError."""
        return self._record(
            ChangeType.ALTER_TYPE,
            type_name,
            f"Alter type {object_name(type_name)}",
            (type_name,) + args,
            kwargs,
        )

    def up_statements(self) -> List[str]:
        """Forward statements in recording order."""
        return [change.sql for change in self._changes]

    def down_statements(self) -> List[str]:
        """
        Rollback statements in reverse recording order.

        Raises:
            IrreversibleOperationError: If any recorded change has no rollback
        """
        statements = []
        for change in reversed(self._changes):
            if not change.can_rollback:
                raise IrreversibleOperationError(
                    change.change_type.value,
                    f"{change.description} has no rollback statement",
                    {"change_id": change.change_id},
                )
            statements.append(change.rollback_sql)
        return statements

    def summary(self) -> Dict[str, Any]:
        """Get summary of recorded changes."""
        total = len(self._changes)
        reversible = sum(1 for c in self._changes if c.can_rollback)

        return {
            "total_changes": total,
            "reversible": reversible,
            "irreversible": total - reversible,
            "destructive": sum(1 for c in self._changes if c.is_destructive),
            "irreversible_changes": [
                {
                    "change_id": c.change_id,
                    "change_type": c.change_type.value,
                    "description": c.description,
                }
                for c in self._changes if not c.can_rollback
            ],
        }
