"""
pgddl: PostgreSQL DDL statement generation for schema migrations.

pgddl turns declarative descriptions of tables, columns, constraints and
types into literal PostgreSQL DDL statements, and pairs reversible
operations with the statements that undo them.
"""

__version__ = "0.1.0"
__author__ = "pgddl Contributors"

from .config import PgDDLConfig, LoggingConfig
from .exceptions import (
    PgDDLError,
    ConfigurationError,
    ValidationError,
    SchemaError,
    UnsupportedOperationError,
    IrreversibleOperationError,
)
from .literals import PgLiteral, QualifiedName, escape_value, quote_identifier
from .models import ColumnOptions, AlterColumnOptions

__all__ = [
    "__version__",
    "PgDDLConfig",
    "LoggingConfig",
    "PgDDLError",
    "ConfigurationError",
    "ValidationError",
    "SchemaError",
    "UnsupportedOperationError",
    "IrreversibleOperationError",
    "PgLiteral",
    "QualifiedName",
    "escape_value",
    "quote_identifier",
    "ColumnOptions",
    "AlterColumnOptions",
]
