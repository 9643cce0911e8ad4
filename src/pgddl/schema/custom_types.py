"""
Enum and composite type statement builders.
"""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from ..exceptions import UnsupportedOperationError
from ..literals import Identifier, escape_string, quote_identifier
from ..models import ColumnSet
from .columns import ColumnCompiler
from .tables import clause_list


logger = logging.getLogger(__name__)


def create_type(
    type_name: Identifier,
    options: Union[Sequence[str], ColumnSet],
    type_shorthands: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Build CREATE TYPE.

    A sequence of labels creates an enum type; a column set creates a
    composite type whose attributes are compiled like table columns.
    """
    if isinstance(options, Mapping):
        fragments = ColumnCompiler(type_shorthands).compile(options, type_name)
        attributes = clause_list("", fragments)
        sql = f"CREATE TYPE {quote_identifier(type_name)} AS (\n{attributes}\n);"
    else:
        if isinstance(options, str):
            options = [options]
        labels = ", ".join(escape_string(str(label)) for label in options)
        sql = f"CREATE TYPE {quote_identifier(type_name)} AS ENUM ({labels});"

    logger.debug(f"Generated: {sql}")
    return sql


def drop_type(type_name: Identifier) -> str:
    """Build DROP TYPE."""
    sql = f"DROP TYPE {quote_identifier(type_name)};"
    logger.debug(f"Generated: {sql}")
    return sql


def alter_type(*args: Any, **kwargs: Any) -> str:
    """Altering types is not supported; always raises."""
    raise UnsupportedOperationError("alter_type")
