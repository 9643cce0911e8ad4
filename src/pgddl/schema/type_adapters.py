"""
Type adapters and built-in type shorthands.

Adapters rename portable type names to PostgreSQL keywords. Shorthands
expand a short column alias into a full option record.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from ..models import ColumnOptions, to_column_options


TYPE_ADAPTERS: Mapping[str, str] = MappingProxyType({
    "int": "integer",
    "string": "text",
    "float": "real",
    "double": "double precision",
    "datetime": "timestamp",
    "bool": "boolean",
})

DEFAULT_TYPE_SHORTHANDS: Mapping[str, ColumnOptions] = MappingProxyType({
    # serial primary key
    "id": ColumnOptions(type="serial", primary_key=True),
})


def apply_type_adapters(type_name: Optional[str]) -> Optional[str]:
    """
    Resolve a type name to its PostgreSQL keyword.

    Unknown names (native types, sized types like varchar(40), custom types)
    are returned unchanged.
    """
    if type_name is None:
        return None
    return TYPE_ADAPTERS.get(type_name, type_name)


def merge_type_shorthands(
    custom: Optional[Mapping[str, Union[ColumnOptions, Mapping[str, Any]]]] = None,
) -> Mapping[str, ColumnOptions]:
    """Layer caller shorthands over the built-ins; caller entries win."""
    merged = dict(DEFAULT_TYPE_SHORTHANDS)
    for name, options in (custom or {}).items():
        merged[name] = to_column_options(options)
    return MappingProxyType(merged)
