"""
Column option records for pgddl.

Option records accept both snake_case field names and the camelCase keys
used by migration files (``primaryKey``, ``notNull``, ...).
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError


class ColumnOptions(BaseModel):
    """Full option record for a single column."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    type: Optional[str] = Field(None, description="Column type or type adapter name")
    default: Any = Field(None, description="Default value, rendered as a literal")
    unique: bool = Field(False, description="Add a UNIQUE constraint")
    primary_key: bool = Field(False, alias="primaryKey", description="Part of the primary key")
    not_null: bool = Field(False, alias="notNull", description="Add a NOT NULL constraint")
    check: Optional[str] = Field(None, description="Raw CHECK expression")
    references: Optional[str] = Field(None, description="Raw REFERENCES target")
    on_delete: Optional[str] = Field(None, alias="onDelete", description="ON DELETE action")
    on_update: Optional[str] = Field(None, alias="onUpdate", description="ON UPDATE action")

    @property
    def has_default(self) -> bool:
        """True when a default was supplied, including falsy values and None."""
        return "default" in self.model_fields_set


class AlterColumnOptions(BaseModel):
    """Partial option delta for ALTER COLUMN."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    type: Optional[str] = Field(None, description="New column type")
    default: Any = Field(None, description="New default; None drops the default")
    not_null: Optional[bool] = Field(None, alias="notNull", description="Nullability change")
    allow_null: bool = Field(False, alias="allowNull", description="Drop NOT NULL")

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set


# A column is a shorthand reference (str) or an option record
ColumnSpec = Union[str, ColumnOptions, Mapping[str, Any]]
ColumnSet = Mapping[str, ColumnSpec]


def to_column_options(options: Union[ColumnOptions, Mapping[str, Any], None]) -> ColumnOptions:
    """Validate an option record into ColumnOptions."""
    if isinstance(options, ColumnOptions):
        return options
    try:
        return ColumnOptions.model_validate(options or {})
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid column options: {e}", cause=e) from e


def to_alter_options(
    options: Union[AlterColumnOptions, Mapping[str, Any], None],
) -> AlterColumnOptions:
    """Validate an alter-column delta into AlterColumnOptions."""
    if isinstance(options, AlterColumnOptions):
        return options
    try:
        return AlterColumnOptions.model_validate(options or {})
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid alter column options: {e}", cause=e) from e
