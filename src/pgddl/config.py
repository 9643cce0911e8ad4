"""
Configuration system for pgddl using Pydantic.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, ConfigDict
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError
from .models import ColumnOptions


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", description="Log level"
    )
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    file: Optional[str] = Field(None, description="Log file path")
    max_size: int = Field(10485760, description="Max log file size in bytes")  # 10MB
    backup_count: int = Field(5, description="Number of backup log files")

    def configure(self, logger_name: str = "pgddl") -> logging.Logger:
        """Attach a handler built from this configuration to the package logger."""
        logger = logging.getLogger(logger_name)

        if self.file:
            handler: logging.Handler = RotatingFileHandler(
                self.file, maxBytes=self.max_size, backupCount=self.backup_count
            )
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(self.format))

        for existing in list(logger.handlers):
            logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(self.level)
        return logger


class PgDDLConfig(BaseSettings):
    """Main pgddl configuration."""

    type_shorthands: Dict[str, ColumnOptions] = Field(
        default_factory=dict,
        description="Column shorthands layered over the built-in ones",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = ConfigDict(
        env_file=".env",
        env_prefix="PGDDL_",
        case_sensitive=False,
        extra="ignore"
    )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "PgDDLConfig":
        """Load configuration from a YAML file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

            # Expand environment variables in the data
            data = cls._expand_env_vars(data)

            return cls(**data)
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}")
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    @classmethod
    def _expand_env_vars(cls, data: Any) -> Any:
        """Recursively expand environment variables in configuration data."""
        if isinstance(data, dict):
            return {k: cls._expand_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [cls._expand_env_vars(item) for item in data]
        elif isinstance(data, str):
            return os.path.expandvars(data)
        else:
            return data

    def get_type_shorthand(self, name: str) -> ColumnOptions:
        """Get a configured type shorthand by name."""
        if name not in self.type_shorthands:
            raise ConfigurationError(f"Type shorthand '{name}' not found")
        return self.type_shorthands[name]

    def validate_config(self) -> None:
        """Validate the entire configuration for consistency."""
        for name, options in self.type_shorthands.items():
            if not options.type:
                raise ConfigurationError(
                    f"Type shorthand '{name}' does not declare a column type"
                )

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to a YAML file."""
        data = {
            "type_shorthands": {
                name: options.model_dump(by_alias=True, exclude_unset=True)
                for name, options in self.type_shorthands.items()
            },
            "logging": self.logging.model_dump(exclude_none=True),
        }
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, indent=2)
