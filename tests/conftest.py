"""
Pytest configuration and shared fixtures for pgddl tests.

This module provides shared column sets, shorthands and configuration files
used across the pgddl test suite.
"""

import logging
from typing import Any, Dict

import pytest
import yaml

from pgddl.config import PgDDLConfig


# ============================================================================
# Column Set Fixtures
# ============================================================================

@pytest.fixture
def users_columns() -> Dict[str, Any]:
    """Simple users table with a single serial primary key."""
    return {
        "id": "id",
        "name": {"type": "string", "notNull": True},
    }


@pytest.fixture
def composite_key_columns() -> Dict[str, Any]:
    """Join table with a two-column primary key."""
    return {
        "user_id": {"type": "int", "primaryKey": True, "references": "users"},
        "group_id": {"type": "int", "primaryKey": True, "references": "groups"},
        "role": "string",
    }


@pytest.fixture
def custom_shorthands() -> Dict[str, Dict[str, Any]]:
    """Caller shorthands, including one overriding the built-in id."""
    return {
        "id": {"type": "uuid", "primaryKey": True, "default": None},
        "created_at": {"type": "datetime", "notNull": True},
    }


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def sample_config_data() -> Dict[str, Any]:
    """Raw configuration data as it would appear in YAML."""
    return {
        "type_shorthands": {
            "uuid_pk": {"type": "uuid", "primaryKey": True},
            "money": {"type": "numeric(12, 2)", "notNull": True, "default": 0},
        },
        "logging": {"level": "DEBUG"},
    }


@pytest.fixture
def sample_config(sample_config_data) -> PgDDLConfig:
    """Complete pgddl configuration for testing."""
    return PgDDLConfig(**sample_config_data)


@pytest.fixture
def temp_config_file(tmp_path, sample_config_data) -> str:
    """Temporary configuration file for testing."""
    path = tmp_path / "pgddl.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config_data, f)
    return str(path)


@pytest.fixture
def clean_pgddl_logger():
    """Restore the package logger after a test reconfigures it."""
    logger = logging.getLogger("pgddl")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
