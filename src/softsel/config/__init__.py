"""Application configuration helpers."""

from __future__ import annotations

from .env import env_value
from .errors import ConfigurationError, InvalidConfigurationError
from .language import DEFAULT_LANGUAGE, get_language
from .logging import configure_logging
from .patterns import PatternConfig, get_pattern_config, split_pattern_list
from .storage import (
    DatabaseConfig,
    StorageConfig,
    get_database_config,
    get_storage_config,
    parse_database_uri,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "ConfigurationError",
    "DatabaseConfig",
    "InvalidConfigurationError",
    "PatternConfig",
    "StorageConfig",
    "configure_logging",
    "env_value",
    "get_database_config",
    "get_language",
    "get_pattern_config",
    "get_storage_config",
    "parse_database_uri",
    "split_pattern_list",
]
