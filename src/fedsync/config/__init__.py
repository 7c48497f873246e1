"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_positive_int, optional_env_str, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging, resolve_log_level
from .query import QueryConfig, get_query_config
from .storage import DatabaseConfig, get_database_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "QueryConfig",
    "configure_logging",
    "get_database_config",
    "get_query_config",
    "optional_env_positive_int",
    "optional_env_str",
    "require_env_vars",
    "resolve_log_level",
]
