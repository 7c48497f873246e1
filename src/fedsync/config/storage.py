"""Local mirror database configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def get_database_config() -> DatabaseConfig:
    values = require_env_vars(("DATABASE_URI",))
    return DatabaseConfig(uri=values["DATABASE_URI"])
