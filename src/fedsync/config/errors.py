"""Errors raised while loading fedsync settings from the environment."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when a setting is present but unusable (bad page size, unknown log level)."""


class MissingConfigurationError(ConfigurationError):
    """Raised when a required setting such as ``DATABASE_URI`` is unset or blank."""
