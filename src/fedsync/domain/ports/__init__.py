"""Domain port definitions for adapters."""

from __future__ import annotations

from .federation import FederationConfigStore, LocalResourceReader, RemoteResourceFetcher

__all__ = [
    "FederationConfigStore",
    "LocalResourceReader",
    "RemoteResourceFetcher",
]
