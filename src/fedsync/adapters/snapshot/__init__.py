"""Public interface for the JSON snapshot adapter."""

from __future__ import annotations

from .fetcher import JsonSnapshotLocalReader, JsonSnapshotRemoteFetcher, load_snapshot
from .schema import DeltaReport, ResourcePayload, SnapshotDocument
from .translator import SnapshotError, to_local_resource, to_remote_resource

__all__ = [
    "DeltaReport",
    "JsonSnapshotLocalReader",
    "JsonSnapshotRemoteFetcher",
    "ResourcePayload",
    "SnapshotDocument",
    "SnapshotError",
    "load_snapshot",
    "to_local_resource",
    "to_remote_resource",
]
