"""Translate snapshot payloads into domain resources."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fedsync.domain.model import LocalResource, RemoteResource

if TYPE_CHECKING:
    from .schema import ResourcePayload


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be read or violates the snapshot schema."""


def to_remote_resource(payload: ResourcePayload) -> RemoteResource:
    if payload.updated_at is None:
        raise SnapshotError(f"Remote resource {payload.id!r} has no updatedAt")
    return RemoteResource(
        id=payload.id,
        updated_at=payload.updated_at,
        kind=payload.kind,
        payload=payload.attributes,
    )


def to_local_resource(payload: ResourcePayload) -> LocalResource:
    return LocalResource(
        id=payload.id,
        updated_at=payload.updated_at,
        kind=payload.kind,
        tenant_id=payload.tenant_id,
        payload=payload.attributes,
    )
