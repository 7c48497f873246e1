"""Delta between a remote resource snapshot and the local mirror.

The delta drives the insert/update/delete phase of a federation sync:

- remote ids missing locally are inserted
- ids present on both sides are updated when the remote copy changed after the
  last successful sync of the federation
- local ids missing remotely are deleted

The sync cursor lives on the federation, not on each resource. A failed or skipped
sync therefore re-marks changed resources on the next run; update application is
expected to be idempotent.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from fedsync.domain.model import (
        EpochMillis,
        FederationConfig,
        Identifiable,
        ResourceId,
        Timestamped,
    )

log = getLogger(__name__)


class DuplicateResourceIdError(ValueError):
    """Raised when a resource collection contains the same id more than once."""


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceDelta[TRemote, TLocal]:
    """Pairwise disjoint id lists plus read-only views of the compared snapshots."""

    to_insert: tuple[ResourceId, ...]
    to_update: tuple[ResourceId, ...]
    to_delete: tuple[ResourceId, ...]
    remote: Mapping[ResourceId, TRemote]
    local: Mapping[ResourceId, TLocal]

    @property
    def is_empty(self) -> bool:
        return not (self.to_insert or self.to_update or self.to_delete)

    def inserted_resources(self) -> list[TRemote]:
        return [self.remote[resource_id] for resource_id in self.to_insert]

    def updated_resources(self) -> list[TRemote]:
        return [self.remote[resource_id] for resource_id in self.to_update]

    def deleted_resources(self) -> list[TLocal]:
        return [self.local[resource_id] for resource_id in self.to_delete]

    def summary(self) -> dict[str, int]:
        return {
            "insert": len(self.to_insert),
            "update": len(self.to_update),
            "delete": len(self.to_delete),
        }


def compute_delta[TRemote: Timestamped, TLocal](
    last_sync_time: EpochMillis | None,
    remote: Mapping[ResourceId, TRemote],
    local: Mapping[ResourceId, TLocal],
) -> ResourceDelta[TRemote, TLocal]:
    """Classify every id of ``remote`` and ``local`` into insert/update/delete.

    ``last_sync_time`` of ``None`` means the federation never synced and is treated as
    the epoch, so every remote resource present locally is an update. A resource is
    only updated when ``updated_at`` is strictly after the cursor.
    """

    threshold = last_sync_time if last_sync_time is not None else 0

    to_insert: list[ResourceId] = []
    to_update: list[ResourceId] = []
    for resource_id, resource in remote.items():
        if resource_id not in local:
            to_insert.append(resource_id)
        elif resource.updated_at > threshold:
            to_update.append(resource_id)

    to_delete = [resource_id for resource_id in local if resource_id not in remote]

    log.debug(
        "Computed delta since %s: insert=%s, update=%s, delete=%s (remote=%s, local=%s)",
        threshold,
        len(to_insert),
        len(to_update),
        len(to_delete),
        len(remote),
        len(local),
    )

    return ResourceDelta(
        to_insert=tuple(to_insert),
        to_update=tuple(to_update),
        to_delete=tuple(to_delete),
        remote=MappingProxyType(dict(remote)),
        local=MappingProxyType(dict(local)),
    )


def compute_federation_delta[TRemote: Timestamped, TLocal](
    config: FederationConfig,
    remote: Mapping[ResourceId, TRemote],
    local: Mapping[ResourceId, TLocal],
) -> ResourceDelta[TRemote, TLocal]:
    """Compute the delta using the sync cursor stored on ``config``."""

    return compute_delta(config.last_sync_millis, remote, local)


def index_by_id[TResource: Identifiable](
    resources: Iterable[TResource],
) -> dict[ResourceId, TResource]:
    """Key ``resources`` by id, keeping iteration order."""

    indexed: dict[ResourceId, TResource] = {}
    for resource in resources:
        if resource.id in indexed:
            raise DuplicateResourceIdError(f"Duplicate resource id: {resource.id}")
        indexed[resource.id] = resource
    return indexed


__all__ = [
    "DuplicateResourceIdError",
    "ResourceDelta",
    "compute_delta",
    "compute_federation_delta",
    "index_by_id",
]
