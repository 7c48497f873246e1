"""File-backed snapshot sources implementing the federation ports."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from fedsync.domain.delta import DuplicateResourceIdError, index_by_id

from .schema import SnapshotDocument
from .translator import SnapshotError, to_local_resource, to_remote_resource

if TYPE_CHECKING:
    from pathlib import Path

    from fedsync.domain.model import FederationConfig, LocalResource, RemoteResource, ResourceId

log = getLogger(__name__)


def load_snapshot(path: Path) -> SnapshotDocument:
    """Read and validate the snapshot stored at ``path``."""

    try:
        return SnapshotDocument.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc
    except ValueError as exc:
        raise SnapshotError(f"Invalid snapshot {path}: {exc}") from exc


@dataclass(frozen=True, slots=True)
class JsonSnapshotRemoteFetcher:
    path: Path

    def __call__(self, config: FederationConfig) -> dict[ResourceId, RemoteResource]:
        document = load_snapshot(self.path)
        try:
            resources = index_by_id(to_remote_resource(item) for item in document.resources)
        except DuplicateResourceIdError as exc:
            raise SnapshotError(f"Invalid snapshot {self.path}: {exc}") from exc
        log.debug(
            "Loaded %s remote resources for %s from %s",
            len(resources),
            config.federation_id,
            self.path,
        )
        return resources


@dataclass(frozen=True, slots=True)
class JsonSnapshotLocalReader:
    path: Path

    def __call__(self, config: FederationConfig) -> dict[ResourceId, LocalResource]:
        document = load_snapshot(self.path)
        try:
            resources = index_by_id(to_local_resource(item) for item in document.resources)
        except DuplicateResourceIdError as exc:
            raise SnapshotError(f"Invalid snapshot {self.path}: {exc}") from exc
        log.debug(
            "Loaded %s local resources for %s from %s",
            len(resources),
            config.federation_id,
            self.path,
        )
        return resources
