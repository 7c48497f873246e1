"""Ports for the collaborators a federation sync reads from."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fedsync.domain.model import FederationConfig, ResourceId


@runtime_checkable
class RemoteResourceFetcher[TRemote](Protocol):
    """Callable port returning the current remote snapshot keyed by resource id."""

    def __call__(self, config: FederationConfig) -> Mapping[ResourceId, TRemote]: ...


@runtime_checkable
class LocalResourceReader[TLocal](Protocol):
    """Callable port returning the local mirror's copy of the federated collection."""

    def __call__(self, config: FederationConfig) -> Mapping[ResourceId, TLocal]: ...


@runtime_checkable
class FederationConfigStore(Protocol):
    """Read access to per-federation sync cursors."""

    def get(self, federation_id: str) -> FederationConfig | None: ...


__all__ = ["FederationConfigStore", "LocalResourceReader", "RemoteResourceFetcher"]
