"""Application service planning one federation sync cycle."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from fedsync.domain.delta import compute_federation_delta

if TYPE_CHECKING:
    from fedsync.domain.delta import ResourceDelta
    from fedsync.domain.model import FederationConfig, Timestamped
    from fedsync.domain.ports import (
        FederationConfigStore,
        LocalResourceReader,
        RemoteResourceFetcher,
    )

log = getLogger(__name__)


class FederationConfigNotFoundError(LookupError):
    """Raised when no sync configuration exists for a federation id."""


@dataclass(frozen=True, slots=True)
class FederationSyncPlan[TRemote, TLocal]:
    """Config snapshot the delta was computed against, plus the delta itself."""

    config: FederationConfig
    delta: ResourceDelta[TRemote, TLocal]


def plan_federation_sync[TRemote: Timestamped, TLocal](
    *,
    federation_id: str,
    config_store: FederationConfigStore,
    fetch_remote: RemoteResourceFetcher[TRemote],
    read_local: LocalResourceReader[TLocal],
) -> FederationSyncPlan[TRemote, TLocal]:
    """Load the federation cursor and both snapshots, then compute their delta.

    Nothing is written: applying the plan and advancing the cursor belong to the caller.
    """

    config = config_store.get(federation_id)
    if config is None:
        raise FederationConfigNotFoundError(f"No federation config for {federation_id!r}")

    log.info(
        "Planning federation sync: federation=%s, last_sync=%s",
        federation_id,
        config.last_sync_time,
    )

    remote = fetch_remote(config)
    local = read_local(config)
    delta = compute_federation_delta(config, remote, local)

    log.info(
        "Planned federation sync: federation=%s, remote=%s, local=%s, "
        "insert=%s, update=%s, delete=%s",
        federation_id,
        len(remote),
        len(local),
        len(delta.to_insert),
        len(delta.to_update),
        len(delta.to_delete),
    )

    return FederationSyncPlan(config=config, delta=delta)


__all__ = ["FederationConfigNotFoundError", "FederationSyncPlan", "plan_federation_sync"]
