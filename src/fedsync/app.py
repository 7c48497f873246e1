"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from fedsync.adapters.memory import InMemoryFederationConfigStore
from fedsync.adapters.snapshot import JsonSnapshotLocalReader, JsonSnapshotRemoteFetcher
from fedsync.adapters.sqlalchemy import SqlAlchemyLocalResourceReader
from fedsync.config import get_database_config
from fedsync.domain.federation_sync import FederationSyncPlan, plan_federation_sync
from fedsync.domain.model import FederationConfig, LocalResource, RemoteResource

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path

DEFAULT_FEDERATION_ID = "default"

log = getLogger(__name__)


def plan_snapshot_sync(
    *,
    remote_path: Path,
    local_path: Path,
    last_sync_time: datetime | None = None,
    federation_id: str = DEFAULT_FEDERATION_ID,
) -> FederationSyncPlan[RemoteResource, LocalResource]:
    """Compute the delta between two JSON snapshot files."""

    config = FederationConfig(federation_id=federation_id, last_sync_time=last_sync_time)
    return plan_federation_sync(
        federation_id=federation_id,
        config_store=InMemoryFederationConfigStore([config]),
        fetch_remote=JsonSnapshotRemoteFetcher(remote_path),
        read_local=JsonSnapshotLocalReader(local_path),
    )


def plan_database_sync(
    *,
    remote_path: Path,
    database_uri: str | None = None,
    last_sync_time: datetime | None = None,
    federation_id: str = DEFAULT_FEDERATION_ID,
) -> FederationSyncPlan[RemoteResource, LocalResource]:
    """Compute the delta between a JSON remote snapshot and the mirror database."""

    uri = database_uri or get_database_config().uri
    config = FederationConfig(federation_id=federation_id, last_sync_time=last_sync_time)
    engine = create_engine(uri, future=True)
    log.debug("Reading local mirror for %s from %s", federation_id, engine.url)
    try:
        with Session(engine) as session:
            return plan_federation_sync(
                federation_id=federation_id,
                config_store=InMemoryFederationConfigStore([config]),
                fetch_remote=JsonSnapshotRemoteFetcher(remote_path),
                read_local=SqlAlchemyLocalResourceReader(session),
            )
    finally:
        engine.dispose()
