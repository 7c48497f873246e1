"""Federated catalog resources and the capabilities the sync core relies on."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from fedsync.domain.tenancy import TenantResource

if TYPE_CHECKING:
    from collections.abc import Mapping

type ResourceId = str
type EpochMillis = int

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLI = timedelta(milliseconds=1)


@runtime_checkable
class Identifiable(Protocol):
    """Anything exposing a stable identifier shared between remote and local copies."""

    @property
    def id(self) -> ResourceId: ...


@runtime_checkable
class Timestamped(Protocol):
    """Anything exposing the epoch-millis instant of its last modification."""

    @property
    def updated_at(self) -> EpochMillis: ...


class ResourceKind(StrEnum):
    SENSOR = "sensor"
    COMPONENT = "component"


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoteResource:
    """Item published by the federated (remote) catalog."""

    id: ResourceId
    updated_at: EpochMillis
    kind: ResourceKind | None = None
    payload: Mapping[str, object] = field(default_factory=dict[str, object])


@dataclass(frozen=True, slots=True, kw_only=True)
class LocalResource(TenantResource):
    """Item held by the local mirror; records are owned by a tenant."""

    id: ResourceId
    updated_at: EpochMillis | None = None
    kind: ResourceKind | None = None
    tenant_id: str | None = None
    payload: Mapping[str, object] = field(default_factory=dict[str, object])


@dataclass(frozen=True, slots=True, kw_only=True)
class FederationConfig:
    """Sync cursor for one federated source.

    ``last_sync_time`` is ``None`` until the first successful sync completes.
    """

    federation_id: str
    last_sync_time: datetime | None = None
    source_url: str | None = None

    @property
    def last_sync_millis(self) -> EpochMillis | None:
        if self.last_sync_time is None:
            return None
        return to_epoch_millis(self.last_sync_time)


def to_epoch_millis(value: datetime) -> EpochMillis:
    """Convert an aware datetime to integer milliseconds since the Unix epoch."""

    if value.tzinfo is None:
        raise ValueError("Timestamps must include timezone information")
    return (value - EPOCH) // _ONE_MILLI


def from_epoch_millis(value: EpochMillis) -> datetime:
    return EPOCH + value * _ONE_MILLI


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, assuming UTC when no offset is given."""

    try:
        normalized = value.strip()
        if normalized.endswith("Z"):
            normalized = normalized[:-1] + "+00:00"
        dt = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise ValueError(f"Invalid ISO timestamp: {value}") from exc
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


__all__ = [
    "EPOCH",
    "EpochMillis",
    "FederationConfig",
    "Identifiable",
    "LocalResource",
    "RemoteResource",
    "ResourceId",
    "ResourceKind",
    "Timestamped",
    "from_epoch_millis",
    "parse_iso_datetime",
    "to_epoch_millis",
]
