"""Pydantic models describing JSON resource snapshots and delta reports."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fedsync.domain.model import ResourceKind, parse_iso_datetime, to_epoch_millis

if TYPE_CHECKING:
    from fedsync.domain.delta import ResourceDelta


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResourcePayload(SnapshotBaseModel):
    """One resource; attributes other than the known fields are kept as payload."""

    model_config = ConfigDict(extra="allow")

    id: str
    updated_at: int | None = Field(default=None, alias="updatedAt")
    kind: ResourceKind | None = None
    tenant_id: str | None = Field(default=None, alias="tenantId")

    _normalize_tenant_id = field_validator("tenant_id", mode="before")(_blank_to_none)
    _normalize_kind = field_validator("kind", mode="before")(_blank_to_none)

    @field_validator("id")
    @classmethod
    def _require_id(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Resource id must not be blank")
        return stripped

    @field_validator("updated_at", mode="before")
    @classmethod
    def _parse_updated_at(cls, value: object) -> object:
        if isinstance(value, datetime):
            return to_epoch_millis(value)
        if not isinstance(value, str):
            return value
        stripped = value.strip()
        if not stripped:
            return None
        if stripped.lstrip("-").isdigit():
            return int(stripped)
        return to_epoch_millis(parse_iso_datetime(stripped))

    @property
    def attributes(self) -> dict[str, object]:
        return dict(self.model_extra or {})


class SnapshotDocument(SnapshotBaseModel):
    resources: list[ResourcePayload]

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_list(cls, value: object) -> object:
        if isinstance(value, list):
            return {"resources": value}
        return value


class DeltaReport(SnapshotBaseModel):
    federation_id: str = Field(alias="federationId")
    to_insert: list[str] = Field(alias="toInsert")
    to_update: list[str] = Field(alias="toUpdate")
    to_delete: list[str] = Field(alias="toDelete")

    @classmethod
    def from_delta(cls, federation_id: str, delta: ResourceDelta[Any, Any]) -> DeltaReport:
        return cls.model_validate(
            {
                "federationId": federation_id,
                "toInsert": list(delta.to_insert),
                "toUpdate": list(delta.to_update),
                "toDelete": list(delta.to_delete),
            }
        )
