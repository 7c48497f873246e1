"""SQLAlchemy table metadata for the local catalog mirror."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, Column, Index, MetaData, String, Table

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData()

local_resource_table = Table(
    "local_resource",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("federation_id", String(64), nullable=True),
    Column("kind", String(32), nullable=True),
    Column("name", String(255), nullable=True),
    Column("description", String(1024), nullable=True),
    Column("type", String(64), nullable=True),
    Column("status", String(32), nullable=True),
    Column("tenant_id", String(64), nullable=True),
    Column("updated_at", BigInteger, nullable=True),
    Index("ix_local_resource_federation", "federation_id"),
    Index("ix_local_resource_tenant", "tenant_id"),
)

PAYLOAD_COLUMNS: tuple[str, ...] = ("name", "description", "type", "status")


def create_all_tables(engine: Engine) -> None:
    metadata.create_all(engine)
