"""Read access to the local mirror backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from fedsync.adapters.sqlalchemy.mappings import PAYLOAD_COLUMNS, local_resource_table
from fedsync.domain.delta import index_by_id
from fedsync.domain.model import LocalResource, ResourceKind

if TYPE_CHECKING:
    from sqlalchemy import RowMapping
    from sqlalchemy.orm import Session

    from fedsync.domain.model import FederationConfig, ResourceId


class SqlAlchemyLocalResourceReader:
    """Load every mirrored resource of a federation, keyed by id."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def __call__(self, config: FederationConfig) -> dict[ResourceId, LocalResource]:
        stmt = (
            select(local_resource_table)
            .where(local_resource_table.c.federation_id == config.federation_id)
            .order_by(local_resource_table.c.id)
        )
        rows = self.session.execute(stmt).mappings().all()
        return index_by_id(_to_local_resource(row) for row in rows)


def _to_local_resource(row: RowMapping) -> LocalResource:
    kind = row["kind"]
    return LocalResource(
        id=row["id"],
        updated_at=row["updated_at"],
        kind=ResourceKind(kind) if kind else None,
        tenant_id=row["tenant_id"],
        payload={name: row[name] for name in PAYLOAD_COLUMNS if row[name] is not None},
    )


if TYPE_CHECKING:
    from typing import cast

    from fedsync.domain.ports import LocalResourceReader

    _reader_check: LocalResourceReader[LocalResource] = SqlAlchemyLocalResourceReader(
        cast("Session", object())
    )
