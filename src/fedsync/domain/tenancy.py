"""Tenant context and tenant-scoping decisions.

The current tenant is carried in a ``ContextVar`` so concurrent requests (threads or
asyncio tasks) each see their own value. Lookups return ``None`` when no tenant is
bound; they never hide errors, so callers choose whether an unresolvable tenant means
"no scoping" or "reject the request".
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

type TenantLookup = Callable[[], str | None]

_CURRENT_TENANT: ContextVar[str | None] = ContextVar("fedsync_current_tenant", default=None)


class TenantResource:
    """Marker base for entity types whose records belong to a single tenant."""

    __slots__ = ()

    tenant_id: str | None


def current_tenant() -> str | None:
    """Return the tenant bound to the running context, if any."""

    return _CURRENT_TENANT.get()


@contextmanager
def tenant_context(tenant_id: str | None) -> Iterator[None]:
    """Bind ``tenant_id`` as the current tenant for the duration of the block."""

    token = _CURRENT_TENANT.set(tenant_id)
    try:
        yield
    finally:
        _CURRENT_TENANT.reset(token)


def has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def is_tenant_scoped(entity_type: object) -> bool:
    return isinstance(entity_type, type) and issubclass(entity_type, TenantResource)


def tenant_scope_for(
    entity_type: object,
    lookup: TenantLookup = current_tenant,
) -> str | None:
    """Return the tenant id queries on ``entity_type`` must be restricted to, or ``None``."""

    if not is_tenant_scoped(entity_type):
        return None
    tenant_id = lookup()
    return tenant_id if has_text(tenant_id) else None


def requires_tenant_scope(
    entity_type: object,
    lookup: TenantLookup = current_tenant,
) -> bool:
    """Whether ``entity_type`` is tenant-scoped and a non-blank tenant is bound."""

    return tenant_scope_for(entity_type, lookup) is not None


__all__ = [
    "TenantLookup",
    "TenantResource",
    "current_tenant",
    "has_text",
    "is_tenant_scoped",
    "requires_tenant_scope",
    "tenant_context",
    "tenant_scope_for",
]
