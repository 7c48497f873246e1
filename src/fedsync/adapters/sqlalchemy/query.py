"""Assemble search criteria, tenant scoping and paging into executable queries."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from logging import getLogger
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, func, or_, select, true
from sqlalchemy.sql.elements import True_

from fedsync.adapters.sqlalchemy.criteria import (
    build_and_criteria,
    build_or_criteria,
    resolve_field,
)
from fedsync.config.query import QueryConfig
from fedsync.domain.search import PageRequest, SearchFilter, SortDirection
from fedsync.domain.tenancy import TenantLookup, current_tenant, tenant_scope_for

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy import ColumnElement, FromClause, Select

    from fedsync.adapters.sqlalchemy.criteria import Criterion

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QueryDescriptor:
    """Boolean criteria plus optional paging, ready for the storage layer to execute."""

    criteria: ColumnElement[bool]
    page: PageRequest | None = None

    def to_select(self, source: FromClause) -> Select[Any]:
        stmt = select(source).where(self.criteria)
        if self.page is None:
            return stmt
        for order in self.page.sort:
            sort_column = source.c[order.field]
            stmt = stmt.order_by(
                sort_column.desc() if order.direction is SortDirection.DESC else sort_column.asc()
            )
        return stmt.limit(self.page.size).offset(self.page.offset)

    def to_count_select(self, source: FromClause) -> Select[Any]:
        return select(func.count()).select_from(source).where(self.criteria)


def assemble_query(
    and_criteria: Sequence[Criterion],
    or_criteria: Sequence[Criterion],
    *,
    custom_criteria: Criterion | None = None,
    paged: bool = False,
    page: PageRequest | None = None,
) -> QueryDescriptor:
    """Fold the criteria groups onto ``custom_criteria`` in a fixed order.

    The AND group is conjoined onto the running criteria first; the OR group is then
    disjoined with the result, giving ``(custom AND a1 .. AND an) OR o1 .. OR om``. An
    absent running criteria is the identity for both steps.
    """

    running = custom_criteria
    if and_criteria:
        running = and_(*and_criteria) if running is None else and_(running, *and_criteria)
    if or_criteria:
        running = or_(*or_criteria) if running is None else or_(running, *or_criteria)

    return QueryDescriptor(
        criteria=true() if running is None else running,
        page=page if paged else None,
    )


def tenant_criteria(
    entity_type: object,
    *,
    tenant_field: str,
    lookup: TenantLookup = current_tenant,
    source: FromClause | None = None,
) -> Criterion | None:
    tenant_id = tenant_scope_for(entity_type, lookup)
    if tenant_id is None:
        return None
    return resolve_field(tenant_field, source) == tenant_id


@dataclass(frozen=True, slots=True, kw_only=True)
class SearchQueryBuilder:
    """Build query descriptors for one entity type stored in ``source``.

    When ``entity_type`` is tenant-scoped and ``tenant_lookup`` yields a tenant, search
    and count queries are restricted to that tenant. The tenant predicate is conjoined
    with the assembled criteria as a whole, so OR parameters cannot reach other tenants.
    """

    source: FromClause | None = None
    entity_type: type[object] | None = None
    config: QueryConfig = field(default_factory=QueryConfig)
    tenant_lookup: TenantLookup = current_tenant

    def build_query(
        self,
        search_filter: SearchFilter,
        *,
        paged: bool = True,
        custom_criteria: Criterion | None = None,
    ) -> QueryDescriptor:
        descriptor = assemble_query(
            build_and_criteria(search_filter.and_params, source=self.source),
            build_or_criteria(search_filter.params, source=self.source),
            custom_criteria=custom_criteria,
            paged=paged,
            page=self._page_for(search_filter) if paged else None,
        )
        return self._scoped(descriptor)

    def build_count_query(self, search_filter: SearchFilter | None = None) -> QueryDescriptor:
        return self.build_query(search_filter or SearchFilter(), paged=False)

    def build_query_for_id_in_collection(self, values: Iterable[str]) -> QueryDescriptor:
        return self.build_query_for_param_in_collection("id", values)

    def build_query_for_param_in_collection(
        self,
        name: str,
        values: Iterable[object],
    ) -> QueryDescriptor:
        return QueryDescriptor(criteria=resolve_field(name, self.source).in_(list(values)))

    def _scoped(self, descriptor: QueryDescriptor) -> QueryDescriptor:
        scope = tenant_criteria(
            self.entity_type,
            tenant_field=self.config.tenant_field,
            lookup=self.tenant_lookup,
            source=self.source,
        )
        if scope is None:
            return descriptor
        if isinstance(descriptor.criteria, True_):
            return replace(descriptor, criteria=scope)
        return replace(descriptor, criteria=and_(scope, descriptor.criteria))

    def _page_for(self, search_filter: SearchFilter) -> PageRequest:
        page = search_filter.page or PageRequest(size=self.config.default_page_size)
        size = self.config.clamp_page_size(page.size)
        if size != page.size:
            log.debug("Clamping page size %s to %s", page.size, size)
            page = replace(page, size=size)
        return page


__all__ = ["QueryDescriptor", "SearchQueryBuilder", "assemble_query", "tenant_criteria"]
