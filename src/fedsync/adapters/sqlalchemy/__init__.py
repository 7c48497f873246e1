"""SQLAlchemy adapter package for fedsync."""

from __future__ import annotations

from .criteria import (
    Criterion,
    build_and_criteria,
    build_or_criteria,
    collection_values,
    is_collection_value,
    resolve_field,
)
from .mappings import create_all_tables, local_resource_table, metadata
from .query import QueryDescriptor, SearchQueryBuilder, assemble_query, tenant_criteria
from .repositories import SqlAlchemyLocalResourceReader

__all__ = [
    "Criterion",
    "QueryDescriptor",
    "SearchQueryBuilder",
    "SqlAlchemyLocalResourceReader",
    "assemble_query",
    "build_and_criteria",
    "build_or_criteria",
    "collection_values",
    "create_all_tables",
    "is_collection_value",
    "local_resource_table",
    "metadata",
    "resolve_field",
    "tenant_criteria",
]
