"""Translate named search parameters into SQLAlchemy boolean criteria."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy import column

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, FromClause

type Criterion = ColumnElement[bool]


def is_collection_value(value: object) -> bool:
    """Whether ``value`` is multi-valued (matched by membership rather than equality).

    Strings, bytes and mappings are collections in Python but scalars for filtering.
    """

    if value is None or isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Collection)


def collection_values(value: Collection[object]) -> list[object]:
    return list(value)


def resolve_field(name: str, source: FromClause | None = None) -> ColumnElement[Any]:
    """Return the column named ``name`` on ``source``, or a free-standing column."""

    if source is None:
        return column(name)
    return source.c[name]


def _equals(field: ColumnElement[Any], value: object) -> Criterion:
    if value is None:
        return field.is_(None)
    return field == value


def build_and_criteria(
    and_params: Mapping[str, object],
    *,
    source: FromClause | None = None,
) -> list[Criterion]:
    """One exact-match criterion per parameter, membership for multi-valued values."""

    criteria: list[Criterion] = []
    for name, value in and_params.items():
        field = resolve_field(name, source)
        if is_collection_value(value):
            criteria.append(field.in_(collection_values(value)))  # type: ignore[arg-type]
        else:
            criteria.append(_equals(field, value))
    return criteria


def build_or_criteria(
    or_params: Mapping[str, object],
    *,
    source: FromClause | None = None,
) -> list[Criterion]:
    """One criterion per parameter: membership, equality, or literal substring match.

    Text values become ``LIKE '%fragment%'`` with ``%`` and ``_`` escaped. ``None`` is
    not text and yields ``IS NULL``.
    """

    criteria: list[Criterion] = []
    for name, value in or_params.items():
        field = resolve_field(name, source)
        if is_collection_value(value):
            criteria.append(field.in_(collection_values(value)))  # type: ignore[arg-type]
        elif not isinstance(value, str):
            criteria.append(_equals(field, value))
        else:
            criteria.append(field.contains(value, autoescape=True))
    return criteria


__all__ = [
    "Criterion",
    "build_and_criteria",
    "build_or_criteria",
    "collection_values",
    "is_collection_value",
    "resolve_field",
]
