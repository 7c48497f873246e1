"""Search filter value objects consumed by the query translation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class SortOrder:
    field: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if not self.field.strip():
            raise ValueError("Sort field must not be blank")


@dataclass(frozen=True, slots=True, kw_only=True)
class PageRequest:
    """Zero-based page index, page size and optional sort orders."""

    page: int = 0
    size: int
    sort: tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page index must be non-negative")
        if self.size <= 0:
            raise ValueError("Page size must be positive")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True, slots=True, kw_only=True)
class SearchFilter:
    """Named search parameters.

    ``and_params`` are matched exactly (or by set membership) and combined with AND.
    ``params`` are matched by substring for text values and combined with OR. Values may
    be ``None``; both mappings may be empty.
    """

    and_params: Mapping[str, object] = field(default_factory=dict[str, object])
    params: Mapping[str, object] = field(default_factory=dict[str, object])
    page: PageRequest | None = None

    @property
    def has_and_params(self) -> bool:
        return bool(self.and_params)

    @property
    def has_params(self) -> bool:
        return bool(self.params)


__all__ = ["PageRequest", "SearchFilter", "SortDirection", "SortOrder"]
