"""Query translation defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_positive_int, optional_env_str
from .errors import ConfigurationError

DEFAULT_TENANT_FIELD = "tenant_id"
DEFAULT_PAGE_SIZE = 20
DEFAULT_MAX_PAGE_SIZE = 1000


@dataclass(frozen=True, slots=True)
class QueryConfig:
    tenant_field: str = DEFAULT_TENANT_FIELD
    default_page_size: int = DEFAULT_PAGE_SIZE
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.default_page_size > self.max_page_size:
            raise ConfigurationError(
                f"Default page size {self.default_page_size} exceeds "
                f"max page size {self.max_page_size}"
            )

    def clamp_page_size(self, size: int) -> int:
        return min(size, self.max_page_size)


def get_query_config() -> QueryConfig:
    return QueryConfig(
        tenant_field=optional_env_str("FEDSYNC_TENANT_FIELD", DEFAULT_TENANT_FIELD),
        default_page_size=optional_env_positive_int(
            "FEDSYNC_DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE
        ),
        max_page_size=optional_env_positive_int("FEDSYNC_MAX_PAGE_SIZE", DEFAULT_MAX_PAGE_SIZE),
    )
