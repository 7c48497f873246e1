"""In-memory adapters, used by one-shot CLI runs and tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fedsync.domain.model import FederationConfig


class InMemoryFederationConfigStore:
    def __init__(self, configs: Iterable[FederationConfig] = ()) -> None:
        self._configs = {config.federation_id: config for config in configs}

    def get(self, federation_id: str) -> FederationConfig | None:
        return self._configs.get(federation_id)

    def add(self, config: FederationConfig) -> None:
        self._configs[config.federation_id] = config
