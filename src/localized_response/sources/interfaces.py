from __future__ import annotations

from typing import Protocol

from localized_response.core.models import ConfigSource, ResponseConfig


class ConfigLoader(Protocol):
    """
    Produces a fresh configuration snapshot from a source descriptor.

    Implementations raise `ConfigLoadError` on any failure and must not keep state
    between calls: every call returns a new, independent snapshot.
    """

    async def load(self, source: ConfigSource) -> ResponseConfig:
        ...
