from __future__ import annotations

import logging
from typing import Optional

from localized_response.core.models import ConfigSource, ResponseConfig
from localized_response.sources.interfaces import ConfigLoader
from localized_response.sources.loader import JsonConfigLoader

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads a snapshot on demand, without a background refresh task or locking."""

    def __init__(self, source: ConfigSource, *, loader: Optional[ConfigLoader] = None) -> None:
        self._source = source
        self._loader: ConfigLoader = loader or JsonConfigLoader()
        self._config: Optional[ResponseConfig] = None

    async def load(self) -> None:
        config = await self._loader.load(self._source)
        config.inherit_manual_templates(self._config)
        self._config = config
        logger.info("Config loaded. method=%s path=%s", self._source.method, self._source.path)

    async def reload(self) -> None:
        await self.load()

    def get_config(self) -> Optional[ResponseConfig]:
        return self._config

    def get_translation_with_fallback(self, lang: str, key: str) -> str:
        if self._config is None:
            return key
        return self._config.get_translation_with_fallback(lang, key)
