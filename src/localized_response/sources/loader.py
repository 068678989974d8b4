from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Dict

import aiohttp
from pydantic import TypeAdapter, ValidationError

from localized_response.core.models import ConfigSource, ResponseConfig
from localized_response.errors import ConfigLoadError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("file", "url")

_TRANSLATIONS_ADAPTER = TypeAdapter(Dict[str, str])


async def _read_file(path: str) -> bytes:
    try:
        return await asyncio.to_thread(Path(path).read_bytes)
    except OSError as e:
        raise ConfigLoadError(f"Failed to read config file. path={path} error={e}") from e


async def _fetch_url(url: str, *, timeout_seconds: float) -> bytes:
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as response:
                if response.status != 200:
                    raise ConfigLoadError(f"Failed to fetch config. url={url} status={response.status}")
                return await response.read()
    except asyncio.TimeoutError as e:
        raise ConfigLoadError(f"Timed out fetching config. url={url} timeout_seconds={timeout_seconds}") from e
    except aiohttp.ClientError as e:
        raise ConfigLoadError(f"Failed to fetch config. url={url} error={e}") from e


class JsonConfigLoader:
    """Loads a JSON configuration document from a local file or over HTTP."""

    def __init__(self, *, timeout_seconds: float = 10.0) -> None:
        self._timeout_seconds = timeout_seconds

    async def load(self, source: ConfigSource) -> ResponseConfig:
        data = await self._read(source)
        try:
            config = ResponseConfig.model_validate_json(data)
        except ValidationError as e:
            raise ConfigLoadError(f"Failed to parse config document. path={source.path} error={e}") from e

        await self._load_translation_sources(config)
        logger.debug(
            "Config document loaded. method=%s path=%s templates=%d languages=%d",
            source.method,
            source.path,
            len(config.message_templates),
            len(config.languages),
        )
        return config

    async def _read(self, source: ConfigSource) -> bytes:
        method = source.method.lower()
        if method == "file":
            return await _read_file(source.path)
        if method == "url":
            return await _fetch_url(source.path, timeout_seconds=self._timeout_seconds)
        raise ConfigLoadError(
            f"Unsupported source method: {source.method}. Supported methods: {', '.join(SUPPORTED_METHODS)}"
        )

    async def _load_translation_sources(self, config: ResponseConfig) -> None:
        # Entries from translation_source override inline translations on key collision.
        for lang, source in config.translation_sources.items():
            try:
                data = await self._read(source)
                translations = _TRANSLATIONS_ADAPTER.validate_json(data)
            except ConfigLoadError as e:
                raise ConfigLoadError(f"Failed to load translations. lang={lang} error={e}") from e
            except ValidationError as e:
                raise ConfigLoadError(f"Failed to parse translations. lang={lang} path={source.path} error={e}") from e
            config.translations.setdefault(lang, {}).update(translations)


async def load_config(source: ConfigSource, *, timeout_seconds: float = 10.0) -> ResponseConfig:
    return await JsonConfigLoader(timeout_seconds=timeout_seconds).load(source)
