from __future__ import annotations

import asyncio
import inspect
import logging
import time
from typing import Awaitable, Callable, List, Optional, Sequence

from localized_response.config.models import ResponseSettings
from localized_response.core.models import ConfigSource, MessageTemplate, ResponseConfig
from localized_response.core.printer import ConfigPrinter, write_export
from localized_response.errors import AlreadyRunningError, ConfigLoadError, ConfigNotLoadedError
from localized_response.manager.rwlock import ReadWriteLock
from localized_response.response.builder import Response, ResponseBuilder
from localized_response.sources.interfaces import ConfigLoader
from localized_response.sources.loader import JsonConfigLoader

logger = logging.getLogger(__name__)

ConfigChangeCallback = Callable[[Optional[ResponseConfig], ResponseConfig], Optional[Awaitable[None]]]


def _validate_interval(seconds: float) -> float:
    if seconds <= 0:
        raise ValueError(f"Refresh interval must be positive, got: {seconds}")
    return float(seconds)


class AsyncConfigManager:
    """
    Owns the live configuration snapshot and refreshes it in the background.

    `start()` loads the first snapshot and spawns a single refresh task that reloads the
    source every `refresh_interval_seconds`. Each successfully loaded snapshot inherits
    the manual templates of the snapshot it replaces, is swapped in under the write lock,
    and is then announced to the registered callbacks with `(old, new)`. A failed
    refresh only records the error; readers keep seeing the previous snapshot.

    All public methods except the async lifecycle ones are safe to call from any thread.
    """

    def __init__(
        self,
        source: ConfigSource,
        refresh_interval_seconds: float,
        *,
        loader: Optional[ConfigLoader] = None,
    ) -> None:
        self._source = source
        self._interval = _validate_interval(refresh_interval_seconds)
        self._loader: ConfigLoader = loader or JsonConfigLoader()
        self._config: Optional[ResponseConfig] = None
        self._callbacks: List[ConfigChangeCallback] = []
        self._running = False
        self._last_error: Optional[ConfigLoadError] = None

        self._rw_lock = ReadWriteLock()
        self._lifecycle_lock = asyncio.Lock()
        self._refresh_lock = asyncio.Lock()
        self._stop_event = asyncio.Event()
        self._refresh_task: Optional[asyncio.Task] = None

    @classmethod
    def from_settings(cls, settings: ResponseSettings, *, loader: Optional[ConfigLoader] = None) -> AsyncConfigManager:
        return cls(
            ConfigSource(method=settings.source.method, path=settings.source.path),
            settings.refresh.interval_seconds,
            loader=loader or JsonConfigLoader(timeout_seconds=settings.refresh.http_timeout_seconds),
        )

    async def __aenter__(self) -> AsyncConfigManager:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    # Lifecycle

    async def start(self) -> None:
        async with self._lifecycle_lock:
            if self.is_running():
                raise AlreadyRunningError("Async config manager is already running.")

            source = self._current_source()
            try:
                config = await self._load(source)
            except ConfigLoadError:
                logger.warning("Initial config load failed. method=%s path=%s", source.method, source.path)
                raise

            with self._rw_lock.write_locked():
                config.inherit_manual_templates(self._config)
                self._config = config
                self._last_error = None
                self._running = True

            self._stop_event = asyncio.Event()
            self._refresh_task = asyncio.create_task(self._refresh_loop(self._stop_event))
            logger.info(
                "Async config manager started. method=%s path=%s interval_seconds=%s",
                source.method,
                source.path,
                self.get_interval(),
            )

    async def stop(self) -> None:
        async with self._lifecycle_lock:
            with self._rw_lock.write_locked():
                if not self._running:
                    return
                self._running = False

            self._stop_event.set()
            task = self._refresh_task
            self._refresh_task = None

        # Awaited outside the lifecycle lock: a callback on the refresh task may call stop() too.
        if task is not None and task is not asyncio.current_task():
            await task
        logger.info("Async config manager stopped.")

    def is_running(self) -> bool:
        with self._rw_lock.read_locked():
            return self._running

    # Refresh

    async def force_refresh(self) -> None:
        """Run one refresh attempt now. Raises the recorded `ConfigLoadError` on failure."""
        error = await self._refresh_once()
        if error is not None:
            raise error

    async def _refresh_loop(self, stop_event: asyncio.Event) -> None:
        sleep_seconds = self.get_interval()
        while not stop_event.is_set():
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=sleep_seconds)
                continue
            except asyncio.TimeoutError:
                pass
            if stop_event.is_set():
                break

            started = time.monotonic()
            try:
                await self._refresh_once()
            except Exception:
                logger.exception("Config refresh tick failed.")
            elapsed = time.monotonic() - started
            sleep_seconds = max(0.0, self.get_interval() - elapsed)

    async def _refresh_once(self) -> Optional[ConfigLoadError]:
        async with self._refresh_lock:
            source = self._current_source()
            try:
                new_config = await self._load(source)
            except ConfigLoadError as e:
                with self._rw_lock.write_locked():
                    self._last_error = e
                logger.warning("Config refresh failed. method=%s path=%s error=%s", source.method, source.path, e)
                return e

            with self._rw_lock.write_locked():
                old_config = self._config
                new_config.inherit_manual_templates(old_config)
                self._config = new_config
                self._last_error = None
                callbacks = list(self._callbacks)

        logger.info(
            "Config refreshed. method=%s path=%s templates=%d manual_templates=%d callbacks=%d",
            source.method,
            source.path,
            len(new_config.message_templates),
            len(new_config.manual_message_templates),
            len(callbacks),
        )
        await self._notify(callbacks, old_config, new_config)
        return None

    async def _load(self, source: ConfigSource) -> ResponseConfig:
        try:
            return await self._loader.load(source)
        except ConfigLoadError:
            raise
        except Exception as e:
            raise ConfigLoadError(f"Config loader failed. method={source.method} path={source.path} error={e}") from e

    async def _notify(
        self,
        callbacks: Sequence[ConfigChangeCallback],
        old_config: Optional[ResponseConfig],
        new_config: ResponseConfig,
    ) -> None:
        for callback in callbacks:
            try:
                result = callback(old_config, new_config)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(
                    "Config change callback failed. callback=%s",
                    getattr(callback, "__qualname__", repr(callback)),
                )

    # Settings

    def get_last_error(self) -> Optional[ConfigLoadError]:
        with self._rw_lock.read_locked():
            return self._last_error

    def update_source(self, source: ConfigSource) -> None:
        with self._rw_lock.write_locked():
            self._source = source

    def update_interval(self, seconds: float) -> None:
        interval = _validate_interval(seconds)
        with self._rw_lock.write_locked():
            self._interval = interval

    def get_interval(self) -> float:
        with self._rw_lock.read_locked():
            return self._interval

    def _current_source(self) -> ConfigSource:
        with self._rw_lock.read_locked():
            return self._source

    # Callbacks

    def add_callback(self, callback: ConfigChangeCallback) -> None:
        with self._rw_lock.write_locked():
            self._callbacks.append(callback)

    def remove_all_callbacks(self) -> None:
        with self._rw_lock.write_locked():
            self._callbacks = []

    # Reads

    def get_config(self) -> Optional[ResponseConfig]:
        with self._rw_lock.read_locked():
            return self._config

    def get_translation(self, lang: str, key: str) -> Optional[str]:
        with self._rw_lock.read_locked():
            if self._config is None:
                return None
            return self._config.get_translation(lang, key)

    def get_translation_with_fallback(self, lang: str, key: str) -> str:
        with self._rw_lock.read_locked():
            if self._config is None:
                return key
            return self._config.get_translation_with_fallback(lang, key)

    def get_message_template(self, key: str) -> Optional[MessageTemplate]:
        with self._rw_lock.read_locked():
            if self._config is None:
                return None
            return self._config.get_message_template(key)

    def get_message_template_translation(self, template_key: str, lang: str) -> Optional[str]:
        with self._rw_lock.read_locked():
            if self._config is None:
                return None
            return self._config.get_message_template_translation(template_key, lang)

    def get_message_template_translation_with_fallback(self, template_key: str, lang: str) -> str:
        with self._rw_lock.read_locked():
            if self._config is None:
                return template_key
            return self._config.get_message_template_translation_with_fallback(template_key, lang)

    def get_supported_languages(self) -> List[str]:
        with self._rw_lock.read_locked():
            if self._config is None:
                return []
            return list(self._config.get_supported_languages())

    def get_default_language(self) -> str:
        with self._rw_lock.read_locked():
            if self._config is None:
                return ""
            return self._config.get_default_language()

    def build_response(self, builder: Optional[ResponseBuilder]) -> Response:
        with self._rw_lock.read_locked():
            return self._require_config().build_response(builder)

    # Manual templates

    def add_message_template(self, template: MessageTemplate) -> None:
        self._mutate_manual_tier("add", lambda config: config.add_message_template(template))

    def add_message_templates(self, *templates: MessageTemplate) -> None:
        self._mutate_manual_tier("add_many", lambda config: config.add_message_templates(*templates))

    def remove_message_template(self, key: str) -> None:
        self._mutate_manual_tier("remove", lambda config: config.remove_message_template(key))

    def update_message_template(self, template: MessageTemplate) -> None:
        self._mutate_manual_tier("update", lambda config: config.update_message_template(template))

    def _mutate_manual_tier(self, operation: str, apply: Callable[[ResponseConfig], None]) -> None:
        with self._rw_lock.write_locked():
            if self._config is None:
                logger.warning("Manual template change ignored; no config loaded. operation=%s", operation)
                return
            apply(self._config)

    # Export

    def printer(self) -> ConfigPrinter:
        """Printer over a copy of the current snapshot; later manual changes are not included."""
        with self._rw_lock.read_locked():
            config = self._require_config()
            snapshot = config.model_copy()
            snapshot.inherit_manual_templates(config)
        return snapshot.printer()

    def print_config(self, *, indent: bool = True) -> None:
        print(self._export(indent=indent))

    def export_config(self) -> str:
        return self._export(indent=True)

    def export_config_to_file(self, filename: str) -> None:
        write_export(filename, self._export(indent=True))

    def _export(self, *, indent: bool) -> str:
        with self._rw_lock.read_locked():
            return self._require_config().printer().with_indent(indent).export()

    def _require_config(self) -> ResponseConfig:
        if self._config is None:
            raise ConfigNotLoadedError("Config is not loaded.")
        return self._config
