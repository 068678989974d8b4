"""Configuration managers: background-refreshing and on-demand."""

from localized_response.manager.async_manager import AsyncConfigManager, ConfigChangeCallback
from localized_response.manager.rwlock import ReadWriteLock
from localized_response.manager.sync_manager import ConfigManager

__all__ = ["AsyncConfigManager", "ConfigChangeCallback", "ConfigManager", "ReadWriteLock"]
