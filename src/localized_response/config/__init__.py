"""Manager settings: defaults, YAML file, .env and environment overrides."""

from localized_response.config.interfaces import SettingsLoader
from localized_response.config.loader import YamlSettingsLoader
from localized_response.config.models import (
    LoggingSettings,
    RefreshSettings,
    ResponseSettings,
    SettingsLoadRequest,
    SourceSettings,
)

__all__ = [
    "LoggingSettings",
    "RefreshSettings",
    "ResponseSettings",
    "SettingsLoadRequest",
    "SettingsLoader",
    "SourceSettings",
    "YamlSettingsLoader",
]
