"""Configuration document loading (file and URL sources)."""

from localized_response.sources.interfaces import ConfigLoader
from localized_response.sources.loader import JsonConfigLoader, load_config

__all__ = ["ConfigLoader", "JsonConfigLoader", "load_config"]
