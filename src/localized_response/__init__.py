"""Localized, template-driven response messages backed by a background-refreshing configuration."""

from localized_response.core import (
    ConfigPrinter,
    ConfigSource,
    MessageTemplate,
    MessageTemplateBuilder,
    ResponseConfig,
    TranslationSource,
)
from localized_response.errors import (
    AlreadyRunningError,
    ConfigLoadError,
    ConfigNotLoadedError,
    ResponseBuildError,
    ResponseConfigError,
)
from localized_response.manager import AsyncConfigManager, ConfigChangeCallback, ConfigManager
from localized_response.response import (
    RequestContext,
    Response,
    ResponseBuilder,
    ResponseBuilderError,
    parse_response_builder_error,
    substitute_params,
)
from localized_response.sources import ConfigLoader, JsonConfigLoader, load_config

__all__ = [
    "AlreadyRunningError",
    "AsyncConfigManager",
    "ConfigChangeCallback",
    "ConfigLoadError",
    "ConfigLoader",
    "ConfigManager",
    "ConfigNotLoadedError",
    "ConfigPrinter",
    "ConfigSource",
    "JsonConfigLoader",
    "MessageTemplate",
    "MessageTemplateBuilder",
    "RequestContext",
    "Response",
    "ResponseBuildError",
    "ResponseBuilder",
    "ResponseBuilderError",
    "ResponseConfig",
    "ResponseConfigError",
    "TranslationSource",
    "load_config",
    "parse_response_builder_error",
    "substitute_params",
]
