"""Configuration snapshot, two-tier template resolution and export."""

from localized_response.core.builders import MessageTemplateBuilder
from localized_response.core.models import ConfigSource, MessageTemplate, ResponseConfig, TranslationSource
from localized_response.core.printer import ConfigPrinter

__all__ = [
    "ConfigPrinter",
    "ConfigSource",
    "MessageTemplate",
    "MessageTemplateBuilder",
    "ResponseConfig",
    "TranslationSource",
]
