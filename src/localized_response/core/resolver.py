"""
Two-tier template resolution.

Templates live in two tiers, searched in order: the manual tier (registered at
runtime) and then the loaded tier (from the configuration source). The first tier
holding a key owns the whole entry; its translations are never merged with the
entry of the same key in a lower tier.

Template translation lookups follow at most four steps:
requested language -> default language -> plain template text -> key.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Sequence

if TYPE_CHECKING:
    from localized_response.core.models import MessageTemplate, ResponseConfig


def template_tiers(config: ResponseConfig) -> Sequence[Mapping[str, MessageTemplate]]:
    return (config.manual_message_templates, config.message_templates)


def resolve_template(config: ResponseConfig, key: str) -> Optional[MessageTemplate]:
    for tier in template_tiers(config):
        template = tier.get(key)
        if template is not None:
            return template
    return None


def resolve_template_translation(config: ResponseConfig, key: str, lang: str) -> Optional[str]:
    template = resolve_template(config, key)
    if template is None:
        return None

    text = template.translations.get(lang)
    if text is not None:
        return text

    default_lang = config.default_language
    if lang != default_lang:
        text = template.translations.get(default_lang)
        if text is not None:
            return text

    return template.template


def resolve_template_translation_with_fallback(config: ResponseConfig, key: str, lang: str) -> str:
    text = resolve_template_translation(config, key, lang)
    if text is None:
        return key
    return text


def resolve_translation(config: ResponseConfig, lang: str, key: str) -> Optional[str]:
    return config.translations.get(lang, {}).get(key)


def resolve_translation_with_fallback(config: ResponseConfig, lang: str, key: str) -> str:
    for candidate in (lang, config.default_language):
        text = resolve_translation(config, candidate, key)
        if text is not None:
            return text
    return key
