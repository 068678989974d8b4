from __future__ import annotations

from typing import Dict, Mapping

from localized_response.core.models import MessageTemplate


class MessageTemplateBuilder:
    """Fluent construction of a `MessageTemplate` for manual registration."""

    def __init__(self, key: str) -> None:
        self._key = key
        self._template = ""
        self._code_mappings: Dict[str, int] = {}
        self._translations: Dict[str, str] = {}

    def with_template(self, template: str) -> MessageTemplateBuilder:
        self._template = template
        return self

    def with_translation(self, lang: str, translation: str) -> MessageTemplateBuilder:
        self._translations[lang] = translation
        return self

    def with_translations(self, translations: Mapping[str, str]) -> MessageTemplateBuilder:
        self._translations.update(translations)
        return self

    def with_code_mapping(self, protocol: str, code: int) -> MessageTemplateBuilder:
        self._code_mappings[protocol] = code
        return self

    def with_code_mappings(self, code_mappings: Mapping[str, int]) -> MessageTemplateBuilder:
        self._code_mappings.update(code_mappings)
        return self

    def build(self) -> MessageTemplate:
        return MessageTemplate(
            key=self._key,
            template=self._template,
            code_mappings=dict(self._code_mappings),
            translations=dict(self._translations),
        )
