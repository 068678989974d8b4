from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from localized_response.core import resolver
from localized_response.core.printer import ConfigPrinter
from localized_response.response.builder import Response, ResponseBuilder, build_response


class ConfigSource(BaseModel):
    """Where a configuration document (or a translation file) is read from."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    method: str = "file"
    path: str = ""


# Translation sources share the descriptor shape of configuration sources.
TranslationSource = ConfigSource


class MessageTemplate(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    key: str = ""
    template: str = ""
    code_mappings: Dict[str, int] = Field(default_factory=dict)
    translations: Dict[str, str] = Field(default_factory=dict)


class ResponseConfig(BaseModel):
    """
    One configuration snapshot.

    `message_templates` is the loaded tier, replaced wholesale on every refresh.
    The manual tier holds templates registered at runtime. It is never read from or
    written to the JSON document, always resolves before the loaded tier, and is
    carried over into each refreshed snapshot by the manager.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message_templates: Dict[str, MessageTemplate] = Field(default_factory=dict)
    default_language: str = ""
    languages: List[str] = Field(default_factory=list)
    translations: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    translation_sources: Dict[str, ConfigSource] = Field(default_factory=dict, alias="translation_source")

    _manual_message_templates: Dict[str, MessageTemplate] = PrivateAttr(default_factory=dict)

    @property
    def manual_message_templates(self) -> Dict[str, MessageTemplate]:
        return self._manual_message_templates

    # Lookups

    def get_translation(self, lang: str, key: str) -> Optional[str]:
        return resolver.resolve_translation(self, lang, key)

    def get_translation_with_fallback(self, lang: str, key: str) -> str:
        return resolver.resolve_translation_with_fallback(self, lang, key)

    def get_message_template(self, key: str) -> Optional[MessageTemplate]:
        return resolver.resolve_template(self, key)

    def get_message_template_translation(self, template_key: str, lang: str) -> Optional[str]:
        return resolver.resolve_template_translation(self, template_key, lang)

    def get_message_template_translation_with_fallback(self, template_key: str, lang: str) -> str:
        return resolver.resolve_template_translation_with_fallback(self, template_key, lang)

    def get_supported_languages(self) -> List[str]:
        return self.languages

    def get_default_language(self) -> str:
        return self.default_language

    # Manual tier mutation

    def add_message_template(self, template: MessageTemplate) -> None:
        self._manual_message_templates[template.key] = template

    def add_message_templates(self, *templates: MessageTemplate) -> None:
        for template in templates:
            self.add_message_template(template)

    def remove_message_template(self, key: str) -> None:
        self._manual_message_templates.pop(key, None)

    def update_message_template(self, template: MessageTemplate) -> None:
        self.add_message_template(template)

    def inherit_manual_templates(self, previous: Optional[ResponseConfig]) -> None:
        """Replace this snapshot's manual tier with a copy of `previous`'s."""
        if previous is None:
            return
        self._manual_message_templates = dict(previous.manual_message_templates)

    def merged_message_templates(self) -> Dict[str, MessageTemplate]:
        """Loaded templates with manual templates laid over them, as readers see them."""
        merged = dict(self.message_templates)
        merged.update(self._manual_message_templates)
        return merged

    # Response building and export

    def build_response(self, builder: Optional[ResponseBuilder]) -> Response:
        return build_response(self, builder)

    def printer(self) -> ConfigPrinter:
        return ConfigPrinter(self)

    def print_config(self, *, indent: bool = True) -> None:
        self.printer().with_indent(indent).print()

    def export_config(self) -> str:
        return self.printer().export()

    def export_config_to_file(self, filename: str) -> None:
        self.printer().export_to_file(filename)
