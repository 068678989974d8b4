from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from localized_response.errors import ConfigNotLoadedError

if TYPE_CHECKING:
    from localized_response.core.models import ResponseConfig


def write_export(filename: str, content: str) -> None:
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class ConfigPrinter:
    """Prints or exports a snapshot as JSON, with manual templates merged over loaded ones."""

    def __init__(self, config: Optional[ResponseConfig]) -> None:
        self._config = config
        self._indent = True

    def with_indent(self, use_indent: bool) -> ConfigPrinter:
        self._indent = use_indent
        return self

    def print(self) -> None:
        print(self.export())

    def export(self) -> str:
        payload = self._to_payload()
        if self._indent:
            return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
        return json.dumps(payload, separators=(",", ":"), sort_keys=True, ensure_ascii=False)

    def export_to_file(self, filename: str) -> None:
        write_export(filename, self.export())

    def _to_payload(self) -> dict[str, Any]:
        if self._config is None:
            raise ConfigNotLoadedError("Configuration is not loaded.")

        templates = {}
        for key, template in self._config.merged_message_templates().items():
            entry = template.model_dump(mode="json")
            if not entry["translations"]:
                del entry["translations"]
            templates[key] = entry

        payload: dict[str, Any] = {
            "message_templates": templates,
            "default_language": self._config.default_language,
            "languages": list(self._config.languages),
            "translations": self._config.translations,
        }
        if self._config.translation_sources:
            payload["translation_source"] = {
                lang: source.model_dump(mode="json") for lang, source in self._config.translation_sources.items()
            }
        return payload
