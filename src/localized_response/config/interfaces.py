from __future__ import annotations

from typing import Protocol

from localized_response.config.models import ResponseSettings, SettingsLoadRequest


class SettingsLoader(Protocol):
    """
    Loads effective manager settings.

    Precedence, lowest first: model defaults, YAML file, environment variables.
    """

    async def load(self, request: SettingsLoadRequest = SettingsLoadRequest()) -> ResponseSettings:
        ...
