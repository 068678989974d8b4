from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SourceSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    method: Literal["file", "url"] = "file"
    path: str = "data/config/responses.json"


class RefreshSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    interval_seconds: float = Field(default=60, gt=0)
    http_timeout_seconds: float = Field(default=10, gt=0)


class FileRotationSettings(BaseModel):
    """How many midnight-rotated log files `init_logging` keeps beside the active one."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 5


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = "data/logs/localized-response.log"
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    file: Optional[FileLoggingSettings] = None


class ResponseSettings(BaseModel):
    """Effective settings for a response configuration manager after applying all overrides."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    source: SourceSettings = Field(default_factory=SourceSettings)
    refresh: RefreshSettings = Field(default_factory=RefreshSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@dataclass(frozen=True, slots=True)
class SettingsLoadRequest:
    """
    Optional inputs for a settings loader.

    Implementations may use these to control where settings are read from.
    """

    yaml_path: str = "data/config/settings.yaml"
    env_prefix: str = "LOCALIZED_RESPONSE__"
    dotenv_path: Optional[str] = ".env"
