from __future__ import annotations

import copy
import importlib
import os
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, Mapping, MutableMapping, Optional, Sequence

from localized_response.config.models import ResponseSettings, SettingsLoadRequest


def _import_dependency(module: str, distribution: str, purpose: str) -> ModuleType:
    try:
        return importlib.import_module(module)
    except ModuleNotFoundError as e:  # pragma: no cover
        raise ModuleNotFoundError(
            f"Missing dependency: {distribution} is required to {purpose}. Install '{distribution}'."
        ) from e


def _merge_into(target: MutableMapping[str, Any], overlay: Mapping[str, Any]) -> None:
    for key, value in overlay.items():
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, MutableMapping):
            _merge_into(current, value)
        else:
            target[key] = copy.deepcopy(value)


def _yaml_settings(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    yaml = _import_dependency("yaml", "PyYAML", "read the YAML settings file")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings YAML must be a mapping at the top level. path={path} got={type(data).__name__}")
    return data


def _load_dotenv(path: Optional[str]) -> None:
    if path is None or not Path(path).exists():
        return
    dotenv = _import_dependency("dotenv", "python-dotenv", "read the .env file")
    dotenv.load_dotenv(dotenv_path=path, override=False)


def _key_path(name: str, prefix: str) -> Sequence[str]:
    segments = [s.lower() for s in name[len(prefix) :].split("__") if s]
    if not segments:
        raise ValueError(f"Invalid settings override variable: {name}")
    return segments


def _check_key_path(defaults: Mapping[str, Any], segments: Sequence[str]) -> None:
    """Reject override paths that do not name a scalar setting."""
    dotted = ".".join(segments)
    node: Any = defaults
    for depth, segment in enumerate(segments):
        if node is None:
            # Unset optional section (e.g. logging.file); pydantic validates its fields.
            return
        if not isinstance(node, Mapping):
            raise TypeError(f"Settings key path does not point to a mapping: {dotted}")
        if segment not in node:
            raise KeyError(f"Unknown settings key path: {dotted}")
        node = node[segment]
        if depth == len(segments) - 1 and isinstance(node, Mapping):
            raise TypeError(f"Environment overrides are only allowed for scalar values. Key '{dotted}' is a mapping.")


def _env_overrides(defaults: Mapping[str, Any], prefix: str) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for name, value in os.environ.items():
        if not name.startswith(prefix):
            continue
        segments = _key_path(name, prefix)
        _check_key_path(defaults, segments)

        node = overrides
        for segment in segments[:-1]:
            node = node.setdefault(segment, {})
        # Strings are coerced to the declared field types by pydantic.
        node[segments[-1]] = value
    return overrides


class YamlSettingsLoader:
    async def load(self, request: SettingsLoadRequest = SettingsLoadRequest()) -> ResponseSettings:
        defaults = ResponseSettings().model_dump(mode="python")
        settings = copy.deepcopy(defaults)

        _merge_into(settings, _yaml_settings(Path(request.yaml_path)))
        _load_dotenv(request.dotenv_path)
        _merge_into(settings, _env_overrides(defaults, request.env_prefix))

        return ResponseSettings.model_validate(settings)
