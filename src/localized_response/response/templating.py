from __future__ import annotations

from typing import Any, Mapping, Optional


def substitute_params(template: str, params: Optional[Mapping[str, Any]]) -> str:
    """Replace `$name` placeholders with the string form of `params[name]`.

    Longer parameter names are substituted first so `$name` never clobbers `$name_full`.
    Placeholders without a matching parameter are left untouched.
    """
    if not params:
        return template
    result = template
    for key in sorted(params, key=len, reverse=True):
        result = result.replace(f"${key}", str(params[key]))
    return result
