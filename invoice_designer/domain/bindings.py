"""Binding resolution against sample data.

A binding is a dotted path such as ``provider.address``. Only mapping keys
are traversed: there is no list indexing and no way to escape a dot.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any, Final

BINDING_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{\{([^}]+)\}\}")

_MISSING = object()


def resolve(root: Any, path: str, fallback: Any = None) -> Any:
    """Return the value at ``path`` inside ``root`` or ``fallback``.

    A ``None`` intermediate or a missing key short-circuits to ``fallback``.
    A present final value is returned untouched, ``None`` included.
    """

    current = root
    for key in path.split("."):
        if current is None:
            return fallback
        if isinstance(current, Mapping):
            current = current.get(key, _MISSING)
        else:
            current = _MISSING
        if current is _MISSING:
            return fallback
    return current


def interpolate(template: str, root: Any) -> str:
    """Replace every ``{{path}}`` token in ``template`` with its resolved value.

    Tokens that do not resolve are left exactly as written.
    """

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        value = resolve(root, match.group(1).strip(), token)
        return display_text(value)

    return BINDING_PATTERN.sub(_replace, template)


def placeholder(binding: str) -> str:
    """Return the literal ``{{binding}}`` token shown for an unresolved binding."""

    return "{{" + binding + "}}"


def display_text(value: Any) -> str:
    """Turn a resolved JSON value into the text shown on the page."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


__all__ = ["BINDING_PATTERN", "display_text", "interpolate", "placeholder", "resolve"]
