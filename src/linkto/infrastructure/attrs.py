"""HTML attribute serialization.

Rules:
- ``True`` -> bare attribute (``disabled``); ``False``/``None`` -> omitted.
- A nested mapping under a key expands to prefixed attributes:
  ``{"data": {"confirm_text": "Sure?"}}`` -> ``data-confirm-text="Sure?"``.
- Lists and tuples are joined with spaces (``class``).
- Everything else is stringified and escaped.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from typing import Any

from markupsafe import Markup, escape


def _dasherize(name: str) -> str:
    return str(name).replace("_", "-")


def _flatten(attributes: Mapping[str, Any]) -> Iterator[tuple[str, Any]]:
    for name, value in attributes.items():
        if isinstance(value, Mapping):
            for sub_name, sub_value in value.items():
                yield f"{name}-{_dasherize(sub_name)}", _nested_value(sub_value)
        else:
            yield str(name), value


def _nested_value(value: Any) -> Any:
    # Structured data-* values travel as JSON.
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return value


def html_attributes(attributes: Mapping[str, Any] | None) -> Markup:
    """Serialize *attributes* to a string with a leading space per attribute."""
    if not attributes:
        return Markup("")
    parts: list[str] = []
    for name, value in _flatten(attributes):
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {escape(name)}")
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value)
        parts.append(f' {escape(name)}="{escape(value)}"')
    return Markup("".join(parts))
