"""Render directives: reserved keys pulled out of the attribute map.

``method`` and ``remote`` are not HTML attributes: they tell the renderer
to synthesize a method-override form and to mark async submission.
They are split off here, at the normalizer boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from linkto.domain.errors import ArgumentError


class HttpMethod(StrEnum):
    """HTTP methods a link may submit with."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"


@dataclass(frozen=True)
class RenderDirectives:
    """Renderer instructions separated from generic HTML attributes."""

    method: HttpMethod = HttpMethod.GET
    remote: bool = False

    @property
    def requires_form(self) -> bool:
        """True when the link must be emitted as a submitted form."""
        return self.method is not HttpMethod.GET


def parse_method(value: object) -> HttpMethod:
    """Parse a method name case-insensitively."""
    if isinstance(value, HttpMethod):
        return value
    if not isinstance(value, str):
        msg = f"method must be a string, got {type(value).__name__}"
        raise ArgumentError(msg)
    try:
        return HttpMethod(value.lower())
    except ValueError:
        allowed = ", ".join(m.value for m in HttpMethod)
        msg = f"Unsupported method {value!r} (expected one of: {allowed})"
        raise ArgumentError(msg) from None


def extract_directives(
    attributes: Mapping[str, Any] | None,
) -> tuple[dict[str, Any], RenderDirectives]:
    """Split *attributes* into plain HTML attributes and render directives.

    Returns a new dict; the input mapping is left untouched. A missing
    ``method`` means GET.
    """
    remaining = dict(attributes or {})
    method = HttpMethod.GET
    if "method" in remaining:
        raw = remaining.pop("method")
        if raw is not None:
            method = parse_method(raw)
    remote = remaining.pop("remote", False)
    if remote is None:
        remote = False
    if not isinstance(remote, bool):
        msg = f"remote must be a boolean, got {type(remote).__name__}"
        raise ArgumentError(msg)
    return remaining, RenderDirectives(method=method, remote=remote)
