"""Static route table for building URLs from route options.

Endpoints are keyed ``"controller#action"`` and map to path templates
with ``{name}`` placeholders::

    [routes]
    "shop#checkout" = "/shop/checkout"
    "products#show" = "/products/{id}"

Only URL *generation* lives here; requests are never recognized.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

from linkto.domain.errors import RouteNotFound

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

DEFAULT_ACTION = "index"


def endpoint_key(controller: str, action: str = DEFAULT_ACTION) -> str:
    return f"{controller}#{action}"


class RouteTable:
    """Named endpoints -> path templates."""

    def __init__(self, endpoints: Mapping[str, str] | None = None) -> None:
        self._endpoints: dict[str, str] = dict(endpoints or {})

    def add(self, key: str, template: str) -> None:
        self._endpoints[key] = template

    def build(self, options: Mapping[str, Any]) -> str:
        """Build a URL from route options.

        ``controller`` is required, ``action`` defaults to ``index``.
        Placeholders consume matching options; ``anchor`` becomes the
        fragment and ``host``/``protocol`` make the URL absolute. All
        remaining non-None options become the query string.

        Raises:
            RouteNotFound: Unknown endpoint or unfilled placeholder.
        """
        remaining = dict(options)
        controller = remaining.pop("controller", None)
        if not controller:
            msg = "Route options need a controller"
            raise RouteNotFound(msg, options)
        action = remaining.pop("action", None) or DEFAULT_ACTION
        anchor = remaining.pop("anchor", None)
        host = remaining.pop("host", None)
        protocol = remaining.pop("protocol", None) or "http"

        key = endpoint_key(str(controller), str(action))
        template = self._endpoints.get(key)
        if template is None:
            msg = f"No route matches {key!r}"
            raise RouteNotFound(msg, options)

        def fill(match: re.Match[str]) -> str:
            name = match.group(1)
            value = remaining.pop(name, None)
            if value is None:
                msg = f"Route {key!r} requires {name!r}"
                raise RouteNotFound(msg, options)
            return quote(str(value), safe="")

        url = _PLACEHOLDER.sub(fill, template)
        query = urlencode(
            [(name, value) for name, value in remaining.items() if value is not None],
            doseq=True,
        )
        if query:
            url = f"{url}?{query}"
        if anchor:
            url = f"{url}#{quote(str(anchor), safe='')}"
        if host:
            url = f"{protocol.removesuffix('://')}://{host}{url}"
        return url
