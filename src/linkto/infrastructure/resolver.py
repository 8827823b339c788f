"""Target resolution: turn any target variant into a URL string."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

import structlog

from linkto.domain.errors import RouteNotFound
from linkto.domain.targets import BackReference, LiteralUrl, TargetSpec, coerce_target
from linkto.infrastructure.request import RequestAccessor, active_request

log = structlog.get_logger(__name__)

# Used for a back-reference when the request carries no referrer.
HISTORY_BACK = "javascript:history.back()"


class TargetResolver(Protocol):
    """Builds a URL string from a target. Raises ``RouteNotFound``."""

    def resolve(self, target: TargetSpec) -> str: ...


class RouteBuilder(Protocol):
    def build(self, options: Mapping[str, Any]) -> str: ...


class UrlResolver:
    """Default :class:`TargetResolver`.

    Literal URLs pass through, route options go to *routes*, and the
    back-reference becomes the referrer of *request* (or the active
    request when *request* is None).
    """

    def __init__(
        self,
        routes: RouteBuilder | None = None,
        request: RequestAccessor | None = None,
    ) -> None:
        self._routes = routes
        self._request = request

    def resolve(self, target: TargetSpec | str | Mapping[str, Any]) -> str:
        parsed = coerce_target(target)
        if isinstance(parsed, LiteralUrl):
            return parsed.url
        if isinstance(parsed, BackReference):
            return self._referrer()
        if self._routes is None:
            msg = "No route table configured"
            raise RouteNotFound(msg, parsed.options)
        url = self._routes.build(parsed.options)
        log.debug("route.resolved", options=parsed.options, url=url)
        return url

    def _referrer(self) -> str:
        request = self._request if self._request is not None else active_request()
        if request.has_referrer():
            referrer = request.referrer_uri()
            if referrer:
                return referrer
        return HISTORY_BACK
