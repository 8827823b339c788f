"""LinkService: link operations wrapped as ServiceResult.

This is the caller that decides what to do with helper failures:
``ArgumentError`` and ``RouteNotFound`` become structured errors here,
never earlier.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import structlog

from linkto.domain.arguments import normalize_link_args
from linkto.domain.errors import ArgumentError, NoActiveRequest, RouteNotFound
from linkto.domain.matching import ComparisonMode
from linkto.domain.targets import BackReference, LiteralUrl, TargetSpec, coerce_target
from linkto.helpers.links import LinkHelper
from linkto.services.contracts import (
    CurrentPageResultData,
    LinkResultData,
    UrlResultData,
    dump_validated,
)
from linkto.services.result import ServiceResult

log = structlog.get_logger(__name__)


def describe_target(target: TargetSpec) -> str:
    """Short human form: the URL, ``:back``, or ``controller#action?params``."""
    if isinstance(target, LiteralUrl):
        return target.url
    if isinstance(target, BackReference):
        return ":back"
    options = dict(target.options)
    endpoint = f"{options.pop('controller', '?')}#{options.pop('action', 'index')}"
    if not options:
        return endpoint
    params = ",".join(f"{key}={value}" for key, value in options.items())
    return f"{endpoint}({params})"


class LinkService:
    """Runs :class:`LinkHelper` operations and reports ServiceResults."""

    def __init__(self, helper: LinkHelper) -> None:
        self._helper = helper

    def _guard(self, op: str, action: Callable[[], ServiceResult]) -> ServiceResult:
        try:
            return action()
        except ArgumentError as exc:
            return ServiceResult.failure(op, "INVALID_ARGUMENTS", str(exc))
        except RouteNotFound as exc:
            detail = {"options": {key: str(value) for key, value in exc.options.items()}}
            return ServiceResult.failure(op, "ROUTE_NOT_FOUND", str(exc), detail)
        except NoActiveRequest as exc:
            return ServiceResult.failure(op, "NO_REQUEST", str(exc))

    # ── Operations ────────────────────────────────────────────────────

    def link(
        self,
        label: str | None,
        target: Any,
        attributes: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Render ``link_to(label, target, attributes)``."""
        op = "link_to"

        def run() -> ServiceResult:
            call = normalize_link_args(label, target, attributes)
            href = self._helper.url_for(call.target)
            html = self._helper.link_to(label, target, attributes)
            data = dump_validated(
                LinkResultData,
                {
                    "html": str(html),
                    "href": href,
                    "linked": True,
                    "method": call.directives.method.value,
                },
            )
            return ServiceResult.success(op, data)

        return self._guard(op, run)

    def conditional_link(
        self,
        condition: bool | None,
        label: str | None,
        target: Any,
        attributes: Mapping[str, Any] | None = None,
        *,
        unless_current: bool = False,
        mode: ComparisonMode = ComparisonMode.PATH_ONLY,
    ) -> ServiceResult:
        """Render ``link_to_if`` (or ``link_to_unless_current``).

        With *unless_current* the condition is "target is not the current
        page" and *condition* is ignored.
        """
        op = "link_to_if"

        def run() -> ServiceResult:
            warnings: list[str] = []
            if unless_current:
                linked = not self._helper.current_page(target, mode=mode)
                if condition is not None:
                    warnings.append("Condition ignored when checking the current page")
            else:
                linked = bool(condition)
            call = normalize_link_args(label, target, attributes)
            html = self._helper.link_to_if(linked, label, target, attributes)
            href = self._helper.url_for(call.target) if linked else None
            data = dump_validated(
                LinkResultData,
                {
                    "html": str(html),
                    "href": href,
                    "linked": linked,
                    "method": call.directives.method.value,
                },
            )
            return ServiceResult.success(op, data, warnings)

        return self._guard(op, run)

    def url(self, target: Any) -> ServiceResult:
        """Resolve *target* with ``url_for``."""
        op = "url_for"

        def run() -> ServiceResult:
            parsed = coerce_target(target)
            data = dump_validated(
                UrlResultData,
                {"target": describe_target(parsed), "url": self._helper.url_for(parsed)},
            )
            return ServiceResult.success(op, data)

        return self._guard(op, run)

    def current(
        self,
        target: Any,
        *,
        mode: ComparisonMode = ComparisonMode.PATH_ONLY,
    ) -> ServiceResult:
        """Check whether *target* is the current page."""
        op = "current_page"

        def run() -> ServiceResult:
            parsed = coerce_target(target)
            current = self._helper.current_page(parsed, mode=mode)
            log.debug("service.current_page", target=describe_target(parsed), current=current)
            data = dump_validated(
                CurrentPageResultData,
                {
                    "target": describe_target(parsed),
                    "request_url": self._helper.request.current_uri().to_url(),
                    "mode": ComparisonMode(mode).value,
                    "current": current,
                },
            )
            return ServiceResult.success(op, data)

        return self._guard(op, run)
