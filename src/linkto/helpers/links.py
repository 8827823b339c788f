"""LinkHelper: ``link_to`` and friends for server-side views.

Ties the pure domain pieces (argument normalization, current-target
matching) to the collaborators that resolve URLs, read the active
request and emit HTML. Errors from either side propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

import structlog
from markupsafe import Markup

from linkto.domain.arguments import ContentProducer, DeferredContent, normalize_link_args
from linkto.domain.errors import ArgumentError
from linkto.domain.matching import ComparisonMode, is_current
from linkto.domain.targets import BackReference, TargetSpec, coerce_target
from linkto.infrastructure.html import HtmlRenderer, Renderer
from linkto.infrastructure.request import (
    SAFE_METHODS,
    RequestAccessor,
    active_request,
    request_method,
)
from linkto.infrastructure.resolver import TargetResolver, UrlResolver
from linkto.infrastructure.routes import RouteTable

if TYPE_CHECKING:
    from linkto.config.settings import LinkSettings

log = structlog.get_logger(__name__)

OverrideProducer = Callable[[], str]

# Marks an omitted target slot, so ``link_to_if(cond, "/about")`` reads as target-only.
_NO_TARGET: Any = object()


def _link_slots(label: Any, target: Any, attributes: Any) -> tuple[Any, ...]:
    if target is _NO_TARGET:
        return (label,) if attributes is None else (None, label, attributes)
    return (label, target, attributes)


class LinkHelper:
    """View helpers bound to a resolver, a renderer and (optionally) a request.

    When *request* is None every call reads the request bound by
    :func:`linkto.infrastructure.request.request_scope`.

    Usage::

        helper = LinkHelper(UrlResolver(routes), HtmlRenderer())
        with request_scope(RequestContext(url="http://shop.test/cart")):
            helper.link_to("Checkout", {"controller": "shop", "action": "checkout"})
    """

    def __init__(
        self,
        resolver: TargetResolver,
        renderer: Renderer,
        request: RequestAccessor | None = None,
    ) -> None:
        self._resolver = resolver
        self._renderer = renderer
        self._request = request

    @classmethod
    def from_settings(
        cls,
        settings: LinkSettings,
        request: RequestAccessor | None = None,
    ) -> LinkHelper:
        """Wire the default collaborators from configuration."""
        routes = RouteTable(settings.routes)
        renderer = HtmlRenderer(
            template_dir=settings.resolve_template_dir(),
            method_param=settings.render.method_param,
            form_class=settings.render.form_class,
        )
        return cls(UrlResolver(routes, request=request), renderer, request=request)

    @property
    def request(self) -> RequestAccessor:
        return self._request if self._request is not None else active_request()

    # ── URLs ──────────────────────────────────────────────────────────

    def url_for(self, target: TargetSpec | str | Mapping[str, Any]) -> str:
        """Resolve *target* to a URL string."""
        return self._resolver.resolve(coerce_target(target))

    # ── Links ─────────────────────────────────────────────────────────

    def link_to(
        self,
        *args: Any,
        content: ContentProducer | DeferredContent | None = None,
    ) -> Markup:
        """Render a link from any accepted call shape.

        ``link_to(target)``, ``link_to(label, target, attributes)`` or
        ``link_to(target, attributes, content=producer)``. ``method`` and
        ``remote`` in the attributes become render directives.
        """
        call = normalize_link_args(*args, content=content)
        href = self._resolver.resolve(call.target)
        log.debug(
            "link.normalized",
            target=call.target.kind,
            method=call.directives.method.value,
            derived_label=call.label is None,
        )
        html = self._renderer.render_anchor(
            call.display_label(href), href, call.attributes, call.directives
        )
        log.debug("link.rendered", href=href, form=call.directives.requires_form)
        return html

    def link_to_if(
        self,
        condition: bool,
        label: Any,
        target: Any = _NO_TARGET,
        attributes: Mapping[str, Any] | None = None,
        *,
        override: OverrideProducer | None = None,
    ) -> Markup:
        """Render a link when *condition* holds, else the plain label.

        With *target* omitted, *label* is the target and the URL is shown
        (``link_to_if(cond, "/about")``). *override*, when given, replaces
        the output in either branch and is returned verbatim.
        """
        if override is not None:
            return Markup(override())
        slots = _link_slots(label, target, attributes)
        if condition:
            return self.link_to(*slots)
        call = normalize_link_args(*slots)
        text = call.label if call.label is not None else self._resolver.resolve(call.target)
        return self._renderer.render_label(text)

    def link_to_unless(
        self,
        condition: bool,
        label: Any,
        target: Any = _NO_TARGET,
        attributes: Mapping[str, Any] | None = None,
        *,
        override: OverrideProducer | None = None,
    ) -> Markup:
        """Inverse of :meth:`link_to_if`."""
        return self.link_to_if(not condition, label, target, attributes, override=override)

    def link_to_unless_current(
        self,
        label: str | None,
        target: Any,
        attributes: Mapping[str, Any] | None = None,
        *,
        override: OverrideProducer | None = None,
        mode: ComparisonMode = ComparisonMode.PATH_ONLY,
    ) -> Markup:
        """Render a link unless *target* is the page being viewed."""
        current = self.current_page(target, mode=mode)
        return self.link_to_unless(current, label, target, attributes, override=override)

    # ── Current page ──────────────────────────────────────────────────

    def current_page(
        self,
        target: TargetSpec | str | Mapping[str, Any],
        *,
        mode: ComparisonMode = ComparisonMode.PATH_ONLY,
    ) -> bool:
        """True if *target* is the current request's URI.

        Only GET and HEAD requests can be "current"; a form submission
        never is.

        Raises:
            ArgumentError: *target* is the back-reference.
        """
        if isinstance(coerce_target(target), BackReference):
            msg = "Cannot compare a back-reference against the current page"
            raise ArgumentError(msg)
        request = self.request
        if request_method(request) not in SAFE_METHODS:
            log.debug("current_page.compared", result=False, reason="unsafe_method")
            return False
        result = is_current(
            target, ComparisonMode(mode), request.current_uri(), self._resolver.resolve
        )
        log.debug("current_page.compared", mode=str(mode), result=result)
        return result
