"""HTML rendering for links and method-override forms.

GET links become anchors. Any other method becomes a small POST form
with a hidden method-override field and a submit button, so the link
still works as a real request from a plain browser.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from markupsafe import Markup, escape

from linkto.domain.attributes import HttpMethod, RenderDirectives
from linkto.domain.errors import ArgumentError
from linkto.infrastructure.templates import build_template_environment

# Attributes the renderer turns into data-* attributes.
_DATA_SHORTHANDS: tuple[str, ...] = ("confirm", "disable_with")


class Renderer(Protocol):
    """Turns a resolved link into markup."""

    def render_anchor(
        self,
        label: str,
        href: str,
        attributes: Mapping[str, Any],
        directives: RenderDirectives,
    ) -> Markup: ...

    def render_label(self, label: str) -> Markup: ...


def _split_data(attributes: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    attrs = dict(attributes)
    existing = attrs.pop("data", None)
    if existing is not None and not isinstance(existing, Mapping):
        msg = f"data attribute must be a mapping, got {type(existing).__name__}"
        raise ArgumentError(msg)
    data = dict(existing or {})
    for key in _DATA_SHORTHANDS:
        if key in attrs:
            data[key] = attrs.pop(key)
    return attrs, data


class HtmlRenderer:
    """Jinja2-backed :class:`Renderer`."""

    def __init__(
        self,
        *,
        template_dir: Path | None = None,
        method_param: str = "_method",
        form_class: str = "button_to",
    ) -> None:
        self._env = build_template_environment("html", override_root=template_dir)
        self._method_param = method_param
        self._form_class = form_class

    def render_anchor(
        self,
        label: str,
        href: str,
        attributes: Mapping[str, Any],
        directives: RenderDirectives,
    ) -> Markup:
        attrs, data = _split_data(attributes)
        if directives.requires_form:
            return self._render_form(label, href, attrs, data, directives)

        if directives.remote:
            data["remote"] = "true"
        if data:
            attrs["data"] = data
        template = self._env.get_template("anchor.html.j2")
        return Markup(template.render(label=label, href=href, attributes=attrs))

    def _render_form(
        self,
        label: str,
        href: str,
        attrs: dict[str, Any],
        data: dict[str, Any],
        directives: RenderDirectives,
    ) -> Markup:
        if data:
            attrs["data"] = data
        form_attributes = {"data": {"remote": "true"}} if directives.remote else {}
        template = self._env.get_template("method_form.html.j2")
        return Markup(
            template.render(
                label=label,
                href=href,
                attributes=attrs,
                form_attributes=form_attributes,
                form_class=self._form_class,
                method=HttpMethod(directives.method).value,
                method_param=self._method_param,
            )
        )

    def render_label(self, label: str) -> Markup:
        return escape(label)
