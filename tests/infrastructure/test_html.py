"""Tests for HTML attribute serialization and the link renderer."""

from __future__ import annotations

from pathlib import Path

import pytest
from markupsafe import Markup

from linkto.domain.attributes import HttpMethod, RenderDirectives
from linkto.domain.errors import ArgumentError
from linkto.infrastructure.attrs import html_attributes
from linkto.infrastructure.html import HtmlRenderer

GET = RenderDirectives()


class TestHtmlAttributes:
    def test_empty(self) -> None:
        assert html_attributes({}) == ""
        assert html_attributes(None) == ""

    def test_plain_values_keep_order(self) -> None:
        assert html_attributes({"id": "x", "class": "a"}) == ' id="x" class="a"'

    def test_booleans(self) -> None:
        assert html_attributes({"hidden": True, "disabled": False, "title": None}) == " hidden"

    def test_lists_joined(self) -> None:
        assert html_attributes({"class": ["btn", "primary"]}) == ' class="btn primary"'

    def test_nested_group(self) -> None:
        result = html_attributes({"data": {"turbo_frame": "main", "count": 3}})
        assert result == ' data-turbo-frame="main" data-count="3"'

    def test_nested_structured_value_is_json(self) -> None:
        result = html_attributes({"data": {"ids": [1, 2]}})
        assert result == ' data-ids="[1,2]"'

    def test_escaping(self) -> None:
        result = html_attributes({"title": 'say "hi" <now>'})
        assert result == ' title="say &#34;hi&#34; &lt;now&gt;"'

    def test_returns_markup(self) -> None:
        assert isinstance(html_attributes({"id": "x"}), Markup)


class TestRenderAnchor:
    def test_plain_anchor(self, renderer: HtmlRenderer) -> None:
        html = renderer.render_anchor("Home", "/", {"class": "nav"}, GET)
        assert html == '<a href="/" class="nav">Home</a>'

    def test_label_escaped(self, renderer: HtmlRenderer) -> None:
        html = renderer.render_anchor("<b>x</b>", "/", {}, GET)
        assert html == '<a href="/">&lt;b&gt;x&lt;/b&gt;</a>'

    def test_markup_label_kept(self, renderer: HtmlRenderer) -> None:
        html = renderer.render_anchor(Markup("<b>x</b>"), "/", {}, GET)
        assert html == '<a href="/"><b>x</b></a>'

    def test_href_escaped(self, renderer: HtmlRenderer) -> None:
        html = renderer.render_anchor("Q", "/s?a=1&b=2", {}, GET)
        assert html == '<a href="/s?a=1&amp;b=2">Q</a>'

    def test_remote(self, renderer: HtmlRenderer) -> None:
        html = renderer.render_anchor("More", "/more", {}, RenderDirectives(remote=True))
        assert html == '<a href="/more" data-remote="true">More</a>'

    def test_confirm_shorthand(self, renderer: HtmlRenderer) -> None:
        html = renderer.render_anchor("Go", "/go", {"confirm": "Sure?"}, GET)
        assert html == '<a href="/go" data-confirm="Sure?">Go</a>'

    def test_data_must_be_mapping(self, renderer: HtmlRenderer) -> None:
        with pytest.raises(ArgumentError, match="data attribute"):
            renderer.render_anchor("Go", "/go", {"data": "x"}, GET)

    def test_attributes_not_mutated(self, renderer: HtmlRenderer) -> None:
        attrs = {"data": {"a": "1"}, "confirm": "Sure?"}
        renderer.render_anchor("Go", "/go", attrs, RenderDirectives(remote=True))
        assert attrs == {"data": {"a": "1"}, "confirm": "Sure?"}


class TestRenderForm:
    def test_delete_form(self, renderer: HtmlRenderer) -> None:
        html = renderer.render_anchor(
            "Delete", "/posts/7", {}, RenderDirectives(method=HttpMethod.DELETE)
        )
        assert html == (
            '<form class="button_to" method="post" action="/posts/7">'
            '<input type="hidden" name="_method" value="delete">'
            '<button type="submit">Delete</button></form>'
        )

    def test_post_has_no_override_field(self, renderer: HtmlRenderer) -> None:
        html = renderer.render_anchor("Buy", "/buy", {}, RenderDirectives(method=HttpMethod.POST))
        assert "_method" not in html
        assert '<form class="button_to" method="post" action="/buy">' in html

    def test_confirm_and_disable_on_button(self, renderer: HtmlRenderer) -> None:
        html = renderer.render_anchor(
            "Delete",
            "/posts/7",
            {"confirm": "Sure?", "disable_with": "Deleting", "class": "danger"},
            RenderDirectives(method=HttpMethod.DELETE, remote=True),
        )
        assert '<form class="button_to" method="post" action="/posts/7" data-remote="true">' in html
        assert (
            '<button type="submit" class="danger" data-confirm="Sure?" '
            'data-disable-with="Deleting">Delete</button>'
        ) in html

    def test_custom_method_param_and_class(self) -> None:
        renderer = HtmlRenderer(method_param="_verb", form_class="inline")
        html = renderer.render_anchor("Put", "/p", {}, RenderDirectives(method=HttpMethod.PUT))
        assert html.startswith('<form class="inline"')
        assert 'name="_verb" value="put"' in html


class TestRenderLabel:
    def test_escaped_text(self, renderer: HtmlRenderer) -> None:
        assert renderer.render_label("A & B") == "A &amp; B"


class TestTemplateOverride:
    def test_override_directory(self, tmp_path: Path) -> None:
        group = tmp_path / "html"
        group.mkdir()
        (group / "anchor.html.j2").write_text('<a class="custom" href="{{ href }}">{{ label }}</a>')
        renderer = HtmlRenderer(template_dir=tmp_path)
        assert renderer.render_anchor("X", "/x", {}, GET) == '<a class="custom" href="/x">X</a>'

    def test_flat_override(self, tmp_path: Path) -> None:
        (tmp_path / "anchor.html.j2").write_text("[{{ label }}]({{ href }})")
        renderer = HtmlRenderer(template_dir=tmp_path)
        assert renderer.render_anchor("X", "/x", {}, GET) == "[X](/x)"

    def test_form_falls_back_to_package(self, tmp_path: Path) -> None:
        (tmp_path / "anchor.html.j2").write_text("custom")
        renderer = HtmlRenderer(template_dir=tmp_path)
        html = renderer.render_anchor("D", "/d", {}, RenderDirectives(method=HttpMethod.DELETE))
        assert html.startswith("<form")
