"""Tests for render-directive extraction."""

from __future__ import annotations

import pytest

from linkto.domain.attributes import (
    HttpMethod,
    RenderDirectives,
    extract_directives,
    parse_method,
)
from linkto.domain.errors import ArgumentError


class TestExtractDirectives:
    def test_no_attributes(self) -> None:
        attrs, directives = extract_directives(None)
        assert attrs == {}
        assert directives == RenderDirectives()
        assert directives.method is HttpMethod.GET
        assert directives.requires_form is False

    def test_reserved_keys_removed(self) -> None:
        attrs, directives = extract_directives(
            {"class": "btn", "method": "delete", "remote": True}
        )
        assert attrs == {"class": "btn"}
        assert directives.method is HttpMethod.DELETE
        assert directives.remote is True
        assert directives.requires_form is True

    def test_input_not_mutated(self) -> None:
        raw = {"method": "post", "id": "x"}
        extract_directives(raw)
        assert raw == {"method": "post", "id": "x"}

    def test_method_case_insensitive(self) -> None:
        _, directives = extract_directives({"method": "PATCH"})
        assert directives.method is HttpMethod.PATCH

    def test_none_method_means_get(self) -> None:
        _, directives = extract_directives({"method": None})
        assert directives.method is HttpMethod.GET

    def test_explicit_get_needs_no_form(self) -> None:
        _, directives = extract_directives({"method": "get"})
        assert directives.requires_form is False

    def test_unknown_method(self) -> None:
        with pytest.raises(ArgumentError, match="Unsupported method"):
            extract_directives({"method": "trace"})

    def test_remote_must_be_bool(self) -> None:
        with pytest.raises(ArgumentError, match="remote"):
            extract_directives({"remote": "yes"})

    def test_data_group_kept(self) -> None:
        attrs, _ = extract_directives({"data": {"confirm": "Sure?"}})
        assert attrs == {"data": {"confirm": "Sure?"}}


class TestParseMethod:
    def test_enum_passes_through(self) -> None:
        assert parse_method(HttpMethod.PUT) is HttpMethod.PUT

    def test_non_string(self) -> None:
        with pytest.raises(ArgumentError):
            parse_method(1)
