"""Shared pytest fixtures for linkto tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from linkto.helpers.links import LinkHelper
from linkto.infrastructure.html import HtmlRenderer
from linkto.infrastructure.request import RequestContext
from linkto.infrastructure.resolver import UrlResolver
from linkto.infrastructure.routes import RouteTable

SHOP_ROUTES: dict[str, str] = {
    "shop#index": "/shop",
    "shop#checkout": "/shop/checkout",
    "products#show": "/products/{id}",
}

CHECKOUT_URL = "http://shop.test/shop/checkout?order=desc&page=1"

PROJECT_TOML = """\
[site]
host = "shop.test"

[routes]
"shop#index" = "/shop"
"shop#checkout" = "/shop/checkout"
"products#show" = "/products/{id}"
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def routes() -> RouteTable:
    return RouteTable(SHOP_ROUTES)


@pytest.fixture
def request_ctx() -> RequestContext:
    """A GET on the checkout page with a query string and a referrer."""
    return RequestContext(url=CHECKOUT_URL, referrer="http://shop.test/cart")


@pytest.fixture
def renderer() -> HtmlRenderer:
    return HtmlRenderer()


@pytest.fixture
def helper(routes: RouteTable, renderer: HtmlRenderer, request_ctx: RequestContext) -> LinkHelper:
    """LinkHelper bound to the checkout request."""
    return LinkHelper(UrlResolver(routes, request=request_ctx), renderer, request=request_ctx)


@pytest.fixture
def unbound_helper(routes: RouteTable, renderer: HtmlRenderer) -> LinkHelper:
    """LinkHelper that reads the request from request_scope()."""
    return LinkHelper(UrlResolver(routes), renderer)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project with a linkto.toml declaring the shop routes."""
    (tmp_path / "linkto.toml").write_text(PROJECT_TOML)
    return tmp_path


@pytest.fixture
def _isolated_project(
    project_root: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None]:
    """Run CLI commands from the temporary project with a clean environment.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.chdir(project_root)
    monkeypatch.delenv("LINKTO_CONFIG", raising=False)
    monkeypatch.delenv("LINKTO_SITE__HOST", raising=False)
    yield


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by a test or a CLI invocation."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    linkto = logging.getLogger("linkto")
    linkto_level = linkto.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    linkto.setLevel(linkto_level)
    structlog.reset_defaults()
