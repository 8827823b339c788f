"""Command: check whether a target is the current page."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linkto.commands._base import LinkCommand
from linkto.commands._options import build_target, parse_pairs, request_options, target_options
from linkto.domain.matching import ComparisonMode

if TYPE_CHECKING:
    from linkto.commands._context import AppContext


@click.command(
    cls=LinkCommand,
    examples="""\
  linkto current /shop/checkout -r "/shop/checkout?page=2"
  linkto current /shop/checkout -r "/shop/checkout?page=2" --check-query
  linkto current shop#checkout --route -r http://shop.test/shop/checkout""",
)
@click.argument("target")
@click.option("--check-query", is_flag=True, help="Compare the query string as well as the path.")
@target_options
@request_options
@click.pass_obj
def current(
    app: AppContext,
    target: str,
    check_query: bool,
    route: bool,
    params: tuple[str, ...],
    request_url: str | None,
    referrer: str | None,
    request_method: str,
) -> None:
    """Report whether TARGET is the page at --request-url."""
    parsed = build_target(target, route=route, params=parse_pairs(params, "--param"))
    mode = ComparisonMode.PATH_AND_QUERY if check_query else ComparisonMode.PATH_ONLY
    request = app.request(request_url, referrer=referrer, method=request_method)
    app.emit(app.service(request).current(parsed, mode=mode))
