"""Command: resolve a target to its URL."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linkto.commands._base import LinkCommand
from linkto.commands._options import build_target, parse_pairs, request_options, target_options

if TYPE_CHECKING:
    from linkto.commands._context import AppContext


@click.command(
    cls=LinkCommand,
    examples="""\
  linkto url products#show --route -p id=42
  linkto url :back --referrer http://shop.test/cart
  linkto -q url shop#checkout --route""",
)
@click.argument("target")
@target_options
@request_options
@click.pass_obj
def url(
    app: AppContext,
    target: str,
    route: bool,
    params: tuple[str, ...],
    request_url: str | None,
    referrer: str | None,
    request_method: str,
) -> None:
    """Print the URL TARGET resolves to."""
    parsed = build_target(target, route=route, params=parse_pairs(params, "--param"))
    request = app.request(request_url, referrer=referrer, method=request_method)
    app.emit(app.service(request).url(parsed))
