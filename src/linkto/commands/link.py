"""Command: render a link."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linkto.commands._base import LinkCommand
from linkto.commands._options import (
    build_attributes,
    build_target,
    method_choice,
    parse_pairs,
    request_options,
    target_options,
)
from linkto.domain.matching import ComparisonMode

if TYPE_CHECKING:
    from linkto.commands._context import AppContext


@click.command(
    cls=LinkCommand,
    examples="""\
  linkto link Home /
  linkto link "" https://example.com            # label derived from the URL
  linkto link Delete /posts/7 --method delete --data confirm="Sure?"
  linkto link Checkout shop#checkout --route -p step=2
  linkto link Back :back --referrer http://shop.test/cart
  linkto link Admin /admin --if false
  linkto link Cart /cart --unless-current -r /cart""",
)
@click.argument("label")
@click.argument("target")
@click.option(
    "--attr", "-a", "attrs", multiple=True, metavar="KEY[=VALUE]", help="HTML attribute."
)
@click.option("--data", "-d", multiple=True, metavar="KEY=VALUE", help="data-* attribute.")
@click.option("--method", "-m", type=method_choice(), default=None, help="HTTP method.")
@click.option("--remote", is_flag=True, help="Mark for async submission.")
@click.option("--if", "if_", type=click.BOOL, default=None, help="Link only when true.")
@click.option("--unless", type=click.BOOL, default=None, help="Link only when false.")
@click.option("--unless-current", is_flag=True, help="Plain label on the current page.")
@click.option("--check-query", is_flag=True, help="With --unless-current, compare query too.")
@target_options
@request_options
@click.pass_obj
def link(
    app: AppContext,
    label: str,
    target: str,
    attrs: tuple[str, ...],
    data: tuple[str, ...],
    method: str | None,
    remote: bool,
    if_: bool | None,
    unless: bool | None,
    unless_current: bool,
    check_query: bool,
    route: bool,
    params: tuple[str, ...],
    request_url: str | None,
    referrer: str | None,
    request_method: str,
) -> None:
    """Render a link to TARGET labelled LABEL (empty LABEL: show the URL)."""
    chosen = [flag for flag in (if_ is not None, unless is not None, unless_current) if flag]
    if len(chosen) > 1:
        msg = "Use only one of --if, --unless, --unless-current"
        raise click.UsageError(msg)

    parsed = build_target(target, route=route, params=parse_pairs(params, "--param"))
    attributes = build_attributes(attrs, data, method, remote)
    request = app.request(request_url, referrer=referrer, method=request_method)
    service = app.service(request)
    text = label or None

    if unless_current:
        mode = ComparisonMode.PATH_AND_QUERY if check_query else ComparisonMode.PATH_ONLY
        result = service.conditional_link(
            None, text, parsed, attributes, unless_current=True, mode=mode
        )
    elif if_ is not None:
        result = service.conditional_link(if_, text, parsed, attributes)
    elif unless is not None:
        result = service.conditional_link(not unless, text, parsed, attributes)
    else:
        result = service.link(text, parsed, attributes)
    app.emit(result)
