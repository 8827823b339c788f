"""Shared option decorators and argument parsing for link commands.

Target spelling on the command line:
- ``:back``                 -> the back-reference
- ``shop#checkout --route`` -> route options (``--param`` adds more)
- anything else             -> a literal URL
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

from linkto.domain.attributes import HttpMethod
from linkto.domain.targets import BACK, LiteralUrl, RouteOptions, TargetSpec
from linkto.infrastructure.routes import DEFAULT_ACTION

BACK_SPELLING = ":back"

_F = TypeVar("_F", bound=Callable[..., Any])


def parse_pairs(values: tuple[str, ...], option: str) -> dict[str, Any]:
    """Parse repeated ``KEY=VALUE`` options; a bare ``KEY`` means True."""
    pairs: dict[str, Any] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        if not key:
            msg = f"Expected KEY=VALUE, got {raw!r}"
            raise click.BadParameter(msg, param_hint=option)
        pairs[key] = value if sep else True
    return pairs


def build_target(raw: str, *, route: bool, params: dict[str, Any]) -> TargetSpec:
    """Turn the TARGET argument plus route flags into a target variant."""
    if raw == BACK_SPELLING:
        if route or params:
            msg = f"{BACK_SPELLING} takes no --route or --param"
            raise click.BadParameter(msg, param_hint="TARGET")
        return BACK
    if route:
        controller, _, action = raw.partition("#")
        if not controller:
            msg = f"Expected CONTROLLER#ACTION, got {raw!r}"
            raise click.BadParameter(msg, param_hint="TARGET")
        options: dict[str, Any] = {"controller": controller, "action": action or DEFAULT_ACTION}
        options.update(params)
        return RouteOptions(options=options)
    if params:
        msg = "--param only applies with --route"
        raise click.BadParameter(msg, param_hint="--param")
    return LiteralUrl(url=raw)


def build_attributes(
    attrs: tuple[str, ...],
    data: tuple[str, ...],
    method: str | None,
    remote: bool,
) -> dict[str, Any]:
    """Collect HTML attributes and the reserved ``method``/``remote`` keys."""
    attributes = parse_pairs(attrs, "--attr")
    data_attributes = parse_pairs(data, "--data")
    if data_attributes:
        attributes["data"] = data_attributes
    if method:
        attributes["method"] = method
    if remote:
        attributes["remote"] = True
    return attributes


def target_options(func: _F) -> _F:
    """``--route`` and ``--param`` for commands taking a TARGET."""
    func = click.option(
        "--param",
        "-p",
        "params",
        multiple=True,
        metavar="KEY=VALUE",
        help="Route parameter (repeatable, needs --route).",
    )(func)
    func = click.option(
        "--route", is_flag=True, help="Read TARGET as CONTROLLER#ACTION route options."
    )(func)
    return func


def request_options(func: _F) -> _F:
    """Options describing the request the helpers run against."""
    func = click.option(
        "--request-method",
        default="GET",
        show_default=True,
        help="HTTP method of the current request.",
    )(func)
    func = click.option("--referrer", default=None, help="Referrer URL (used by :back).")(func)
    func = click.option(
        "--request-url",
        "-r",
        default=None,
        help="Current request URL; a bare path is joined to the configured site.",
    )(func)
    return func


def method_choice() -> click.Choice:
    return click.Choice([m.value for m in HttpMethod], case_sensitive=False)
