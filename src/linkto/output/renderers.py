"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from linkto.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from linkto.services.result import ServiceResult

_Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Bare value for ``--quiet``: the HTML, the URL, or true/false."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    data = result.data
    if "html" in data:
        return str(data["html"])
    if "url" in data:
        return str(data["url"])
    if "current" in data:
        return "true" if data["current"] else "false"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="lk.ok"), Text(f"  {result.op}", style="lk.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="lk.key"), Text(str(value), style=style))


def _yes_no(flag: bool) -> Text:
    return Text("yes", style="lk.yes") if flag else Text("no", style="lk.no")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="lk.error"),
        Text(f"  {result.op}{code}", style="lk.op"),
        Text(msg),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_link(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "html", data.get("html", ""), "lk.html")
    if data.get("href") is not None:
        _field(console, "href", data["href"], "lk.url")
    if verbose:
        console.print(Text("  linked: ", style="lk.key"), _yes_no(bool(data.get("linked"))))
        _field(console, "method", data.get("method", "get"))


def _render_url(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "target", result.data.get("target", ""))
    _field(console, "url", result.data.get("url", ""), "lk.url")


def _render_current(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    console.print(Text("  current: ", style="lk.key"), _yes_no(bool(data.get("current"))))
    _field(console, "target", data.get("target", ""))
    _field(console, "request", data.get("request_url", ""), "lk.url")
    if verbose:
        _field(console, "mode", data.get("mode", ""))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "link_to": _render_link,
    "link_to_if": _render_link,
    "url_for": _render_url,
    "current_page": _render_current,
}
