"""Typed payload contracts for LinkService results.

Payload shapes are validated before they leave the service layer so a
renamed key fails in tests instead of in a consumer.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class LinkResultData(BaseModel):
    """Payload for ``link_to`` / ``link_to_if``."""

    html: str
    href: str | None
    linked: bool
    method: Literal["get", "post", "put", "patch", "delete"] = "get"


class UrlResultData(BaseModel):
    """Payload for ``url_for``."""

    target: str
    url: str


class CurrentPageResultData(BaseModel):
    """Payload for ``current_page``."""

    target: str
    request_url: str
    mode: Literal["path_only", "path_and_query"]
    current: bool
