"""Link targets: where a link points.

Three variants from the data model:
- ``LiteralUrl``: an already-built URL string.
- ``RouteOptions``: structured options handed to a route builder.
- ``BackReference``: "the referring page" (spelled ``BACK``).

INVARIANT: exactly one variant per value; values are immutable.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from linkto.domain.errors import ArgumentError


class LiteralUrl(BaseModel):
    """A literal URL, absolute or relative."""

    model_config = {"frozen": True}

    kind: Literal["url"] = "url"
    url: str


class RouteOptions(BaseModel):
    """Structured routing options (``controller``, ``action``, params...)."""

    model_config = {"frozen": True}

    kind: Literal["route"] = "route"
    options: dict[str, Any] = Field(default_factory=dict)


class BackReference(BaseModel):
    """Link to the referring page."""

    model_config = {"frozen": True}

    kind: Literal["back"] = "back"


TargetSpec = Annotated[LiteralUrl | RouteOptions | BackReference, Field(discriminator="kind")]

TARGET_TYPES: tuple[type[BaseModel], ...] = (LiteralUrl, RouteOptions, BackReference)

BACK = BackReference()


def is_target_spec(value: object) -> bool:
    """Return True if *value* is already one of the target variants."""
    return isinstance(value, TARGET_TYPES)


def coerce_target(value: object) -> TargetSpec:
    """Classify a raw call argument as a target variant.

    ``str`` becomes a literal URL and any mapping becomes route options.
    Variants pass through untouched.
    """
    if isinstance(value, TARGET_TYPES):
        return value  # type: ignore[return-value]
    if isinstance(value, str):
        return LiteralUrl(url=value)
    if isinstance(value, Mapping):
        return RouteOptions(options=dict(value))
    msg = f"Cannot use {type(value).__name__} as a link target"
    raise ArgumentError(msg)
