"""The active request: current URI and referrer.

Helpers read the request either from an explicit accessor or from the
request bound to the current context with :func:`request_scope`.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol, runtime_checkable
from urllib.parse import urlsplit

from pydantic import BaseModel, field_validator

from linkto.domain.errors import NoActiveRequest
from linkto.domain.matching import UriParts, parse_uri

SAFE_METHODS: frozenset[str] = frozenset({"GET", "HEAD"})


@runtime_checkable
class RequestAccessor(Protocol):
    """Read-only view of the request being rendered."""

    def current_uri(self) -> UriParts: ...

    def has_referrer(self) -> bool: ...

    def referrer_uri(self) -> str | None: ...


class RequestContext(BaseModel):
    """Immutable snapshot of a request, built from its full URL."""

    model_config = {"frozen": True}

    url: str
    method: str = "GET"
    referrer: str | None = None

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            msg = f"Request URL must be absolute: {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return value.upper()

    @property
    def is_get_or_head(self) -> bool:
        return self.method in SAFE_METHODS

    def current_uri(self) -> UriParts:
        return parse_uri(self.url)

    def has_referrer(self) -> bool:
        return bool(self.referrer)

    def referrer_uri(self) -> str | None:
        return self.referrer or None


_active_request: ContextVar[RequestAccessor | None] = ContextVar("_active_request", default=None)


@contextmanager
def request_scope(request: RequestAccessor) -> Generator[RequestAccessor]:
    """Bind *request* as the active request for the enclosed block."""
    token = _active_request.set(request)
    try:
        yield request
    finally:
        _active_request.reset(token)


def active_request() -> RequestAccessor:
    """Return the bound request.

    Raises:
        NoActiveRequest: Nothing is bound in this context.
    """
    request = _active_request.get()
    if request is None:
        msg = "No active request; wrap the call in request_scope()"
        raise NoActiveRequest(msg)
    return request


def request_method(request: RequestAccessor) -> str:
    """HTTP method of *request*; accessors without one count as GET."""
    return str(getattr(request, "method", "GET")).upper()
