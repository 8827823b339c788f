"""Exception hierarchy for link generation.

Errors are raised where they are detected and propagate unchanged.
Only the service layer turns them into ``ServiceResult`` errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class LinkError(Exception):
    """Base class for all linkto errors."""


class ArgumentError(LinkError, ValueError):
    """Invalid or ambiguous combination of link arguments."""


class RouteNotFound(LinkError, LookupError):
    """Route options could not be turned into a URL.

    Attributes:
        options: The route options that failed to resolve.
    """

    def __init__(self, message: str, options: Mapping[str, Any] | None = None) -> None:
        self.options = dict(options or {})
        super().__init__(message)


class NoActiveRequest(LinkError, RuntimeError):
    """A helper needed the current request but none is bound."""
