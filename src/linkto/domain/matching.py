"""Current-target matching: is this target the page being viewed?

Comparison rules:
- Path: exact string equality after percent-decoding. No trailing-slash
  folding: ``/shop`` and ``/shop/`` are different pages.
- Query: only in ``PATH_AND_QUERY`` mode. Parameters compare as
  unordered key=value pairs, so neither key order nor the order of a
  repeated key's values matters; a missing or extra key on either side is
  a mismatch, so a bare target never matches a current URI that carries
  a query string.
- Scheme and host: compared only when the target is absolute. Relative
  targets inherit them from the current URI.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import parse_qsl, quote, unquote, urlencode, urlsplit

from linkto.domain.errors import ArgumentError
from linkto.domain.targets import BackReference, LiteralUrl, TargetSpec, coerce_target


class ComparisonMode(StrEnum):
    """How much of the URI takes part in the comparison."""

    PATH_ONLY = "path_only"
    PATH_AND_QUERY = "path_and_query"


@dataclass(frozen=True)
class UriParts:
    """A URI split into the pieces the matcher compares."""

    scheme: str
    host: str
    path: str
    query: tuple[tuple[str, str], ...] = ()

    @property
    def has_query(self) -> bool:
        return bool(self.query)

    def to_url(self) -> str:
        """Reassemble the parts (query re-encoded, path re-quoted)."""
        query = urlencode(self.query)
        url = f"{self.scheme}://{self.host}{quote(self.path)}" if self.host else quote(self.path)
        return f"{url}?{query}" if query else url


def parse_uri(url: str, base: UriParts | None = None) -> UriParts:
    """Split *url* into ``UriParts``.

    A reference without a scheme or host takes the missing part from
    *base*, so ``//host/s`` inherits only the scheme. The path is
    percent-decoded; the fragment is dropped.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = parts.netloc.lower()
    path = unquote(parts.path)
    if host and not path:
        path = "/"
    if base is not None:
        scheme = scheme or base.scheme
        host = host or base.host
    query = tuple(parse_qsl(parts.query, keep_blank_values=True))
    return UriParts(scheme=scheme, host=host, path=path, query=query)


def query_map(pairs: Iterable[tuple[str, str]]) -> dict[str, frozenset[str]]:
    """Group query pairs by key into unordered value sets."""
    grouped: dict[str, set[str]] = {}
    for key, value in pairs:
        grouped.setdefault(key, set()).add(value)
    return {key: frozenset(values) for key, values in grouped.items()}


def uri_matches(target: UriParts, current: UriParts, mode: ComparisonMode) -> bool:
    """Compare two parsed URIs under *mode*."""
    if target.host and (target.scheme, target.host) != (current.scheme, current.host):
        return False
    if target.path != current.path:
        return False
    if mode == ComparisonMode.PATH_ONLY:
        return True
    return query_map(target.query) == query_map(current.query)


def is_current(
    target: TargetSpec | str,
    mode: ComparisonMode,
    current: UriParts,
    resolve: Callable[[TargetSpec], str],
) -> bool:
    """Decide whether *target* denotes the current URI.

    Args:
        target: A target variant or a literal URL string.
        mode: Path-only or path-and-query comparison.
        current: The active request's URI.
        resolve: Turns route options into a URL string. Its errors
            (``RouteNotFound``) propagate unchanged.

    Raises:
        ArgumentError: *target* is a back-reference.
    """
    parsed = coerce_target(target)
    if isinstance(parsed, BackReference):
        msg = "Cannot compare a back-reference against the current page"
        raise ArgumentError(msg)
    url = parsed.url if isinstance(parsed, LiteralUrl) else resolve(parsed)
    return uri_matches(parse_uri(url, base=current), current, ComparisonMode(mode))
