"""Link argument normalization.

A link call accepts several positional shapes. Each slot is classified
by a type test and the result is assembled into a canonical ``LinkCall``:

    link_to(target)                          label derived from the URL
    link_to(label, target[, attributes])     explicit label (None = derive)
    link_to(target[, attributes], content=f) label produced by ``f()``

Invalid or ambiguous combinations raise ``ArgumentError`` instead of
silently routing data into the wrong role.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from linkto.domain.attributes import RenderDirectives, extract_directives
from linkto.domain.errors import ArgumentError
from linkto.domain.targets import TargetSpec, coerce_target, is_target_spec

ContentProducer = Callable[[], str]

_UNSET: Any = object()

MAX_POSITIONAL = 3


class DeferredContent:
    """Zero-argument content producer, evaluated at most once."""

    __slots__ = ("_producer", "_value")

    def __init__(self, producer: ContentProducer) -> None:
        if not callable(producer):
            msg = "content producer must be callable"
            raise ArgumentError(msg)
        self._producer = producer
        self._value: Any = _UNSET

    @property
    def evaluated(self) -> bool:
        return self._value is not _UNSET

    def __call__(self) -> str:
        if self._value is _UNSET:
            self._value = self._producer()
        return self._value


@dataclass(frozen=True)
class LinkCall:
    """Canonical ``(label, target, attributes)`` triple plus directives.

    ``label`` of None means "use the resolved URL as the visible text".
    """

    label: str | None
    target: TargetSpec
    attributes: dict[str, Any] = field(default_factory=dict)
    directives: RenderDirectives = field(default_factory=RenderDirectives)

    def display_label(self, href: str) -> str:
        """Return the visible text, substituting *href* for a missing label."""
        return href if self.label is None else self.label


def _attributes_slot(value: object) -> Mapping[str, Any] | None:
    if value is None or isinstance(value, Mapping):
        return value
    msg = f"Link attributes must be a mapping, got {type(value).__name__}"
    raise ArgumentError(msg)


def _target_slot(value: object) -> TargetSpec:
    if value is None:
        msg = "No link target given"
        raise ArgumentError(msg)
    return coerce_target(value)


def normalize_link_args(
    *args: Any,
    content: ContentProducer | DeferredContent | None = None,
) -> LinkCall:
    """Resolve raw link-call arguments into a ``LinkCall``.

    Args:
        *args: Up to three positional slots (see module docstring).
        content: Optional deferred producer supplying the label.

    Raises:
        ArgumentError: No target can be determined, the label source is
            ambiguous, or a slot holds a value of the wrong kind.
    """
    if len(args) > MAX_POSITIONAL:
        msg = f"link takes at most {MAX_POSITIONAL} positional arguments ({len(args)} given)"
        raise ArgumentError(msg)
    if not args:
        msg = "No link target given"
        raise ArgumentError(msg)

    if content is not None:
        return _normalize_with_content(args, content)

    if len(args) == 1:
        label: str | None = None
        target = _target_slot(args[0])
        raw_attributes: Mapping[str, Any] | None = None
    else:
        first = args[0]
        if first is not None and not isinstance(first, str):
            msg = f"Link label must be a string or None, got {type(first).__name__}"
            raise ArgumentError(msg)
        label = first
        target = _target_slot(args[1])
        raw_attributes = _attributes_slot(args[2] if len(args) == 3 else None)

    attributes, directives = extract_directives(raw_attributes)
    return LinkCall(label=label, target=target, attributes=attributes, directives=directives)


def _normalize_with_content(
    args: tuple[Any, ...],
    content: ContentProducer | DeferredContent,
) -> LinkCall:
    if len(args) == 3:
        msg = "Both an explicit label and a content producer were given"
        raise ArgumentError(msg)
    if len(args) == 2:
        second = args[1]
        # (label, target) shape: the label would come from two places.
        if isinstance(second, str) or is_target_spec(second):
            msg = "Both an explicit label and a content producer were given"
            raise ArgumentError(msg)
        raw_attributes = _attributes_slot(second)
    else:
        raw_attributes = None

    target = _target_slot(args[0])
    attributes, directives = extract_directives(raw_attributes)
    producer = content if isinstance(content, DeferredContent) else DeferredContent(content)
    return LinkCall(
        label=producer(),
        target=target,
        attributes=attributes,
        directives=directives,
    )
