"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.model.fragment import FragmentKind


# Kept word for word as earlier releases worded them ("more then" included),
# since callers match on this text. Match on a phrase such as
# "should not occur more" rather than the full string.
DUPLICATE_SINGLETON_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_VIOLATION_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Common parent for selector construction errors."""

    def __init__(self, message: str, kind: FragmentKind | None = None):
        self.kind = kind
        super().__init__(message)


class DuplicateSingletonError(SelectorError):
    """Raised when element, id or pseudo-element is applied a second time."""

    def __init__(self, kind: FragmentKind | None = None):
        super().__init__(DUPLICATE_SINGLETON_MESSAGE, kind)


class OrderViolationError(SelectorError):
    """Raised when a fragment would come after a higher-ranked one."""

    def __init__(
        self,
        kind: FragmentKind | None = None,
        previous: FragmentKind | None = None,
    ):
        self.previous = previous
        super().__init__(ORDER_VIOLATION_MESSAGE, kind)
