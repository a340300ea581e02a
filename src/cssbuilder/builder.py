"""Chainable builder for compound CSS selectors.

A compound selector is made of fragments that must appear in CSS order:

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

Every fragment method validates the new fragment against what has already
been applied, appends it, and returns the builder so calls can be chained::

    SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
"""

from __future__ import annotations

import logging

from cssbuilder.model.fragment import FragmentKind
from cssbuilder.validation import validate_or_raise

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates the fragments of one selector.

    Builders are mutated in place; use one builder per selector.
    """

    def __init__(self) -> None:
        self.text = ""
        self.applied_kinds: list[FragmentKind] = []

    def element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    def append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Append a fragment of an arbitrary *kind*."""
        return self._append(kind, value)

    def stringify(self) -> str:
        return self.text

    def _append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        # Nothing is mutated until validation has passed.
        validate_or_raise(self.applied_kinds, kind)
        self.applied_kinds.append(kind)
        self.text += kind.render(value)
        logger.debug("Appended %s fragment: %r", kind.value, self.text)
        return self

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.text!r})"
