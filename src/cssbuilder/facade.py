"""Stateless entry points: one fresh builder per call.

    >>> from cssbuilder import facade as css
    >>> css.combine(css.element("table").id("data"), "~", css.element("tr")).stringify()
    'table#data ~ tr'
"""

from __future__ import annotations

import logging
from typing import Protocol

from cssbuilder.builder import SelectorBuilder
from cssbuilder.model.selector import CombinedSelector

logger = logging.getLogger(__name__)


class Renderable(Protocol):
    def stringify(self) -> str: ...


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Join two selectors with *combinator*, padded by one space on each side.

    The combinator is embedded verbatim, so ``" "`` yields three spaces.
    Neither argument is modified.
    """
    combined = CombinedSelector(f"{left.stringify()} {combinator} {right.stringify()}")
    logger.debug("Combined selector: %r", combined.text)
    return combined


def stringify(selector: Renderable) -> str:
    return selector.stringify()
