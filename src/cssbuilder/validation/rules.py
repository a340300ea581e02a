"""Validation rules for fragment sequences.

Each rule takes the kinds applied so far plus the kind about to be applied
and returns the error it would raise, or ``None`` when the kind is allowed.
"""

from __future__ import annotations

from typing import Callable, Sequence

from cssbuilder.errors import DuplicateSingletonError, OrderViolationError, SelectorError
from cssbuilder.model.fragment import RANK, SINGLETON_KINDS, FragmentKind

RuleFunc = Callable[[Sequence[FragmentKind], FragmentKind], SelectorError | None]


def check_singleton(
    applied: Sequence[FragmentKind], kind: FragmentKind
) -> SelectorError | None:
    """Element, id and pseudo-element may occur at most once."""
    if kind in SINGLETON_KINDS and kind in applied:
        return DuplicateSingletonError(kind)
    return None


def check_order(
    applied: Sequence[FragmentKind], kind: FragmentKind
) -> SelectorError | None:
    """The new kind may not rank below the previously applied kind."""
    if not applied:
        return None
    previous = applied[-1]
    if RANK[previous] > RANK[kind]:
        return OrderViolationError(kind, previous=previous)
    return None


# Singleton check runs first so a repeated id after a class reports the
# duplicate rather than the ordering problem.
ALL_RULES: list[RuleFunc] = [
    check_singleton,
    check_order,
]
