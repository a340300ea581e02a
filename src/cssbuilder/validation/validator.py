"""Fragment validator: runs the rules in order and reports the first failure."""

from __future__ import annotations

from typing import Sequence

from cssbuilder.errors import SelectorError
from cssbuilder.model.fragment import FragmentKind
from cssbuilder.validation.rules import ALL_RULES


def check_fragment(
    applied: Sequence[FragmentKind], kind: FragmentKind
) -> SelectorError | None:
    """Return the first rule violation for appending *kind*, or ``None``."""
    for rule in ALL_RULES:
        error = rule(applied, kind)
        if error is not None:
            return error
    return None


def validate_or_raise(applied: Sequence[FragmentKind], kind: FragmentKind) -> None:
    """Raise the first rule violation for appending *kind*, if any."""
    error = check_fragment(applied, kind)
    if error is not None:
        raise error
