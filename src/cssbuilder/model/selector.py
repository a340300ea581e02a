"""Combined selector: the read-only result of joining two selectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    Attributes:
        text: The rendered selector, e.g. ``"table#data ~ tr"``.
    """

    text: str

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text
