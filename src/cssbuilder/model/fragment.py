"""Fragment kinds: ordering ranks, singleton rules and rendering."""

from __future__ import annotations

from enum import Enum


class FragmentKind(Enum):
    """One typed piece of a compound selector.

    Members are declared in the order CSS requires them to appear:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return RANK[self]

    @property
    def is_singleton(self) -> bool:
        return self in SINGLETON_KINDS

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's punctuation."""
        prefix, suffix = _PUNCTUATION[self]
        return f"{prefix}{value}{suffix}"


RANK: dict[FragmentKind, int] = {
    FragmentKind.ELEMENT: 0,
    FragmentKind.ID: 1,
    FragmentKind.CLASS: 2,
    FragmentKind.ATTRIBUTE: 3,
    FragmentKind.PSEUDO_CLASS: 4,
    FragmentKind.PSEUDO_ELEMENT: 5,
}

SINGLETON_KINDS = frozenset({
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
})

# (prefix, suffix) around the literal value
_PUNCTUATION: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}
