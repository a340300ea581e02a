"""cssbuilder model layer -- public type re-exports."""

from cssbuilder.model.fragment import RANK, SINGLETON_KINDS, FragmentKind
from cssbuilder.model.selector import CombinedSelector

__all__ = [
    # fragment
    "FragmentKind",
    "RANK",
    "SINGLETON_KINDS",
    # selector
    "CombinedSelector",
]
