"""cssbuilder - compose CSS selector strings from typed fragments."""

__version__ = "1.0.0"

from cssbuilder.builder import SelectorBuilder  # noqa: E402
from cssbuilder.errors import (  # noqa: E402
    DuplicateSingletonError,
    OrderViolationError,
    SelectorError,
)
from cssbuilder.facade import (  # noqa: E402
    attr,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
    stringify,
)
from cssbuilder.model import RANK, SINGLETON_KINDS, CombinedSelector, FragmentKind  # noqa: E402
from cssbuilder.serialization import from_json, to_json  # noqa: E402
from cssbuilder.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "CombinedSelector",
    "FragmentKind",
    "RANK",
    "SINGLETON_KINDS",
    # facade
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "stringify",
    # errors
    "SelectorError",
    "DuplicateSingletonError",
    "OrderViolationError",
    # utilities
    "Rectangle",
    "to_json",
    "from_json",
]
