"""Element references and the selection builder creating them."""

from .base import Bindable
from .base import Element
from .base import ElementList
from .selection import element
from .selection import elements
from .selection import ElementSelection

__all__ = [
    "Bindable",
    "Element",
    "ElementList",
    "ElementSelection",
    "element",
    "elements",
]
