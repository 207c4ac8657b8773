"""Page objects that bind lazily to a context and know when they are loaded."""

from .context import ElementContext
from .context import FindsByName
from .element import element
from .element import Element
from .element import ElementList
from .element import elements
from .element import ElementSelection
from .locator import By
from .locator import Locator
from .transition import Transition
from .transition import TransitionEvent
from .utils import NotRequired
from .utils import Required
from .view import InjectedContext
from .view import View

__all__ = [
    "By",
    "Element",
    "ElementContext",
    "ElementList",
    "ElementSelection",
    "FindsByName",
    "InjectedContext",
    "Locator",
    "NotRequired",
    "Required",
    "Transition",
    "TransitionEvent",
    "View",
    "element",
    "elements",
]
