"""Fluent creation of element references and element list references.

.. code-block:: python

    # bound to a context straight away
    context.element().of_type(Element, By.id("submit"))
    context.element().list_of_type(Element, By.css(".row"))

    # lazy, for declarations on views
    class SearchView(View):
        query = element(Element, By.name("q"))
        results = elements(Element, By.css(".result"))
"""

from typing import Callable
from typing import Optional

from lazyview.context import ElementContext
from lazyview.locator import Locator
from lazyview.types import LocatorAlias

from .base import Bindable
from .base import Element
from .base import ElementList


class ElementSelection:
    """Builds references of a requested type.

    With a context, the references are bound to it right away. Without one they are lazy and
    get their context from the view they are declared on.

    Args:
        context: Context to bind the references to, if already known.
    """

    def __init__(self, context: Optional[ElementContext] = None) -> None:
        self.context = context

    def of_type(
        self,
        element_type: type,
        locator: LocatorAlias,
        implementation: Optional[Bindable] = None,
    ) -> Bindable:
        """Reference to a single element of some type.

        The element may or may not be present in the context, creating the reference does not
        look anything up. Use ``is_displayed`` on the result to find out.

        Args:
            element_type: Requested type of the reference.
            locator: How to find the element.
            implementation: Object to use instead of the default implementation of the type.
                Only its context gets arranged for.
        """
        locator = Locator(locator)
        if implementation is None:
            if not (isinstance(element_type, type) and issubclass(element_type, Bindable)):
                raise TypeError(f"{element_type!r} has no default implementation")
            reference = element_type.create_default(locator)
        else:
            if not isinstance(implementation, element_type):
                raise TypeError(
                    f"{implementation!r} does not implement {getattr(element_type, '__name__', element_type)}"
                )
            reference = implementation
            if reference.locator is None:
                reference.locator = locator

        if self.context is not None:
            reference.lazy = False
            reference.bind(self.context)
        return reference

    def list_of_type(
        self,
        element_type: type,
        locator: LocatorAlias,
        factory: Optional[Callable[[], Bindable]] = None,
    ) -> ElementList:
        """Live list of all the elements of some type the locator matches.

        Args:
            element_type: Type of the items.
            locator: How to find the elements.
            factory: Callable producing an unbound implementation for each found item.
        """
        return ElementList(element_type, locator, factory=factory, context=self.context)

    def element(self, locator: LocatorAlias) -> Element:
        return self.of_type(Element, locator)

    def elements(self, locator: LocatorAlias) -> ElementList:
        return self.list_of_type(Element, locator)


def element(
    element_type: type, locator: LocatorAlias, implementation: Optional[Bindable] = None
) -> Bindable:
    """Lazy reference to a single element, bound later by the view it is declared on."""
    return ElementSelection().of_type(element_type, locator, implementation)


def elements(
    element_type: type, locator: LocatorAlias, factory: Optional[Callable[[], Bindable]] = None
) -> ElementList:
    """Lazy reference to a list of elements, bound later by the view it is declared on."""
    return ElementSelection().list_of_type(element_type, locator, factory)
