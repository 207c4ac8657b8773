"""
LazyView Contexts
=================

A context is the live environment views and elements are bound to. lazyview does not talk to
any UI driver on its own, an :py:class:`ElementContext` subclass does that for it by implementing
:py:meth:`ElementContext.find_all` and :py:meth:`ElementContext.is_displayed`.

.. code-block:: python

    class DriverContext(ElementContext):
        def __init__(self, driver, logger=None):
            super().__init__(logger=logger)
            self.driver = driver

        def find_all(self, locator, element_type):
            return self.driver.find_elements(locator.by, locator.value)

        def is_displayed(self, handle):
            return handle.is_displayed()
"""

import warnings
from logging import Logger
from typing import Any
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import TYPE_CHECKING
from typing import Union

from cached_property import cached_property

from .exceptions import ContextCapabilityMismatch
from .exceptions import MissingLoadCondition
from .exceptions import NotBound
from .exceptions import NotFound
from .locator import Locator
from .log import create_view_logger
from .types import Handle
from .types import LocatorAlias

if TYPE_CHECKING:
    from .element.base import ElementList
    from .element.selection import ElementSelection
    from .transition import Transition


class Found(NamedTuple):
    """The lookup found at least one node."""

    handles: List[Handle]


class NotYetPresent(NamedTuple):
    """The lookup completed and found nothing."""

    locator: Locator


class LookupFailed(NamedTuple):
    """The lookup itself could not complete."""

    locator: Locator
    error: Exception


LookupResult = Union[Found, NotYetPresent, LookupFailed]

#: Errors that are never turned into :py:class:`LookupFailed`
FATAL_ERRORS = (NotBound, MissingLoadCondition, ContextCapabilityMismatch)


class ElementContext:
    """Base capability of every context views and elements can be bound to.

    The context is shared by everything bound to it and lazyview never modifies it.

    Args:
        logger: Optional logger instance, a null logger is used if not provided.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = create_view_logger(type(self).__name__, logger)

    def find_all(self, locator: Locator, element_type: type) -> List[Handle]:
        """Returns handles of all the nodes matching the locator, possibly none.

        Args:
            locator: What to look for.
            element_type: Type of the reference the lookup is made for.
        """
        raise NotImplementedError(f"{type(self).__name__} does not implement find_all()")

    def is_displayed(self, handle: Handle) -> bool:
        """Whether a handle returned by :py:meth:`find_all` still exists and is visible."""
        raise NotImplementedError(f"{type(self).__name__} does not implement is_displayed()")

    def lookup(self, locator: LocatorAlias, element_type: type) -> LookupResult:
        """Runs :py:meth:`find_all` and reports the outcome as a :py:data:`LookupResult`.

        Returns:
            :py:class:`Found` with the handles, :py:class:`NotYetPresent` when nothing matched,
            or :py:class:`LookupFailed` carrying the error the lookup raised.
        """
        locator = Locator(locator)
        try:
            handles = list(self.find_all(locator, element_type))
        except FATAL_ERRORS:
            raise
        except Exception as e:
            self.logger.debug("lookup of %s failed: %r", locator, e)
            return LookupFailed(locator, e)
        if not handles:
            return NotYetPresent(locator)
        return Found(handles)

    @cached_property
    def selection(self) -> "ElementSelection":
        from .element.selection import ElementSelection

        return ElementSelection(self)

    def element(self) -> "ElementSelection":
        """Selection builder producing element references bound to this context."""
        return self.selection

    def transition(self) -> "Transition":
        """Creates a :py:class:`lazyview.transition.Transition` you can wait on."""
        from .transition import Transition

        return Transition(self)

    def find_element(self, element_type: type, locator: LocatorAlias) -> Any:
        warnings.warn(
            "find_element is deprecated. Please use context.element().of_type()",
            category=DeprecationWarning,
        )
        return self.element().of_type(element_type, locator)

    def find_elements(self, element_type: type, locator: LocatorAlias) -> "ElementList":
        warnings.warn(
            "find_elements is deprecated. Please use context.element().list_of_type()",
            category=DeprecationWarning,
        )
        return self.element().list_of_type(element_type, locator)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class FindsByName:
    """Mixin for contexts that can resolve things by a simple name."""

    def find_all_by_name(self, element_type: type, name: str) -> List[Any]:
        raise NotImplementedError(f"{type(self).__name__} does not implement find_all_by_name()")

    def find_by_name(self, element_type: type, name: str) -> Any:
        """Returns the first match for the name.

        Raises:
            :py:class:`lazyview.exceptions.NotFound` when nothing matches.
        """
        found = self.find_all_by_name(element_type, name)
        if not found:
            raise NotFound(element_type, Locator("name", name))
        return found[0]
