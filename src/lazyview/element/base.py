from collections.abc import Sequence
from logging import Logger
from typing import Any
from typing import Callable
from typing import List
from typing import Optional
from typing import Union

from wait_for import wait_for

from lazyview.context import ElementContext
from lazyview.context import LookupFailed
from lazyview.context import NotYetPresent
from lazyview.exceptions import ContextCapabilityMismatch
from lazyview.exceptions import LookupTransientFailure
from lazyview.exceptions import NotBound
from lazyview.exceptions import NotFound
from lazyview.locator import Locator
from lazyview.log import create_view_logger
from lazyview.log import PrependPathAdapter
from lazyview.types import Handle
from lazyview.types import LocatorAlias
from lazyview.utils import Declarable


class Bindable(Declarable):
    """Base class for everything that gets a context bound to it.

    A bindable is either *unbound* or *bound*. One created without a context is lazy: it can be
    declared on a view before any context exists and the view binds it later (and binds it
    again whenever the view is bound again). One created with a context is eager and nobody
    but its creator rebinds it.
    """

    #: Whether the owning view is responsible for binding this object
    lazy = True
    #: Locator of the thing, if it has one
    locator: Optional[Locator] = None

    _context: Optional[ElementContext] = None

    def _init_logger(self, logger) -> None:
        if isinstance(logger, PrependPathAdapter):
            # Already carries the path to this member
            self.logger = logger
        else:
            self.logger = create_view_logger(type(self).__name__, logger)

    @property
    def context(self) -> ElementContext:
        """The bound context.

        Raises:
            :py:class:`lazyview.exceptions.NotBound` when nothing was bound yet.
        """
        if self._context is None:
            raise NotBound(self)
        return self._context

    @property
    def is_bound(self) -> bool:
        return self._context is not None

    def _unbind(self) -> None:
        self._context = None

    def _check_context(self, context: Any) -> None:
        if not isinstance(context, ElementContext):
            raise ContextCapabilityMismatch(self, "context", ElementContext, context)

    def bind(self, context: ElementContext) -> "Bindable":
        raise NotImplementedError(f"{type(self).__name__} does not implement bind()")

    @classmethod
    def create_default(cls, locator: Locator, logger=None) -> "Bindable":
        """Creates an unbound default implementation of this type for the locator."""
        raise TypeError(f"{cls.__name__} has no default implementation")

    def clone(self) -> "Bindable":
        """Returns a fresh unbound copy, constructed the same way this object was."""
        args, kwargs = self._declared_args
        kwargs = {k: v for k, v in kwargs.items() if k not in ("context", "logger")}
        new = type(self)(*args, **kwargs)
        new.locator = self.locator
        if "index" in vars(self):
            new.index = self.index
        return new


class Element(Bindable):
    """Reference to zero or one node of the UI.

    Creating the reference never looks anything up. Whether the node is there can be found out
    through :py:attr:`is_present` and :py:attr:`is_displayed`.

    .. code-block:: python

        username = Element(By.id("username"))      # lazy, bound later
        username.bind(context)
        username.is_displayed

        Element(By.id("username"), context=context)  # eager

    Args:
        locator: How to find the node.
        context: Context to bind to right away.
        logger: Optional logger instance.
        index: Which of the matching nodes this reference stands for, the first one by default.
            Negative values count from the last one.
    """

    def __init__(
        self,
        locator: LocatorAlias,
        context: Optional[ElementContext] = None,
        logger: Optional[Union[Logger, PrependPathAdapter]] = None,
        index: Optional[int] = None,
    ) -> None:
        self.locator = Locator(locator)
        self.index = index
        self._init_logger(logger)
        self.lazy = context is None
        if context is not None:
            self.bind(context)

    @classmethod
    def create_default(cls, locator: Locator, logger=None) -> "Element":
        return cls(locator, logger=logger)

    def bind(self, context: ElementContext) -> "Element":
        self._check_context(context)
        self._context = context
        self.logger.debug("bound to %r", context)
        return self

    def _handles(self) -> List[Handle]:
        result = self.context.lookup(self.locator, type(self))
        if isinstance(result, LookupFailed):
            raise LookupTransientFailure(
                f"Lookup of {self.locator} failed: {result.error!r}"
            ) from result.error
        if isinstance(result, NotYetPresent):
            return []
        return result.handles

    def _resolve(self) -> List[Handle]:
        handles = self._handles()
        if self.index is None:
            return handles[:1]
        try:
            return [handles[self.index]]
        except IndexError:
            return []

    @property
    def handle(self) -> Handle:
        """The node this reference points to.

        Raises:
            :py:class:`lazyview.exceptions.NotFound` when the node is not there.
        """
        found = self._resolve()
        if not found:
            raise NotFound(type(self), self.locator)
        return found[0]

    @property
    def is_present(self) -> bool:
        return bool(self._resolve())

    @property
    def is_displayed(self) -> bool:
        """Whether the node is there and the context reports it visible."""
        found = self._resolve()
        if not found:
            return False
        return bool(self.context.is_displayed(found[0]))

    def wait_displayed(self, timeout: Union[str, int, float] = "10s", delay: float = 0.2) -> bool:
        """Wait for the element to be displayed. Uses the :py:attr:`is_displayed`

        Args:
            timeout: If you want, you can override the default timeout here
            delay: override default delay for wait_for iterations
        """
        ret, _ = wait_for(lambda: self.is_displayed, timeout=timeout, delay=delay)
        return ret

    def __locator__(self) -> Locator:
        return self.locator

    def __repr__(self) -> str:
        index = "" if self.index is None else f", index={self.index}"
        return f"{type(self).__name__}({self.locator!r}{index})"


class ElementList(Bindable, Sequence):
    """Live list of references to all the nodes a locator matches.

    Nothing is remembered between calls, each ``len()``, indexing or iteration asks the context
    again, so the list always reflects what is in the UI at the moment it is used.

    Args:
        element_type: Type of the items.
        locator: How to find the nodes.
        factory: Optional callable producing an unbound implementation for each item.
        context: Context to bind to right away.
        logger: Optional logger instance.
    """

    def __init__(
        self,
        element_type: type,
        locator: LocatorAlias,
        factory: Optional[Callable[[], Bindable]] = None,
        context: Optional[ElementContext] = None,
        logger: Optional[Union[Logger, PrependPathAdapter]] = None,
    ) -> None:
        if factory is None and not (
            isinstance(element_type, type) and issubclass(element_type, Bindable)
        ):
            raise TypeError(f"Cannot create default items of type {element_type!r}")
        self.element_type = element_type
        self.locator = Locator(locator)
        self.factory = factory
        self._init_logger(logger)
        self.lazy = context is None
        if context is not None:
            self.bind(context)

    def bind(self, context: ElementContext) -> "ElementList":
        self._check_context(context)
        self._context = context
        self.logger.debug("bound to %r", context)
        return self

    def _count(self) -> int:
        result = self.context.lookup(self.locator, self.element_type)
        if isinstance(result, LookupFailed):
            raise LookupTransientFailure(
                f"Lookup of {self.locator} failed: {result.error!r}"
            ) from result.error
        if isinstance(result, NotYetPresent):
            return 0
        return len(result.handles)

    def _item(self, index: int) -> Bindable:
        logger = self.logger.item(index)
        if self.factory is None:
            item = self.element_type.create_default(self.locator, logger=logger)
        else:
            item = self.factory()
            if item.locator is None:
                item.locator = self.locator
            item.logger = logger
        item.index = index
        item.lazy = False
        return item.bind(self.context)

    def _items(self) -> List[Bindable]:
        return [self._item(i) for i in range(self._count())]

    def __len__(self) -> int:
        return self._count()

    def __getitem__(self, index):
        return self._items()[index]

    def __iter__(self):
        return iter(self._items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.element_type.__name__}, {self.locator!r})"
