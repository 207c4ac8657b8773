"""
Views
=====

A view is a logical screen or component of the UI, described by the elements and sub-views
declared on it:

.. code-block:: python

    class LoginView(View):
        app = InjectedContext(HasTitle)

        username = Required(Element(By.id("username")))
        password = Required(Element(By.id("password")))
        errors = elements(Element, By.css(".error"))

        class footer(View):  # noqa
            REQUIRE_ALL = True
            version = Element(By.id("version"))

        def load_condition(self):
            return lambda: self.app.title() == "Log in"

    view = LoginView().bind(context)
    view.is_loaded

Nothing is looked up before :py:meth:`View.bind` is called. Binding hands the context over to
every declared member and compiles the conditions deciding whether the view is loaded.
"""

import inspect
from logging import Logger
from typing import Any
from typing import Dict
from typing import Iterator
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import Tuple
from typing import TYPE_CHECKING
from typing import Union

from .context import ElementContext
from .element.base import Bindable
from .element.base import ElementList
from .exceptions import ContextCapabilityMismatch
from .exceptions import LookupTransientFailure
from .exceptions import MissingLoadCondition
from .exceptions import NotBound
from .locator import Locator
from .log import logged
from .log import PrependPathAdapter
from .types import Condition
from .utils import Declarable
from .utils import ReadinessMarker

if TYPE_CHECKING:
    from .transition import Transition


class LoadCondition(NamedTuple):
    """One compiled part of a view's readiness."""

    description: str
    predicate: Condition

    def __call__(self) -> bool:
        return self.predicate()


class InjectedContext:
    """Declares a field that receives the view's context once it is bound.

    The context has to implement ``capability``, otherwise the binding fails with
    :py:class:`lazyview.exceptions.ContextCapabilityMismatch`. Use it to reach methods of your own
    context class, a class or a ``runtime_checkable`` protocol both work.

    .. code-block:: python

        class CustomView(View):
            app = InjectedContext(HasTitle)

    Args:
        capability: Type the context has to be an instance of.
    """

    def __init__(self, capability: type = ElementContext) -> None:
        if not inspect.isclass(capability):
            raise TypeError(f"Capability must be a class, got {capability!r}")
        self.capability = capability
        self.name: Optional[str] = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, o, t=None):
        if o is None:
            return self
        # Binding puts the context into the instance dict, which takes precedence
        raise NotBound(o)

    def __repr__(self):
        return f"{type(self).__name__}({self.capability.__name__})"


class ElementDescriptor:
    """Gives each view instance its own copy of a member declared on the view class.

    The copy is created on the first access and cached in the view's ``_element_cache``.

    Args:
        source: An unbound element, element list or view serving as a template, or a view class.
        required: Explicit readiness flag of the member, None when not marked.
        require_all: Whether the class declaring the member has ``REQUIRE_ALL`` set.
    """

    def __init__(self, source, required: Optional[bool] = None, require_all: bool = False):
        self.source = source
        self.required = required
        self.require_all = require_all
        self.name: Optional[str] = None

    def __set_name__(self, owner, name):
        self.name = name

    @property
    def order(self) -> int:
        return self.source._seq_id

    @property
    def is_collection(self) -> bool:
        return isinstance(self.source, ElementList)

    @property
    def participates(self) -> bool:
        """Whether the member is part of the readiness of the view."""
        if self.is_collection:
            return False
        if self.required is not None:
            return self.required
        return self.require_all

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        try:
            return obj._element_cache[self]
        except KeyError:
            member = self._instantiate(obj)
            obj._element_cache[self] = member
            return member

    def _instantiate(self, obj):
        if inspect.isclass(self.source):
            member = self.source()
        elif self.source.lazy:
            member = self.source.clone()
        else:
            # Eager members keep the context they were created with
            return self.source
        member.logger = obj.logger.child(self.name)
        return member

    def __repr__(self):
        source = self.source.__name__ if inspect.isclass(self.source) else repr(self.source)
        return f"{type(self).__name__}({self.name!r}, {source})"


class ViewMetaclass(type):
    """Registers the members declared on a view class.

    Elements, element lists, view instances and nested view classes are replaced with
    :py:class:`ElementDescriptor` instances and collected, in the order of declaration, in
    ``_declarations``. :py:class:`InjectedContext` fields are collected in ``_injections``.
    :py:class:`lazyview.utils.Required` and :py:class:`lazyview.utils.NotRequired` are unwrapped
    and ``REQUIRE_ALL`` of the declaring class is recorded on each of its descriptors.
    """

    def __new__(cls, name, bases, attrs):
        declarations: Dict[str, ElementDescriptor] = {}
        injections: Dict[str, InjectedContext] = {}
        for base in reversed(bases):
            for descriptor in getattr(base, "_declarations", ()):
                declarations[descriptor.name] = descriptor
            injections.update(getattr(base, "_injections", {}))

        require_all = bool(attrs.get("REQUIRE_ALL", False))
        new_attrs = {}
        for key, value in attrs.items():
            declarations.pop(key, None)
            injections.pop(key, None)
            required = None
            if isinstance(value, ReadinessMarker):
                marker, required, value = value, value.required, value.member
                if not (isinstance(value, Bindable) or _is_view_class(value)):
                    raise TypeError(f"{name}.{key}: {marker!r} can only wrap elements and views")

            if _is_view_class(value) or isinstance(value, Bindable):
                if required and isinstance(value, ElementList):
                    raise TypeError(f"{name}.{key}: element lists cannot be required")
                descriptor = ElementDescriptor(value, required=required, require_all=require_all)
                new_attrs[key] = descriptor
                declarations[key] = descriptor
            else:
                if isinstance(value, InjectedContext):
                    injections[key] = value
                new_attrs[key] = value

        new_attrs["_declarations"] = tuple(sorted(declarations.values(), key=lambda d: d.order))
        new_attrs["_injections"] = injections
        new_cls = super().__new__(cls, name, bases, new_attrs)
        # Orders nested view classes among the members of the enclosing class body
        new_cls._seq_id = Declarable.next_seq_id()
        return new_cls


def _is_view_class(value: Any) -> bool:
    return inspect.isclass(value) and issubclass(value, View)


class View(Bindable, metaclass=ViewMetaclass):
    """A structured object composed of elements and sub-views.

    A view is not usable until a context is bound to it with :py:meth:`bind`. After that
    :py:attr:`is_loaded` tells whether all its load conditions hold.

    There are two ways to define load conditions, and both can be combined:

    * Mark members with :py:class:`lazyview.utils.Required`, or set ``REQUIRE_ALL = True`` on the
      class and opt members out with :py:class:`lazyview.utils.NotRequired`. An element is then
      required to be displayed, a sub-view to be loaded. Element lists never take part.
    * Override :py:meth:`load_condition`.

    A view without any load condition is an error, see
    :py:class:`lazyview.exceptions.MissingLoadCondition`.

    Args:
        logger: Optional logger instance.
    """

    #: Makes every member declared on the class required unless marked NotRequired
    REQUIRE_ALL = False
    #: Position among the nodes the locator matches, used when the view acts as a list item
    index: Optional[int] = None

    _declarations: Tuple[ElementDescriptor, ...]
    _injections: Dict[str, InjectedContext]

    def __init__(self, logger: Optional[Union[Logger, PrependPathAdapter]] = None) -> None:
        self._init_logger(logger)
        self._element_cache: Dict[ElementDescriptor, Bindable] = {}
        self._load_conditions: List[LoadCondition] = []

    @classmethod
    def create_default(cls, locator: Locator, logger=None) -> "View":
        view = cls(logger=logger)
        view.locator = locator
        return view

    def _unbind(self) -> None:
        self._context = None
        self._load_conditions = []
        for name in self._injections:
            self.__dict__.pop(name, None)
        for member in self._element_cache.values():
            if member.lazy:
                member._unbind()

    @logged
    def bind(self, context: ElementContext) -> "View":
        """Binds the context to this view and everything declared on it.

        * Every :py:class:`InjectedContext` field gets the context assigned. If the context does
          not implement the capability of a field, nothing gets assigned and
          :py:class:`lazyview.exceptions.ContextCapabilityMismatch` is raised.
        * Lazy members, including sub-views and element lists, get the context bound, recursively.
          Members created with their own context are left alone.
        * The load conditions are compiled: :py:meth:`load_condition` first, then the required
          members in the order of declaration.
        * :py:meth:`after_bind` is called.

        Binding again throws away everything compiled by the previous binding and rebinds the
        lazy members to the new context. A failed binding leaves the view and its lazy members
        unbound.

        The binding is not synchronized, finish it before querying the view from other threads.

        Returns:
            The view itself.

        Raises:
            :py:class:`lazyview.exceptions.ContextCapabilityMismatch`,
            :py:class:`lazyview.exceptions.MissingLoadCondition`
        """
        self._unbind()
        try:
            self._check_context(context)
            injected = {}
            for name, injection in self._injections.items():
                if not isinstance(context, injection.capability):
                    raise ContextCapabilityMismatch(self, name, injection.capability, context)
                injected[name] = context
            self._context = context
            self.__dict__.update(injected)

            conditions = []
            explicit = self.load_condition()
            if explicit is not None:
                conditions.append(LoadCondition("load_condition()", explicit))
            for descriptor in self._declarations:
                member = descriptor.__get__(self, type(self))
                if member.lazy:
                    member.bind(context)
                if descriptor.participates:
                    conditions.append(self._compile_condition(descriptor.name, member))
            if not conditions:
                raise MissingLoadCondition(self)
            self._load_conditions = conditions
        except Exception:
            self._unbind()
            raise

        self.after_bind()
        return self

    @staticmethod
    def _compile_condition(name: str, member: Bindable) -> LoadCondition:
        # A view that is also an element is judged as a view
        if isinstance(member, View):
            return LoadCondition(f"{name}.is_loaded", lambda: member.is_loaded)
        return LoadCondition(f"{name}.is_displayed", lambda: member.is_displayed)

    @property
    def is_loaded(self) -> bool:
        """Whether all the load conditions currently hold.

        The conditions are evaluated in the order they were compiled on every access, the first
        one that does not hold ends the evaluation. A condition that fails to evaluate, eg.
        because the lookup of an element did not complete, means the view is not loaded yet.

        Raises:
            :py:class:`lazyview.exceptions.NotBound` when called before :py:meth:`bind`,
            :py:class:`lazyview.exceptions.MissingLoadCondition` when there is no condition.
        """
        if self._context is None:
            raise NotBound(self)
        if not self._load_conditions:
            raise MissingLoadCondition(self)
        for condition in self._load_conditions:
            try:
                satisfied = condition()
            except (NotBound, MissingLoadCondition):
                raise
            except LookupTransientFailure as e:
                self.logger.warning("%s could not be evaluated: %s", condition.description, e)
                return False
            except Exception:
                self.logger.warning(
                    "%s raised an exception, assuming not loaded",
                    condition.description,
                    exc_info=True,
                )
                return False
            if not satisfied:
                self.logger.debug("%s does not hold", condition.description)
                return False
        return True

    @property
    def is_displayed(self) -> bool:
        """A view acting as an element is displayed when it is loaded."""
        return self.is_loaded

    @property
    def load_conditions(self) -> Tuple[LoadCondition, ...]:
        return tuple(self._load_conditions)

    def load_condition(self) -> Optional[Condition]:
        """Explicit load condition of the view, considered in addition to the required members.

        Override it when the visibility of some members is not enough. The returned callable
        takes no arguments and returns whether the view is loaded.

        Returns:
            None unless overridden.
        """
        return None

    def after_bind(self) -> None:
        """Called at the end of every successful :py:meth:`bind`.

        Override it to set up anything that needs the context.
        """
        pass

    def transition(self) -> "Transition":
        """Shortcut for ``self.context.transition()``."""
        return self.context.transition()

    @classmethod
    def cls_element_names(cls) -> Tuple[str, ...]:
        """Returns the names of the declared members in the order they were declared."""
        return tuple(descriptor.name for descriptor in cls._declarations)

    @property
    def element_names(self) -> Tuple[str, ...]:
        return self.cls_element_names()

    def __iter__(self) -> Iterator[Bindable]:
        for name in self.element_names:
            yield getattr(self, name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
