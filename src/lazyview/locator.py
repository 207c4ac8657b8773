"""
Locator - how to find something in a context
============================================

A :py:class:`Locator` is an immutable ``(by, value)`` pair. Nothing in lazyview matches locators
itself; they are handed over to the :py:class:`lazyview.context.ElementContext` which knows how
to resolve them against the real UI.

The constructor is forgiving about the input and resolves it through a list of strategies:

.. code-block:: python

    Locator("//div")                     # xpath
    Locator("#submit")                   # css
    Locator("name", "username")          # explicit pair
    Locator({"id": "login"})             # one-item dict
    Locator({"by": "text", "locator": "Log in"})
    Locator(accessibility_id="menu")     # keyword
    Locator(some_element)                # anything implementing __locator__

:py:class:`By` offers the explicit constructors, which are usually the most readable option.
"""

import re
from collections import namedtuple
from typing import Any
from typing import Optional
from typing import Tuple
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Type


#: Locator kinds that can be requested explicitly
SUPPORTED_KINDS = frozenset(
    {
        "id",
        "name",
        "css",
        "xpath",
        "text",
        "link_text",
        "partial_text",
        "class_name",
        "tag_name",
        "accessibility_id",
    }
)


class LocatorStrategy:
    """Base class for the strategies resolving raw values into ``(by, value)``."""

    locator_class: "Type[Locator]"

    def create_locator(self, value: Any) -> Optional[Tuple[str, str]]:
        """Returns the ``(by, value)`` tuple or None when the strategy does not apply."""
        raise NotImplementedError


class LocatableStrategy(LocatorStrategy):
    """Locators and objects implementing ``__locator__``."""

    def create_locator(self, value: Any) -> Optional[Tuple[str, str]]:
        if isinstance(value, self.locator_class):
            return value.by, value.value
        if hasattr(value, "__locator__"):
            resolved = self.locator_class(value.__locator__())
            return resolved.by, resolved.value
        return None


class XPathStrategy(LocatorStrategy):
    def create_locator(self, value: Any) -> Optional[Tuple[str, str]]:
        if isinstance(value, str) and value.strip().startswith(("/", "(", ".")):
            return "xpath", value
        return None


class CSSStrategy(LocatorStrategy):
    """Simple selectors like ``tag#id.class``."""

    CSS_SELECTOR_RE = re.compile(r"^(?:[a-zA-Z][a-zA-Z0-9-]*)?(?:[#.][a-zA-Z0-9_-]+)+$")

    def create_locator(self, value: Any) -> Optional[Tuple[str, str]]:
        if isinstance(value, str) and self.CSS_SELECTOR_RE.match(value):
            return "css", value
        return None


class MappingStrategy(LocatorStrategy):
    """``{"id": "foo"}``, ``{"by": "id", "locator": "foo"}`` and keyword arguments."""

    def create_locator(self, value: Any) -> Optional[Tuple[str, str]]:
        if not isinstance(value, dict):
            return None
        if "by" in value and "locator" in value:
            by, locator = value["by"], value["locator"]
        elif len(value) == 1:
            by, locator = next(iter(value.items()))
        else:
            return None
        if by not in SUPPORTED_KINDS:
            raise ValueError(f"Unsupported locator kind: {by!r}")
        return by, locator


class Locator(namedtuple("Locator", ["by", "value"])):
    """Immutable description of how to find an element.

    Attributes:
        by: Kind of the lookup, eg. ``id``, ``name``, ``xpath``.
        value: Parameter of the lookup.
    """

    STRATEGIES = [
        LocatableStrategy(),
        XPathStrategy(),
        CSSStrategy(),
        MappingStrategy(),
    ]

    def __new__(cls, *args: Any, **kwargs: Any):
        if len(args) == 2 and not kwargs:
            value: Any = {"by": args[0], "locator": args[1]}
        elif len(args) == 1 and not kwargs:
            value = args[0]
            if isinstance(value, tuple) and not isinstance(value, cls) and len(value) == 2:
                value = {"by": value[0], "locator": value[1]}
        elif kwargs and not args:
            if set(kwargs) == {"by", "value"}:
                value = {"by": kwargs["by"], "locator": kwargs["value"]}
            else:
                value = kwargs
        else:
            raise TypeError("Provide a single value, a (by, value) pair, or a keyword argument.")

        for strategy in cls.STRATEGIES:
            strategy.locator_class = cls
            result = strategy.create_locator(value)
            if result:
                return super().__new__(cls, *result)

        if isinstance(value, str):
            return super().__new__(cls, "css", value)
        raise TypeError(f"Could not resolve {value!r} into a locator.")

    def __str__(self) -> str:
        return f"{self.by}={self.value}"

    def __repr__(self) -> str:
        return f"Locator(by={self.by!r}, value={self.value!r})"

    def __locator__(self) -> "Locator":
        return self


class By:
    """Explicit locator constructors."""

    @staticmethod
    def id(value: str) -> Locator:
        return Locator("id", value)

    @staticmethod
    def name(value: str) -> Locator:
        return Locator("name", value)

    @staticmethod
    def css(value: str) -> Locator:
        return Locator("css", value)

    @staticmethod
    def xpath(value: str) -> Locator:
        return Locator("xpath", value)

    @staticmethod
    def text(value: str) -> Locator:
        return Locator("text", value)

    @staticmethod
    def link_text(value: str) -> Locator:
        return Locator("link_text", value)

    @staticmethod
    def partial_text(value: str) -> Locator:
        return Locator("partial_text", value)

    @staticmethod
    def class_name(value: str) -> Locator:
        return Locator("class_name", value)

    @staticmethod
    def tag_name(value: str) -> Locator:
        return Locator("tag_name", value)

    @staticmethod
    def accessibility_id(value: str) -> Locator:
        return Locator("accessibility_id", value)
