"""
LazyView Type Declarations
==========================
"""

from typing import Any
from typing import Callable
from typing import Dict
from typing import Protocol
from typing import Tuple
from typing import Union

from .locator import Locator


class LocatorProtocol(Protocol):
    def __locator__(self) -> Union[str, Locator, Dict[str, str]]: ...


LocatorAlias = Union[str, Dict[str, str], Tuple[str, str], Locator, LocatorProtocol]

#: Zero-argument predicate deciding one part of a view's readiness
Condition = Callable[[], bool]

#: Opaque node handle returned by the lookup collaborator
Handle = Any
