"""
LazyView Logging
================

Every view, element and element list logs through a :py:class:`PrependPathAdapter` that knows
where the object sits in the view it was declared on, so the records read like::

    [LoginView/errors[2]]: bound to <DriverContext>

Nothing is emitted unless a logger is passed to the outermost object.
"""

import functools
import logging
import time
from typing import Any
from typing import Callable
from typing import MutableMapping
from typing import Optional
from typing import Tuple
from typing import TypeVar
from typing import Union


null_logger = logging.getLogger("lazyview_null")
null_logger.addHandler(logging.NullHandler())

F = TypeVar("F", bound=Callable[..., Any])


class PrependPathAdapter(logging.LoggerAdapter):
    """Puts the path of the view member in front of every log record.

    Args:
        logger: Logger receiving the records.
        view_path: Path of the member, eg. ``LoginView/username``.
    """

    def __init__(self, logger: logging.Logger, view_path: str) -> None:
        super().__init__(logger, {"view_path": view_path})

    @property
    def view_path(self) -> str:
        return self.extra["view_path"]

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> Tuple[str, MutableMapping[str, Any]]:
        # % would be taken for a formatting placeholder
        return f"[{self.view_path.replace('%', '%%')}]: {msg}", kwargs

    def child(self, name: str) -> "PrependPathAdapter":
        """Adapter for a member declared under ``name``."""
        return type(self)(self.logger, f"{self.view_path}/{name}")

    def item(self, index: int) -> "PrependPathAdapter":
        """Adapter for the item of an element list at ``index``."""
        return type(self)(self.logger, f"{self.view_path}[{index}]")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.logger!r}, {self.view_path!r})"


def create_view_logger(
    view_path: str, logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None
) -> PrependPathAdapter:
    """Creates the adapter of a top-level object.

    Args:
        view_path: Name the records get prefixed with.
        logger: Where the records go, they are discarded if not given. An adapter passed in is
            unwrapped and its path replaced.
    """
    if isinstance(logger, logging.LoggerAdapter):
        logger = logger.logger
    return PrependPathAdapter(logger or null_logger, view_path)


def logged(method: F) -> F:
    """Logs the calls of a method, how long they took and how they ended.

    The start goes to debug, the end to info, a failure to error with the traceback. The
    exception is re-raised. The object the method lives on must have a ``logger``.
    """

    @functools.wraps(method)
    def wrapped(self, *args, **kwargs):
        call = "{}({})".format(method.__name__, ", ".join(repr(arg) for arg in args))
        self.logger.debug("%s started", call)
        started = time.monotonic()
        try:
            result = method(self, *args, **kwargs)
        except Exception:
            self.logger.exception(
                "%s failed after %.0f ms", call, (time.monotonic() - started) * 1000.0
            )
            raise
        self.logger.info("%s took %.0f ms", call, (time.monotonic() - started) * 1000.0)
        return result

    return wrapped
