"""Waiting for a view to load.

.. code-block:: python

    event = context.transition().to(DashboardView())
    event.is_satisfied()
    dashboard = event.wait(timeout="30s")
"""

from typing import Optional
from typing import TYPE_CHECKING
from typing import Union

from wait_for import wait_for

from .context import ElementContext

if TYPE_CHECKING:
    from .view import View


class TransitionEvent:
    """Event that happens when the view gets loaded.

    The event does not keep any state besides the view, :py:meth:`is_satisfied` asks the view
    every time it is called.
    """

    #: Default time to wait for the view, in any format :py:func:`wait_for.wait_for` accepts
    DEFAULT_TIMEOUT: Union[str, int, float] = "10s"
    #: Default delay between two checks, in seconds
    DEFAULT_DELAY: float = 0.2

    def __init__(self, view: "View") -> None:
        self.view = view

    def is_satisfied(self) -> bool:
        return self.view.is_loaded

    def wait(
        self, timeout: Optional[Union[str, int, float]] = None, delay: Optional[float] = None
    ) -> "View":
        """Polls the view until it is loaded.

        Errors that make the view unusable, like
        :py:class:`lazyview.exceptions.MissingLoadCondition`, end the waiting immediately.

        Args:
            timeout: How long to wait, :py:attr:`DEFAULT_TIMEOUT` if not specified.
            delay: Delay between the checks, :py:attr:`DEFAULT_DELAY` if not specified.

        Returns:
            The loaded view.

        Raises:
            :py:class:`wait_for.TimedOutError` when the view did not load in time.
        """
        wait_for(
            self.is_satisfied,
            timeout=self.DEFAULT_TIMEOUT if timeout is None else timeout,
            delay=self.DEFAULT_DELAY if delay is None else delay,
            message=f"{type(self.view).__name__} to load",
        )
        return self.view

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.view!r})"


class Transition:
    """Creates :py:class:`TransitionEvent` instances for views of one context.

    Args:
        context: Context the views are bound to.
    """

    def __init__(self, context: ElementContext) -> None:
        self.context = context

    def to(self, view: "View") -> TransitionEvent:
        """Event of the view getting loaded. Binds the context to the view if it is not bound."""
        if not view.is_bound:
            view.bind(self.context)
        return TransitionEvent(view)
