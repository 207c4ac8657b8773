"""
LazyView Utilities
==================

Supporting classes for declaring members on views.
"""

from threading import Lock


class Declarable:
    """Base class of everything that can be declared on a :py:class:`lazyview.view.View`.

    Each instance gets a sequential id so the declarations can be ordered the same way they were
    written, and remembers the arguments it was constructed with so a class-level declaration
    can be copied for each view instance (see :py:meth:`lazyview.element.base.Bindable.clone`).
    """

    #: Sequential counter that gets incremented on each declaration
    _seq_cnt = 0
    #: Lock that makes the :py:attr:`_seq_cnt` increment thread safe
    _seq_cnt_lock = Lock()

    def __new__(cls, *args, **kwargs):
        o = super().__new__(cls)
        o._seq_id = Declarable.next_seq_id()
        o._declared_args = (args, kwargs)
        return o

    @staticmethod
    def next_seq_id() -> int:
        """Takes the next number of the declaration sequence shared by members and view classes."""
        with Declarable._seq_cnt_lock:
            seq_id = Declarable._seq_cnt
            Declarable._seq_cnt += 1
        return seq_id


class ReadinessMarker:
    """Wraps a view member declaration and says whether it takes part in the view's readiness.

    The marker only exists during the class creation, :py:class:`lazyview.view.ViewMetaclass`
    unwraps it and stores the flag on the resulting descriptor.
    """

    required: bool

    def __init__(self, member):
        if isinstance(member, ReadinessMarker):
            raise TypeError(f"{type(self).__name__} cannot wrap {member!r}")
        self.member = member

    def __repr__(self):
        return f"{type(self).__name__}({self.member!r})"


class Required(ReadinessMarker):
    """The view is only loaded when this member is displayed (or loaded, for sub-views).

    .. code-block:: python

        class LoginView(View):
            username = Required(Element(By.id("username")))
    """

    required = True


class NotRequired(ReadinessMarker):
    """Opts the member out of the view's readiness when the view sets ``REQUIRE_ALL``."""

    required = False
