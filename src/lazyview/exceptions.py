"""
LazyView Exceptions
===================
"""


class LazyViewException(Exception):
    """A base exception for the lazyview framework."""

    pass


class NotBound(LazyViewException):
    """Raised when an element or a view is used before a context was bound to it."""

    def __init__(self, obj=None):
        self.obj = obj
        if obj is None:
            message = "No context has been bound yet."
        else:
            message = f"{obj!r} has no context bound to it."
        super().__init__(message)


class MissingLoadCondition(LazyViewException):
    """Raised when a view ends up without any load condition.

    Every bound view has to define at least one condition, either by overriding
    :py:meth:`lazyview.view.View.load_condition` or by marking members as required.
    """

    def __init__(self, view):
        self.view = view
        super().__init__(
            f"{type(view).__name__} does not define any load condition. Override "
            "load_condition() or mark some of its members as Required."
        )


class ContextCapabilityMismatch(TypeError, LazyViewException):
    """Raised when a bound context does not implement a capability a field requires."""

    def __init__(self, owner, field, capability, context):
        self.owner = owner
        self.field = field
        self.capability = capability
        self.context = context
        super().__init__(
            "{}.{} requires a context implementing {}, got {!r}".format(
                type(owner).__name__, field, capability.__name__, context
            )
        )


class NotFound(LookupError, LazyViewException):
    """Raised when a lookup that promises a result finds nothing."""

    def __init__(self, element_type, locator):
        self.element_type = element_type
        self.locator = locator
        super().__init__(f"Could not find {element_type.__name__} with {locator!r}")


class LookupTransientFailure(LazyViewException):
    """Raised when the lookup collaborator failed to complete a lookup.

    While a UI is still loading this is the expected steady state, so readiness
    evaluation treats it as "not loaded yet".
    """

    pass


__all__ = [
    "LazyViewException",
    "NotBound",
    "MissingLoadCondition",
    "ContextCapabilityMismatch",
    "NotFound",
    "LookupTransientFailure",
]
