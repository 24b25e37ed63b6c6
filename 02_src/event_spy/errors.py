"""Exceptions raised by the event spy."""


class EventSpyError(RuntimeError):
    """Base class for event spy errors."""


class RuntimeIOError(EventSpyError):
    """A filesystem operation failed while building a report node."""


class HandlerConfigurationError(EventSpyError):
    """A handler registration is malformed or conflicts with another one."""
