"""Event dispatcher routing build events to their handler."""

from typing import Protocol

from .errors import HandlerConfigurationError
from .handlers import IMavenEventHandler
from .logging_config import get_logger
from .models import EventKind

logger = get_logger(__name__)


class IEventDispatcher(Protocol):
    """Registry of handlers keyed by event kind."""

    def register(self, handler: IMavenEventHandler) -> None:
        """Register a handler. Fails on malformed or duplicate registrations."""
        ...

    def dispatch(self, event: object) -> bool:
        """Hand the event to its handler. Returns True if it was consumed."""
        ...


class EventDispatcher:
    """
    Dispatches events to the handler registered for their kind.

    Handlers are keyed by (kind, goal). For a given kind, goal-qualified
    handlers are consulted before the unqualified one; the first handler
    accepting the event wins.
    """

    def __init__(self, handlers: list[IMavenEventHandler] | None = None):
        self._handlers: dict[EventKind, list[IMavenEventHandler]] = {}
        for handler in handlers or []:
            self.register(handler)

    def register(self, handler: IMavenEventHandler) -> None:
        """Register a handler. Fails on malformed or duplicate registrations."""
        kind = getattr(handler, "supported_kind", None)
        if not isinstance(kind, EventKind):
            raise HandlerConfigurationError(
                f"{handler!r} does not declare a supported event kind"
            )
        goal = getattr(handler, "supported_goal", None)
        if goal is not None and not isinstance(goal, str):
            raise HandlerConfigurationError(
                f"{handler!r} declares an invalid goal: {goal!r}"
            )
        event_type = getattr(handler, "supported_type", None)
        if not isinstance(event_type, type):
            raise HandlerConfigurationError(
                f"{handler!r} does not declare a supported event type"
            )

        candidates = self._handlers.setdefault(kind, [])
        for registered in candidates:
            if registered.supported_goal == goal:
                raise HandlerConfigurationError(
                    f"{handler!r} conflicts with {registered!r}"
                )

        if goal is None:
            candidates.append(handler)
        else:
            # Goal-qualified handlers go ahead of the catch-all of the kind
            position = next(
                (i for i, h in enumerate(candidates) if h.supported_goal is None),
                len(candidates),
            )
            candidates.insert(position, handler)
        logger.debug("Registered %r", handler)

    def dispatch(self, event: object) -> bool:
        """Hand the event to its handler. Returns True if it was consumed."""
        kind = getattr(event, "kind", None)
        if not isinstance(kind, EventKind):
            return False
        for handler in self._handlers.get(kind, []):
            if handler.handle(event):
                return True
        return False

    @property
    def handlers(self) -> list[IMavenEventHandler]:
        """Registered handlers in consultation order."""
        return [h for candidates in self._handlers.values() for h in candidates]
