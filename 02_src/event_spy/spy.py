"""Event spy bootstrap and lifecycle."""

from typing import Protocol

from .artifact_handlers import ArtifactHandlerRegistry, IArtifactHandlerRegistry
from .config import SpyConfig, load_config
from .context import ProjectContext
from .dispatcher import EventDispatcher
from .handlers import create_default_handlers
from .handlers.base import qualified_name, timestamp
from .logging_config import get_logger, setup_logging
from .models import TreeNode
from .reporter import IReporter, InMemoryReporter

logger = get_logger(__name__)


class IEventSpy(Protocol):
    """Lifecycle of a build-tool event spy."""

    def init(self, context: dict | None = None) -> None:
        """Wire the components before the first event."""
        ...

    def on_event(self, event: object) -> bool:
        """Report an event. Returns True if a handler consumed it."""
        ...

    def close(self) -> None:
        """Finish the report."""
        ...


class MavenEventSpy:
    """Listens to build events and reports them through the handlers."""

    def __init__(
        self,
        config: SpyConfig | None = None,
        reporter: IReporter | None = None,
        artifact_handlers: IArtifactHandlerRegistry | None = None,
    ):
        self._config = config if config is not None else load_config()
        self._reporter = reporter
        self._artifact_handlers = artifact_handlers

        # Components (will be initialized in init())
        self._project_context: ProjectContext | None = None
        self._dispatcher: EventDispatcher | None = None

    @property
    def disabled(self) -> bool:
        return self._config.disabled

    def init(self, context: dict | None = None) -> None:
        """Wire the components in dependency order."""
        setup_logging(self._config)
        if self.disabled:
            logger.info("Event spy disabled")
            return

        # 1. Reporter and artifact types (no dependencies)
        if self._reporter is None:
            self._reporter = InMemoryReporter()
        if self._artifact_handlers is None:
            self._artifact_handlers = ArtifactHandlerRegistry()

        # 2. Project context
        self._project_context = ProjectContext()

        # 3. Dispatcher with the standard handlers
        self._dispatcher = EventDispatcher(
            create_default_handlers(
                self._reporter,
                artifact_handlers=self._artifact_handlers,
                project_context=self._project_context,
            )
        )

        root = TreeNode("MavenEventSpy")
        root.set_attribute("type", "init")
        root.set_attribute("class", qualified_name(type(self)))
        root.set_attribute("_time", timestamp())
        for key, value in sorted((context or {}).items()):
            if isinstance(value, str):
                root.add_child(TreeNode(key, value=value))
        self._reporter.print(root)
        logger.info(
            "Event spy initialized with %s handlers", len(self._dispatcher.handlers)
        )

    def on_event(self, event: object) -> bool:
        """Report an event. Returns True if a handler consumed it."""
        if self.disabled:
            return False
        if self._dispatcher is None or self._project_context is None:
            raise RuntimeError("Event spy not initialized")

        self._project_context.update(event)
        handled = self._dispatcher.dispatch(event)
        logger.debug("Event %s handled: %s", type(event).__name__, handled)
        return handled

    def close(self) -> None:
        """Finish the report."""
        if self.disabled or self._reporter is None:
            return
        self._reporter.close()
        if self._project_context is not None:
            self._project_context.clear()

    @property
    def reporter(self) -> IReporter:
        """Get reporter instance."""
        if self._reporter is None:
            raise RuntimeError("Event spy not initialized")
        return self._reporter

    @property
    def dispatcher(self) -> EventDispatcher:
        """Get dispatcher instance."""
        if self._dispatcher is None:
            raise RuntimeError("Event spy not initialized")
        return self._dispatcher
