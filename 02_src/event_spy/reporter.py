"""Report writer collaborators."""

import threading
from datetime import datetime, timezone
from typing import Protocol

from .logging_config import get_logger
from .models import TreeNode

logger = get_logger(__name__)

ROOT_ELEMENT = "mavenExecution"


class IReporter(Protocol):
    """Receives the nodes built by the handlers."""

    def print(self, node: TreeNode) -> None:
        """Append a node to the report."""
        ...

    def close(self) -> None:
        """Finish the report."""
        ...


class InMemoryReporter:
    """Collects report nodes under a single root node."""

    def __init__(self):
        self._lock = threading.Lock()
        self._root = TreeNode(ROOT_ELEMENT)
        self._root.set_attribute("_time", _now())
        self._closed = False

    def print(self, node: TreeNode) -> None:
        """Append a node to the report."""
        with self._lock:
            if self._closed:
                raise RuntimeError("Reporter already closed")
            self._root.add_child(node)
        logger.debug("Reported %s", node.name)

    def close(self) -> None:
        """Finish the report. Closing twice is a no-op."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._root.set_attribute("_endTime", _now())
        logger.info("Report closed with %s entries", len(self._root.children))

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def root(self) -> TreeNode:
        return self._root

    @property
    def nodes(self) -> list[TreeNode]:
        """Snapshot of the reported nodes."""
        with self._lock:
            return list(self._root.children)

    def to_xml(self) -> str:
        with self._lock:
            return self._root.to_xml()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()
