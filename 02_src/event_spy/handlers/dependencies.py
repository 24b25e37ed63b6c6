"""Handlers for dependency resolution events."""

from ..models import (
    DependencyResolutionRequest,
    DependencyResolutionResult,
    EventKind,
    TreeNode,
)
from .base import AbstractEventHandler, qualified_name, timestamp


class DependencyResolutionRequestHandler(AbstractEventHandler):
    """Resolution requests are not reported."""

    supported_type = DependencyResolutionRequest
    supported_kind = EventKind.DEPENDENCY_RESOLUTION_REQUEST

    def _handle(self, event: DependencyResolutionRequest) -> bool:
        return True


class DependencyResolutionResultHandler(AbstractEventHandler):
    """Reports the resolved dependencies of the current project."""

    supported_type = DependencyResolutionResult
    supported_kind = EventKind.DEPENDENCY_RESOLUTION_RESULT

    def _handle(self, event: DependencyResolutionResult) -> bool:
        root = TreeNode("DependencyResolutionResult")
        root.set_attribute("class", qualified_name(type(event)))
        root.set_attribute("_time", timestamp())

        if self.project_context is not None:
            project = self.project_context.current_project
            if project is not None:
                root.add_child(self.new_project_element("project", project))

        resolved = root.add_child(TreeNode("resolvedDependencies"))
        for dependency in event.resolved_dependencies:
            # Unresolved artifacts have no file to report
            if dependency.artifact.file is None:
                continue
            resolved.add_child(self.new_dependency_element("dependency", dependency))

        for error in event.collection_errors:
            root.add_child(self.new_exception_element("exception", error))

        self.reporter.print(root)
        return True
