"""Handlers for the session request and result."""

from ..models import EventKind, MavenExecutionRequest, MavenExecutionResult, TreeNode
from .base import AbstractEventHandler, canonical_path, qualified_name, render_bool, timestamp


class MavenExecutionRequestHandler(AbstractEventHandler):
    """Reports the command line request of the session."""

    supported_type = MavenExecutionRequest
    supported_kind = EventKind.EXECUTION_REQUEST

    def _handle(self, event: MavenExecutionRequest) -> bool:
        root = TreeNode("MavenExecutionRequest")
        root.set_attribute("class", qualified_name(type(event)))
        root.set_attribute("_time", timestamp())

        request = root.add_child(TreeNode("request"))
        if event.base_directory is not None:
            request.set_attribute("baseDirectory", canonical_path(event.base_directory))
        request.set_attribute("goals", ",".join(event.goals))
        request.set_attribute("interactiveMode", render_bool(event.interactive_mode))
        request.set_attribute("offline", render_bool(event.offline))
        request.set_attribute("threadCount", event.thread_count)

        root.add_child(self.new_file_element("pom", event.pom))
        root.add_child(self.new_file_element("userSettingsFile", event.user_settings_file))
        root.add_child(
            self.new_file_element("globalSettingsFile", event.global_settings_file)
        )
        root.add_child(
            self.new_file_element("localRepository", event.local_repository_path)
        )

        self.reporter.print(root)
        return True


class MavenExecutionResultHandler(AbstractEventHandler):
    """Reports the outcome of the session."""

    supported_type = MavenExecutionResult
    supported_kind = EventKind.EXECUTION_RESULT

    def _handle(self, event: MavenExecutionResult) -> bool:
        root = TreeNode("MavenExecutionResult")
        root.set_attribute("class", qualified_name(type(event)))
        root.set_attribute("_time", timestamp())
        root.add_child(self.new_project_element("project", event.project))

        for exception in event.exceptions:
            root.add_child(self.new_exception_element("exception", exception))

        self.reporter.print(root)
        return True
