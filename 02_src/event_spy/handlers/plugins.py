"""Handlers narrowed to the goals of well-known plugins."""

from ..models import EventKind, ExecutionEvent, TreeNode
from .execution import AbstractExecutionHandler


class SurefireTestExecutionHandler(AbstractExecutionHandler):
    supported_kind = EventKind.MOJO_SUCCEEDED
    supported_goal = "org.apache.maven.plugins:maven-surefire-plugin:test"

    def configuration_parameters_to_report(self, event: ExecutionEvent) -> list[str]:
        return ["reportsDirectory"]


class FailsafeTestExecutionHandler(AbstractExecutionHandler):
    supported_kind = EventKind.MOJO_SUCCEEDED
    supported_goal = "org.apache.maven.plugins:maven-failsafe-plugin:integration-test"

    def configuration_parameters_to_report(self, event: ExecutionEvent) -> list[str]:
        return ["reportsDirectory"]


class DeployDeployExecutionHandler(AbstractExecutionHandler):
    """Reports the repository the project was deployed to."""

    supported_kind = EventKind.MOJO_SUCCEEDED
    supported_goal = "org.apache.maven.plugins:maven-deploy-plugin:deploy"

    def add_details(self, event: ExecutionEvent, root: TreeNode) -> None:
        repository_element = root.add_child(TreeNode("artifactRepository"))
        project = event.project
        if project is None:
            return

        snapshot = project.version.endswith("-SNAPSHOT")
        repository = (
            project.distribution_snapshot_repository
            if snapshot and project.distribution_snapshot_repository is not None
            else project.distribution_repository
        )
        if repository is None:
            self.logger.debug(
                "No distribution repository for %s", project.id,
                extra={"event_kind": event.kind.value},
            )
            return

        repository_element.add_child(self.new_element("id", repository.id))
        repository_element.add_child(self.new_element("url", repository.url))
