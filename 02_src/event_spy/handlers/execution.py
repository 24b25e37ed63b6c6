"""Handlers for project and mojo execution events."""

import re

from ..models import EventKind, ExecutionEvent, MojoExecution, Project, TreeNode
from .base import AbstractEventHandler, qualified_name, timestamp

EXPRESSION_PATTERN = re.compile(r"\$\{([^}]+)\}")


class AbstractExecutionHandler(AbstractEventHandler):
    """
    Reports an execution event as an ``ExecutionEvent`` node.

    Subclasses choose the event kind, optionally narrow it to a plugin goal
    (``groupId:artifactId:goal``), list the mojo configuration parameters to
    copy into the ``plugin`` node and may add details of their own.
    """

    supported_type = ExecutionEvent

    def accepts(self, event: object) -> bool:
        if not super().accepts(event):
            return False
        if self.supported_goal is None:
            return True
        mojo_execution = event.mojo_execution
        return mojo_execution is not None and mojo_execution.key == self.supported_goal

    def _handle(self, event: ExecutionEvent) -> bool:
        parameters = self.configuration_parameters_to_report(event)
        if parameters is None:
            return False

        root = TreeNode("ExecutionEvent")
        root.set_attribute("type", event.type.value)
        root.set_attribute("class", qualified_name(type(event)))
        root.set_attribute("_time", timestamp())

        root.add_child(self.new_project_element("project", event.project))

        mojo_execution = event.mojo_execution
        if mojo_execution is not None:
            plugin = root.add_child(self.new_mojo_element("plugin", mojo_execution))
            configuration = mojo_execution.configuration
            for parameter in parameters:
                value = None if configuration is None else configuration.get_child(parameter)
                if value is not None:
                    plugin.add_child(evaluate_configuration(value, event.project))

        self.add_details(event, root)

        if event.exception is not None:
            root.add_child(self.new_exception_element("exception", event.exception))

        self.reporter.print(root)
        return True

    def configuration_parameters_to_report(
        self, event: ExecutionEvent
    ) -> list[str] | None:
        """Names of the mojo parameters to report, None to skip the event."""
        return []

    def add_details(self, event: ExecutionEvent, root: TreeNode) -> None:
        """Hook for subclasses."""

    def new_mojo_element(self, name: str, mojo_execution: MojoExecution) -> TreeNode:
        element = TreeNode(name)
        element.set_attribute("executionId", mojo_execution.execution_id)
        element.set_attribute("goal", mojo_execution.goal)
        element.set_attribute("groupId", mojo_execution.group_id)
        element.set_attribute("artifactId", mojo_execution.artifact_id)
        element.set_attribute("version", mojo_execution.version)
        element.set_attribute("lifecyclePhase", mojo_execution.lifecycle_phase)
        return element


class SessionEndedHandler(AbstractExecutionHandler):
    """Session end is not reported."""

    supported_kind = EventKind.SESSION_ENDED

    def _handle(self, event: ExecutionEvent) -> bool:
        return True

    def configuration_parameters_to_report(self, event: ExecutionEvent) -> list[str]:
        return []


class ProjectStartedExecutionHandler(AbstractExecutionHandler):
    supported_kind = EventKind.PROJECT_STARTED


class ProjectSucceededExecutionHandler(AbstractExecutionHandler):
    """Reports the main and attached artifacts of the built project."""

    supported_kind = EventKind.PROJECT_SUCCEEDED

    def add_details(self, event: ExecutionEvent, root: TreeNode) -> None:
        project = event.project
        if project is None:
            return

        artifact = self.new_artifact_element("artifact", project.artifact)
        if project.artifact is not None and project.artifact.file is not None:
            artifact.add_child(self.new_file_element("file", project.artifact.file))
        root.add_child(artifact)

        attached = root.add_child(TreeNode("attachedArtifacts"))
        for attached_artifact in project.attached_artifacts:
            element = self.new_artifact_element("artifact", attached_artifact)
            if attached_artifact.file is not None:
                element.add_child(self.new_file_element("file", attached_artifact.file))
            attached.add_child(element)


class ProjectFailedExecutionHandler(AbstractExecutionHandler):
    supported_kind = EventKind.PROJECT_FAILED


class MojoStartedExecutionHandler(AbstractExecutionHandler):
    supported_kind = EventKind.MOJO_STARTED


class MojoSucceededExecutionHandler(AbstractExecutionHandler):
    supported_kind = EventKind.MOJO_SUCCEEDED


class MojoFailedExecutionHandler(AbstractExecutionHandler):
    supported_kind = EventKind.MOJO_FAILED


def evaluate_configuration(node: TreeNode, project: Project | None) -> TreeNode:
    """
    Copy a mojo configuration node with its ``${...}`` expressions resolved.

    A parameter without a value falls back to its ``default-value`` attribute.
    """
    copy = node.deep_copy()
    _evaluate_in_place(copy, project_expressions(project))
    return copy


def _evaluate_in_place(node: TreeNode, expressions: dict[str, str]) -> None:
    value = node.value if node.value else node.attributes.get("default-value")
    if value is not None:
        node.value = EXPRESSION_PATTERN.sub(
            lambda match: expressions.get(match.group(1), match.group(0)), value
        )
    for child in node.children:
        _evaluate_in_place(child, expressions)


def project_expressions(project: Project | None) -> dict[str, str]:
    """Values available to ``${...}`` expressions for a project."""
    if project is None:
        return {}

    expressions = dict(project.properties)
    basedir = None if project.basedir is None else str(project.basedir)
    candidates = {
        "project.groupId": project.group_id,
        "project.artifactId": project.artifact_id,
        "project.version": project.version,
        "project.name": project.name,
        "project.packaging": project.packaging,
        "project.basedir": basedir,
        "basedir": basedir,
    }
    build = project.build
    if build is not None:
        candidates.update(
            {
                "project.build.directory": build.directory,
                "project.build.outputDirectory": build.output_directory,
                "project.build.sourceDirectory": build.source_directory,
                "project.build.testOutputDirectory": build.test_output_directory,
            }
        )
    expressions.update({k: v for k, v in candidates.items() if v is not None})
    return expressions
