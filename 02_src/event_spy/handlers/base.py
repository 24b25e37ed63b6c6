"""Base handler and the element builders shared by all handlers."""

import logging
import os
import re
import traceback
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import ClassVar, Protocol

from ..artifact_handlers import IArtifactHandlerRegistry
from ..context import IProjectContext
from ..errors import RuntimeIOError
from ..logging_config import get_logger
from ..models import Artifact, Dependency, EventKind, Project, TreeNode
from ..reporter import IReporter

LOG_PREFIX = "[maven-event-spy]"

DESCRIPTOR_FILENAME = "pom.xml"

# Descriptor aliases written by build-time rewriting tools:
# flatten-maven-plugin, maven-git-versioning-extension, maven-shade-plugin
DESCRIPTOR_ALIASES = (
    ".flattened-pom.xml",
    ".git-versioned-pom.xml",
    "dependency-reduced-pom.xml",
)

FLATTEN_PLUGIN_KEY = "org.codehaus.mojo:flatten-maven-plugin"
FLATTEN_GOAL = "flatten"
FLATTENED_POM_FILENAME = "flattenedPomFilename"

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


class IMavenEventHandler(Protocol):
    """Handles the events of a single kind."""

    supported_type: type
    supported_kind: EventKind
    supported_goal: str | None

    def handle(self, event: object) -> bool:
        """Process the event if it is of the supported type and kind."""
        ...


class AbstractEventHandler(ABC):
    """Matches events on their payload type and kind, and builds report nodes."""

    supported_type: ClassVar[type | None] = None
    supported_kind: ClassVar[EventKind | None] = None
    supported_goal: ClassVar[str | None] = None

    def __init__(
        self,
        reporter: IReporter,
        artifact_handlers: IArtifactHandlerRegistry | None = None,
        project_context: IProjectContext | None = None,
        logger: logging.Logger | None = None,
    ):
        self.reporter = reporter
        self.artifact_handlers = artifact_handlers
        self.project_context = project_context
        self.logger = logger or get_logger(
            f"event_spy.handlers.{type(self).__name__}"
        )

    def handle(self, event: object) -> bool:
        """Process the event if it is of the supported type and kind."""
        if not self.accepts(event):
            return False
        return self._handle(event)

    def accepts(self, event: object) -> bool:
        """Type test on the payload class, then the kind."""
        event_type = self.supported_type
        if event_type is None or not isinstance(event, event_type):
            return False
        kind = event.kind
        return isinstance(kind, EventKind) and kind == self.supported_kind

    @abstractmethod
    def _handle(self, event) -> bool:
        """Process an event of the supported kind."""

    def __repr__(self) -> str:
        kind = getattr(self.supported_kind, "value", self.supported_kind)
        return f"{type(self).__name__}[kind={kind}, goal={self.supported_goal}]"

    # Element builders

    def new_element(self, name: str, value: str | None) -> TreeNode:
        return TreeNode(name, value=value)

    def new_project_element(self, name: str, project: Project | None) -> TreeNode:
        """
        Build the node describing a project.

        The descriptor file is reported under its conventional name when a
        build-time tool replaced it with an alias.
        """
        element = TreeNode(name)
        if project is None:
            return element

        element.set_attribute("name", project.name)
        element.set_attribute("groupId", project.group_id)
        element.set_attribute("artifactId", project.artifact_id)
        element.set_attribute("version", project.version)
        element.set_attribute("packaging", project.packaging)

        if project.basedir is not None:
            element.set_attribute("baseDir", canonical_path(project.basedir))

        if project.file is not None:
            absolute_path = canonical_path(project.file)
            element.set_attribute(
                "file", self._normalize_project_file(project, absolute_path)
            )

        build = project.build
        if build is not None:
            build_element = element.add_child(TreeNode("build"))
            build_element.set_attribute("directory", build.directory)
            build_element.set_attribute("sourceDirectory", build.source_directory)

        return element

    def _normalize_project_file(self, project: Project, absolute_path: str) -> str:
        directory, _, filename = absolute_path.rpartition(os.sep)
        if filename == DESCRIPTOR_FILENAME:
            return absolute_path
        if filename in DESCRIPTOR_ALIASES:
            return directory + os.sep + DESCRIPTOR_FILENAME

        flattened_pom_filename = get_flattened_pom_filename(project)
        if flattened_pom_filename is not None and filename == flattened_pom_filename:
            return directory + os.sep + DESCRIPTOR_FILENAME

        self.logger.warning(
            "%s Unexpected Maven project file name '%s', problems may occur",
            LOG_PREFIX,
            Path(project.file).name,
        )
        return absolute_path

    def new_exception_element(
        self, name: str, exception: BaseException | None
    ) -> TreeNode:
        element = TreeNode(name)
        if exception is None:
            return element

        element.set_attribute("class", qualified_name(type(exception)))
        message = remove_ansi_color(exception_message(exception))
        element.add_child(TreeNode("message", value=message))
        stack_trace = "".join(
            traceback.format_exception(
                type(exception), exception, exception.__traceback__
            )
        )
        element.add_child(
            TreeNode("stackTrace", value=remove_ansi_color(stack_trace))
        )
        return element

    def new_file_element(self, name: str, path: str | Path | None) -> TreeNode:
        return TreeNode(name, value=None if path is None else canonical_path(path))

    def new_artifact_element(self, name: str, artifact: Artifact | None) -> TreeNode:
        element = TreeNode(name)
        if artifact is None:
            return element

        element.set_attribute("groupId", artifact.group_id)
        element.set_attribute("artifactId", artifact.artifact_id)
        element.set_attribute("baseVersion", artifact.base_version)
        element.set_attribute("version", artifact.version)
        element.set_attribute("snapshot", render_bool(artifact.is_snapshot))
        if artifact.classifier is not None:
            element.set_attribute("classifier", artifact.classifier)
        element.set_attribute("type", artifact.type)
        element.set_attribute("id", artifact.id)
        element.set_attribute("extension", self.artifact_extension(artifact))
        return element

    def new_dependency_element(self, name: str, dependency: Dependency) -> TreeNode:
        artifact = dependency.artifact
        element = self.new_artifact_element(name, artifact)
        element.set_attribute("scope", dependency.scope)
        element.set_attribute("optional", render_bool(dependency.optional))
        if artifact.file is not None:
            element.add_child(self.new_file_element("file", artifact.file))
        return element

    def artifact_extension(self, artifact: Artifact) -> str:
        """Extension of the artifact file, falling back to the artifact type."""
        if artifact.artifact_handler is not None:
            return artifact.artifact_handler.extension
        if self.artifact_handlers is not None:
            handler = self.artifact_handlers.get_artifact_handler(artifact.type)
            if handler is not None:
                return handler.extension
        return artifact.type


def get_flattened_pom_filename(project: Project) -> str | None:
    """
    Get the "flattenedPomFilename" of the flatten-maven-plugin, if configured.

    Executions running the "flatten" goal are consulted before the plugin
    level configuration.
    """
    for plugin in project.build_plugins:
        if plugin.key != FLATTEN_PLUGIN_KEY:
            continue
        for execution in plugin.executions:
            if FLATTEN_GOAL in execution.goals and execution.configuration is not None:
                value = execution.configuration.get_child(FLATTENED_POM_FILENAME)
                if value is not None:
                    return value.value
        if plugin.configuration is not None:
            value = plugin.configuration.get_child(FLATTENED_POM_FILENAME)
            if value is not None:
                return value.value
    return None


def exception_message(exception: BaseException) -> str:
    """The message of an exception, without the quoting str() adds to KeyError."""
    if len(exception.args) == 1 and isinstance(exception.args[0], str):
        return exception.args[0]
    return str(exception)


def remove_ansi_color(text: str | None) -> str | None:
    """Strip ANSI color escape sequences."""
    if text is None:
        return None
    return ANSI_PATTERN.sub("", text)


def canonical_path(path: str | Path) -> str:
    """Absolute path with symlinks resolved."""
    try:
        return str(Path(path).resolve())
    except (OSError, RuntimeError) as e:
        raise RuntimeIOError(f"Cannot canonicalize {path}: {e}") from e


def qualified_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def render_bool(value: bool) -> str:
    return "true" if value else "false"


def timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()
