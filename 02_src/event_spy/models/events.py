"""Build lifecycle events delivered to the spy."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .project import Dependency, MojoExecution, Project


class EventKind(str, Enum):
    """Discriminant of every event the spy can receive."""

    # Execution events
    PROJECT_DISCOVERY_STARTED = "ProjectDiscoveryStarted"
    SESSION_STARTED = "SessionStarted"
    SESSION_ENDED = "SessionEnded"
    PROJECT_SKIPPED = "ProjectSkipped"
    PROJECT_STARTED = "ProjectStarted"
    PROJECT_SUCCEEDED = "ProjectSucceeded"
    PROJECT_FAILED = "ProjectFailed"
    MOJO_SKIPPED = "MojoSkipped"
    MOJO_STARTED = "MojoStarted"
    MOJO_SUCCEEDED = "MojoSucceeded"
    MOJO_FAILED = "MojoFailed"
    FORK_STARTED = "ForkStarted"
    FORK_SUCCEEDED = "ForkSucceeded"
    FORK_FAILED = "ForkFailed"
    FORKED_PROJECT_STARTED = "ForkedProjectStarted"
    FORKED_PROJECT_SUCCEEDED = "ForkedProjectSucceeded"
    FORKED_PROJECT_FAILED = "ForkedProjectFailed"

    # Request / result events
    EXECUTION_REQUEST = "ExecutionRequest"
    EXECUTION_RESULT = "ExecutionResult"
    DEPENDENCY_RESOLUTION_REQUEST = "DependencyResolutionRequest"
    DEPENDENCY_RESOLUTION_RESULT = "DependencyResolutionResult"

    @property
    def is_execution_event(self) -> bool:
        return self in EXECUTION_EVENT_KINDS


EXECUTION_EVENT_KINDS = frozenset(
    kind
    for kind in EventKind
    if kind
    not in (
        EventKind.EXECUTION_REQUEST,
        EventKind.EXECUTION_RESULT,
        EventKind.DEPENDENCY_RESOLUTION_REQUEST,
        EventKind.DEPENDENCY_RESOLUTION_RESULT,
    )
)


@dataclass(frozen=True)
class ExecutionEvent:
    """A project or mojo lifecycle boundary."""

    type: EventKind
    project: Project | None = None
    mojo_execution: MojoExecution | None = None
    exception: BaseException | None = None

    def __post_init__(self):
        if not self.type.is_execution_event:
            raise ValueError(f"{self.type.value} is not an execution event type")

    @property
    def kind(self) -> EventKind:
        return self.type


@dataclass(frozen=True)
class MavenExecutionRequest:
    """The command line request that started the session."""

    base_directory: Path | None = None
    pom: Path | None = None
    goals: tuple[str, ...] = ()
    user_settings_file: Path | None = None
    global_settings_file: Path | None = None
    local_repository_path: Path | None = None
    interactive_mode: bool = True
    offline: bool = False
    thread_count: str = "1"

    @property
    def kind(self) -> EventKind:
        return EventKind.EXECUTION_REQUEST


@dataclass(frozen=True)
class MavenExecutionResult:
    """Outcome of the session."""

    project: Project | None = None
    exceptions: tuple[BaseException, ...] = ()

    @property
    def kind(self) -> EventKind:
        return EventKind.EXECUTION_RESULT


@dataclass(frozen=True)
class DependencyResolutionRequest:
    """Dependency resolution is about to start for a project."""

    project: Project | None = None

    @property
    def kind(self) -> EventKind:
        return EventKind.DEPENDENCY_RESOLUTION_REQUEST


@dataclass(frozen=True)
class DependencyResolutionResult:
    """Dependencies resolved for the current project."""

    resolved_dependencies: tuple[Dependency, ...] = ()
    collection_errors: tuple[BaseException, ...] = ()

    @property
    def kind(self) -> EventKind:
        return EventKind.DEPENDENCY_RESOLUTION_RESULT
