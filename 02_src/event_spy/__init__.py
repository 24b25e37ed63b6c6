"""Maven event spy: reports build lifecycle events as tree nodes."""

from .artifact_handlers import ArtifactHandlerRegistry, IArtifactHandlerRegistry
from .config import SpyConfig, load_config
from .context import IProjectContext, ProjectContext
from .dispatcher import EventDispatcher, IEventDispatcher
from .errors import EventSpyError, HandlerConfigurationError, RuntimeIOError
from .models import (
    Artifact,
    ArtifactHandler,
    ArtifactRepository,
    Build,
    Dependency,
    DependencyResolutionRequest,
    DependencyResolutionResult,
    EventKind,
    ExecutionEvent,
    MavenExecutionRequest,
    MavenExecutionResult,
    MojoExecution,
    Plugin,
    PluginExecution,
    Project,
    TreeNode,
)
from .reporter import IReporter, InMemoryReporter
from .spy import IEventSpy, MavenEventSpy

__all__ = [
    # Spy
    "IEventSpy",
    "MavenEventSpy",
    "SpyConfig",
    "load_config",
    # Models
    "EventKind",
    "ExecutionEvent",
    "MavenExecutionRequest",
    "MavenExecutionResult",
    "DependencyResolutionRequest",
    "DependencyResolutionResult",
    "Artifact",
    "ArtifactHandler",
    "ArtifactRepository",
    "Build",
    "Dependency",
    "MojoExecution",
    "Plugin",
    "PluginExecution",
    "Project",
    "TreeNode",
    # Components
    "IEventDispatcher",
    "EventDispatcher",
    "IReporter",
    "InMemoryReporter",
    "IArtifactHandlerRegistry",
    "ArtifactHandlerRegistry",
    "IProjectContext",
    "ProjectContext",
    # Errors
    "EventSpyError",
    "HandlerConfigurationError",
    "RuntimeIOError",
]
