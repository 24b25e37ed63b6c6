"""Core data models for the Maven event spy."""

from .events import (
    EXECUTION_EVENT_KINDS,
    DependencyResolutionRequest,
    DependencyResolutionResult,
    EventKind,
    ExecutionEvent,
    MavenExecutionRequest,
    MavenExecutionResult,
)
from .project import (
    Artifact,
    ArtifactHandler,
    ArtifactRepository,
    Build,
    Dependency,
    MojoExecution,
    Plugin,
    PluginExecution,
    Project,
)
from .tree import TreeNode

__all__ = [
    # Events
    "EventKind",
    "EXECUTION_EVENT_KINDS",
    "ExecutionEvent",
    "MavenExecutionRequest",
    "MavenExecutionResult",
    "DependencyResolutionRequest",
    "DependencyResolutionResult",
    # Project
    "Artifact",
    "ArtifactHandler",
    "ArtifactRepository",
    "Build",
    "Dependency",
    "MojoExecution",
    "Plugin",
    "PluginExecution",
    "Project",
    # Report
    "TreeNode",
]
