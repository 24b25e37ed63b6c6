"""Ambient project context."""

from typing import Protocol

from .models import Project


class IProjectContext(Protocol):
    """Provides the project currently being built."""

    @property
    def current_project(self) -> Project | None:
        ...


class ProjectContext:
    """Remembers the project of the last project-scoped event."""

    def __init__(self):
        self._current_project: Project | None = None

    @property
    def current_project(self) -> Project | None:
        return self._current_project

    def update(self, event: object) -> None:
        """Track the project carried by an event, if any."""
        project = getattr(event, "project", None)
        if isinstance(project, Project):
            self._current_project = project

    def clear(self) -> None:
        self._current_project = None
