"""Artifact type to file extension lookup."""

from typing import Protocol

from .models import ArtifactHandler


class IArtifactHandlerRegistry(Protocol):
    """Resolves the packaging information of an artifact type."""

    def get_artifact_handler(self, artifact_type: str) -> ArtifactHandler | None:
        """Get the handler for a type, or None if the type is unknown."""
        ...


# Stock types of the build tool
DEFAULT_ARTIFACT_HANDLERS = (
    ArtifactHandler("pom", "pom"),
    ArtifactHandler("jar", "jar"),
    ArtifactHandler("test-jar", "jar", classifier="tests"),
    ArtifactHandler("maven-plugin", "jar"),
    ArtifactHandler("ejb", "jar"),
    ArtifactHandler("ejb-client", "jar", classifier="client"),
    ArtifactHandler("java-source", "jar", classifier="sources"),
    ArtifactHandler("javadoc", "jar", classifier="javadoc"),
    ArtifactHandler("war", "war"),
    ArtifactHandler("ear", "ear"),
    ArtifactHandler("rar", "rar"),
)


class ArtifactHandlerRegistry:
    """In-memory registry seeded with the default artifact types."""

    def __init__(self, handlers: list[ArtifactHandler] | None = None):
        self._handlers: dict[str, ArtifactHandler] = {}
        for handler in DEFAULT_ARTIFACT_HANDLERS if handlers is None else handlers:
            self.register(handler)

    def register(self, handler: ArtifactHandler) -> None:
        """Register or replace the handler of a type."""
        self._handlers[handler.type] = handler

    def get_artifact_handler(self, artifact_type: str) -> ArtifactHandler | None:
        return self._handlers.get(artifact_type)

