"""Build-tool domain objects read by the element builders."""

import re
from dataclasses import dataclass, field
from pathlib import Path

from .tree import TreeNode

SNAPSHOT_VERSION = "SNAPSHOT"

# 1.0-20240102.030405-7
_TIMESTAMPED_VERSION = re.compile(r"^(.*)-(\d{8}\.\d{6})-(\d+)$")


@dataclass
class ArtifactHandler:
    """Packaging information for an artifact type."""

    type: str
    extension: str
    classifier: str | None = None


@dataclass
class Artifact:
    """Coordinates of a build artifact."""

    group_id: str
    artifact_id: str
    version: str
    type: str = "jar"
    classifier: str | None = None
    scope: str | None = None
    file: Path | None = None
    artifact_handler: ArtifactHandler | None = None
    base_version: str | None = None

    def __post_init__(self):
        if self.base_version is None:
            match = _TIMESTAMPED_VERSION.match(self.version)
            self.base_version = (
                f"{match.group(1)}-{SNAPSHOT_VERSION}" if match else self.version
            )

    @property
    def is_snapshot(self) -> bool:
        return self.base_version.endswith(SNAPSHOT_VERSION)

    @property
    def id(self) -> str:
        """groupId:artifactId:type[:classifier]:baseVersion"""
        parts = [self.group_id, self.artifact_id, self.type]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.base_version)
        return ":".join(parts)


@dataclass
class Dependency:
    """A resolved dependency of a project."""

    artifact: Artifact
    scope: str = "compile"
    optional: bool = False


@dataclass
class PluginExecution:
    """An <execution> block of a plugin declaration."""

    id: str = "default"
    goals: list[str] = field(default_factory=list)
    phase: str | None = None
    configuration: TreeNode | None = None


@dataclass
class Plugin:
    """A build plugin declared by a project."""

    group_id: str
    artifact_id: str
    version: str | None = None
    configuration: TreeNode | None = None
    executions: list[PluginExecution] = field(default_factory=list)

    @property
    def key(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass
class MojoExecution:
    """A single plugin goal being executed for a project."""

    group_id: str
    artifact_id: str
    version: str
    goal: str
    execution_id: str = "default"
    lifecycle_phase: str | None = None
    configuration: TreeNode | None = None

    @property
    def key(self) -> str:
        """groupId:artifactId:goal"""
        return f"{self.group_id}:{self.artifact_id}:{self.goal}"


@dataclass
class Build:
    """The <build> section of a project."""

    directory: str | None = None
    output_directory: str | None = None
    source_directory: str | None = None
    test_output_directory: str | None = None
    plugins: list[Plugin] = field(default_factory=list)


@dataclass
class ArtifactRepository:
    """A remote repository artifacts are deployed to."""

    id: str
    url: str


@dataclass
class Project:
    """A module of the build (the reactor project)."""

    group_id: str
    artifact_id: str
    version: str
    name: str | None = None
    packaging: str = "jar"
    basedir: Path | None = None
    file: Path | None = None
    build: Build | None = None
    artifact: Artifact | None = None
    attached_artifacts: list[Artifact] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)
    distribution_repository: ArtifactRepository | None = None
    distribution_snapshot_repository: ArtifactRepository | None = None

    @property
    def build_plugins(self) -> list[Plugin]:
        if self.build is None:
            return []
        return self.build.plugins

    @property
    def id(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.packaging}:{self.version}"
