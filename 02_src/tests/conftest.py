"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def reporter():
    """Create in-memory reporter for testing."""
    from event_spy.reporter import InMemoryReporter

    return InMemoryReporter()


@pytest.fixture
def artifact_handlers():
    """Create artifact handler registry with the default types."""
    from event_spy.artifact_handlers import ArtifactHandlerRegistry

    return ArtifactHandlerRegistry()


@pytest.fixture
def project_context():
    """Create empty project context."""
    from event_spy.context import ProjectContext

    return ProjectContext()


@pytest.fixture
def handler_factory(reporter, artifact_handlers, project_context):
    """Build a handler of the given type wired to the shared collaborators."""

    def factory(handler_type):
        return handler_type(
            reporter,
            artifact_handlers=artifact_handlers,
            project_context=project_context,
        )

    return factory


@pytest.fixture
def dispatcher(reporter, artifact_handlers, project_context):
    """Create dispatcher with the standard handler set."""
    from event_spy.dispatcher import EventDispatcher
    from event_spy.handlers import create_default_handlers

    return EventDispatcher(
        create_default_handlers(
            reporter,
            artifact_handlers=artifact_handlers,
            project_context=project_context,
        )
    )


@pytest.fixture
def workspace(tmp_path):
    """Canonical temporary directory holding a module checkout."""
    base = tmp_path.resolve() / "my-module"
    (base / "target").mkdir(parents=True)
    return base


@pytest.fixture
def make_project(workspace):
    """Create a Project rooted in the workspace."""
    from event_spy.models import Build, Project

    def factory(pom_name: str = "pom.xml", **kwargs):
        defaults = {
            "group_id": "com.example",
            "artifact_id": "my-module",
            "version": "1.0-SNAPSHOT",
            "name": "My Module",
            "packaging": "jar",
            "basedir": workspace,
            "file": workspace / pom_name,
            "build": Build(
                directory=str(workspace / "target"),
                output_directory=str(workspace / "target" / "classes"),
                source_directory=str(workspace / "src" / "main" / "java"),
            ),
        }
        defaults.update(kwargs)
        return Project(**defaults)

    return factory


@pytest.fixture
def spy_config():
    """Enabled spy configuration."""
    from event_spy.config import SpyConfig

    return SpyConfig(disabled=False)


@pytest.fixture(autouse=True)
def reset_spy_logger():
    """Undo logging configured by MavenEventSpy.init()."""
    yield
    import logging

    spy_logger = logging.getLogger("event_spy")
    for handler in list(spy_logger.handlers):
        handler.close()
        spy_logger.removeHandler(handler)
    spy_logger.setLevel(logging.NOTSET)
