"""Tests for the session request/result and dependency resolution handlers."""

from event_spy.handlers import (
    DependencyResolutionRequestHandler,
    DependencyResolutionResultHandler,
    MavenExecutionRequestHandler,
    MavenExecutionResultHandler,
)
from event_spy.models import (
    Artifact,
    Dependency,
    DependencyResolutionRequest,
    DependencyResolutionResult,
    EventKind,
    ExecutionEvent,
    MavenExecutionRequest,
    MavenExecutionResult,
)


class TestMavenExecutionRequestHandler:
    """Tests for the request node."""

    def test_request(self, handler_factory, reporter, workspace):
        handler = handler_factory(MavenExecutionRequestHandler)
        event = MavenExecutionRequest(
            base_directory=workspace,
            pom=workspace / "pom.xml",
            goals=("clean", "deploy"),
            user_settings_file=workspace / "settings.xml",
            offline=True,
            interactive_mode=False,
            thread_count="1C",
        )

        assert handler.handle(event) is True

        [node] = reporter.nodes
        assert node.name == "MavenExecutionRequest"
        request = node.get_child("request")
        assert request.attributes == {
            "baseDirectory": str(workspace),
            "goals": "clean,deploy",
            "interactiveMode": "false",
            "offline": "true",
            "threadCount": "1C",
        }
        assert node.get_child("pom").value == str(workspace / "pom.xml")
        assert node.get_child("userSettingsFile").value == str(workspace / "settings.xml")
        assert node.get_child("globalSettingsFile").value is None
        assert node.get_child("localRepository").value is None

    def test_ignores_execution_events(self, handler_factory, reporter):
        handler = handler_factory(MavenExecutionRequestHandler)

        assert handler.handle(ExecutionEvent(EventKind.SESSION_STARTED)) is False
        assert reporter.nodes == []


class TestMavenExecutionResultHandler:
    """Tests for the result node."""

    def test_result_with_exceptions(self, handler_factory, reporter, make_project):
        handler = handler_factory(MavenExecutionResultHandler)
        event = MavenExecutionResult(
            project=make_project(),
            exceptions=(RuntimeError("first"), ValueError("\x1b[1msecond\x1b[0m")),
        )

        handler.handle(event)

        node = reporter.nodes[0]
        assert node.get_child("project").attributes["groupId"] == "com.example"
        exceptions = node.get_children("exception")
        assert [e.get_child("message").value for e in exceptions] == ["first", "second"]

    def test_result_without_project(self, handler_factory, reporter):
        handler = handler_factory(MavenExecutionResultHandler)

        handler.handle(MavenExecutionResult())

        node = reporter.nodes[0]
        assert node.get_child("project").attributes == {}
        assert node.get_children("exception") == []


class TestDependencyResolutionHandlers:
    """Tests for dependency resolution events."""

    def test_request_is_suppressed(self, handler_factory, reporter):
        handler = handler_factory(DependencyResolutionRequestHandler)

        assert handler.handle(DependencyResolutionRequest()) is True
        assert reporter.nodes == []

    def test_result(self, handler_factory, reporter, project_context, make_project, workspace):
        project_context.update(
            ExecutionEvent(EventKind.PROJECT_STARTED, project=make_project())
        )
        jar = workspace / "repo" / "junit-4.13.2.jar"
        handler = handler_factory(DependencyResolutionResultHandler)
        event = DependencyResolutionResult(
            resolved_dependencies=(
                Dependency(Artifact("junit", "junit", "4.13.2", file=jar), scope="test"),
                Dependency(Artifact("com.example", "unresolved", "1.0")),
            )
        )

        assert handler.handle(event) is True

        node = reporter.nodes[0]
        assert node.name == "DependencyResolutionResult"
        assert node.get_child("project").attributes["artifactId"] == "my-module"
        [dependency] = node.get_child("resolvedDependencies").children
        assert dependency.attributes["artifactId"] == "junit"
        assert dependency.attributes["scope"] == "test"
        assert dependency.get_child("file").value == str(jar)

    def test_result_without_current_project(self, handler_factory, reporter):
        handler = handler_factory(DependencyResolutionResultHandler)

        handler.handle(DependencyResolutionResult())

        node = reporter.nodes[0]
        assert node.get_child("project") is None
        assert node.get_child("resolvedDependencies").children == []

    def test_result_with_collection_errors(self, handler_factory, reporter):
        handler = handler_factory(DependencyResolutionResultHandler)
        event = DependencyResolutionResult(
            collection_errors=(
                RuntimeError("Could not find artifact com.example:missing:jar:1.0"),
            )
        )

        handler.handle(event)

        node = reporter.nodes[0]
        [error] = node.get_children("exception")
        assert error.attributes["class"] == "RuntimeError"
        assert error.get_child("message").value == (
            "Could not find artifact com.example:missing:jar:1.0"
        )
