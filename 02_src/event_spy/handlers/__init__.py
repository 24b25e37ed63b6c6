"""Event handlers module."""

import logging

from ..artifact_handlers import IArtifactHandlerRegistry
from ..context import IProjectContext
from ..reporter import IReporter
from .base import (
    AbstractEventHandler,
    IMavenEventHandler,
    canonical_path,
    get_flattened_pom_filename,
    remove_ansi_color,
)
from .dependencies import (
    DependencyResolutionRequestHandler,
    DependencyResolutionResultHandler,
)
from .execution import (
    AbstractExecutionHandler,
    MojoFailedExecutionHandler,
    MojoStartedExecutionHandler,
    MojoSucceededExecutionHandler,
    ProjectFailedExecutionHandler,
    ProjectStartedExecutionHandler,
    ProjectSucceededExecutionHandler,
    SessionEndedHandler,
)
from .plugins import (
    DeployDeployExecutionHandler,
    FailsafeTestExecutionHandler,
    SurefireTestExecutionHandler,
)
from .request import MavenExecutionRequestHandler, MavenExecutionResultHandler

DEFAULT_HANDLER_TYPES: tuple[type[AbstractEventHandler], ...] = (
    SessionEndedHandler,
    ProjectStartedExecutionHandler,
    ProjectSucceededExecutionHandler,
    ProjectFailedExecutionHandler,
    MojoStartedExecutionHandler,
    MojoSucceededExecutionHandler,
    MojoFailedExecutionHandler,
    SurefireTestExecutionHandler,
    FailsafeTestExecutionHandler,
    DeployDeployExecutionHandler,
    MavenExecutionRequestHandler,
    MavenExecutionResultHandler,
    DependencyResolutionRequestHandler,
    DependencyResolutionResultHandler,
)


def create_default_handlers(
    reporter: IReporter,
    artifact_handlers: IArtifactHandlerRegistry | None = None,
    project_context: IProjectContext | None = None,
    logger: logging.Logger | None = None,
) -> list[AbstractEventHandler]:
    """Instantiate the standard handler set sharing the given collaborators."""
    return [
        handler_type(
            reporter,
            artifact_handlers=artifact_handlers,
            project_context=project_context,
            logger=logger,
        )
        for handler_type in DEFAULT_HANDLER_TYPES
    ]


__all__ = [
    "IMavenEventHandler",
    "AbstractEventHandler",
    "AbstractExecutionHandler",
    "SessionEndedHandler",
    "ProjectStartedExecutionHandler",
    "ProjectSucceededExecutionHandler",
    "ProjectFailedExecutionHandler",
    "MojoStartedExecutionHandler",
    "MojoSucceededExecutionHandler",
    "MojoFailedExecutionHandler",
    "SurefireTestExecutionHandler",
    "FailsafeTestExecutionHandler",
    "DeployDeployExecutionHandler",
    "MavenExecutionRequestHandler",
    "MavenExecutionResultHandler",
    "DependencyResolutionRequestHandler",
    "DependencyResolutionResultHandler",
    "DEFAULT_HANDLER_TYPES",
    "create_default_handlers",
    "canonical_path",
    "get_flattened_pom_filename",
    "remove_ansi_color",
]
