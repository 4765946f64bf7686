"""The interface for running Gradle tasks, and the errors it can raise."""

from __future__ import annotations

from abc import ABC, abstractmethod

from gradledepcheck.models import GradleConfiguration, GradleModule


class RunnerError(Exception):
    """A Gradle command could not be run successfully."""


class GradlewNotFoundError(RunnerError):
    """The project has no ``gradlew`` wrapper script."""

    def __init__(self, path: str) -> None:
        super().__init__(f"gradlew not found at {path}")
        self.path = path


class LaunchFailedError(RunnerError):
    """The wrapper script could not be started."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to launch gradlew: {message}")
        self.message = message


class ExecutionFailedError(RunnerError):
    """The wrapper script ran but exited with a failure status."""

    def __init__(self, exit_code: int, stderr: str) -> None:
        super().__init__(f"Gradle exited with code {exit_code}: {stderr}")
        self.exit_code = exit_code
        self.stderr = stderr


class GradleRunner(ABC):
    """Executes Gradle commands for a project and returns their output."""

    @abstractmethod
    def run_dependencies(self, project_path: str, configuration: GradleConfiguration) -> str:
        """Return the ``dependencies`` output of the root project."""

    @abstractmethod
    def run_module_dependencies(
        self,
        project_path: str,
        module: GradleModule,
        configuration: GradleConfiguration,
    ) -> str:
        """Return the ``dependencies`` output of one module."""

    @abstractmethod
    def run_dependency_insight(
        self,
        project_path: str,
        dependency: str,
        configuration: GradleConfiguration,
    ) -> str:
        """Return the ``dependencyInsight`` output for one dependency."""

    @abstractmethod
    def list_projects(self, project_path: str) -> list[GradleModule]:
        """Return the modules of the project."""