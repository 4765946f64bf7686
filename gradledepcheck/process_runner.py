"""Run Gradle tasks through the project's ``gradlew`` wrapper."""

from __future__ import annotations

import subprocess
from pathlib import Path

from gradledepcheck import project_list_parser
from gradledepcheck.gradle_runner import (
    ExecutionFailedError,
    GradleRunner,
    GradlewNotFoundError,
    LaunchFailedError,
)
from gradledepcheck.models import GradleConfiguration, GradleModule


class ProcessGradleRunner(GradleRunner):
    """A GradleRunner that starts ``gradlew`` as a child process."""

    @staticmethod
    def _gradlew_path(project_path: str) -> str:
        path = Path(project_path) / "gradlew"
        if not path.exists():
            raise GradlewNotFoundError(str(path))
        return str(path)

    @classmethod
    def _execute(cls, project_path: str, *args: str) -> str:
        gradlew = cls._gradlew_path(project_path)
        try:
            completed = subprocess.run(
                [gradlew, *args],
                cwd=project_path,
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise LaunchFailedError(str(exc)) from exc

        if completed.returncode != 0:
            exit_code = completed.returncode if completed.returncode > 0 else -1
            raise ExecutionFailedError(
                exit_code, completed.stderr.decode("utf-8", errors="replace")
            )
        return completed.stdout.decode("utf-8", errors="replace")

    def run_dependencies(self, project_path: str, configuration: GradleConfiguration) -> str:
        return self._execute(
            project_path, "dependencies", "--configuration", configuration.value, "-q"
        )

    def run_module_dependencies(
        self,
        project_path: str,
        module: GradleModule,
        configuration: GradleConfiguration,
    ) -> str:
        return self._execute(
            project_path,
            f"{module.path}:dependencies",
            "--configuration",
            configuration.value,
            "-q",
        )

    def run_dependency_insight(
        self,
        project_path: str,
        dependency: str,
        configuration: GradleConfiguration,
    ) -> str:
        return self._execute(
            project_path,
            "dependencyInsight",
            "--dependency",
            dependency,
            "--configuration",
            configuration.value,
            "-q",
        )

    def list_projects(self, project_path: str) -> list[GradleModule]:
        return project_list_parser.parse(self._execute(project_path, "projects", "-q"))