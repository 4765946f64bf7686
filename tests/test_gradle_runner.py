import pytest

from gradledepcheck.gradle_runner import (
    ExecutionFailedError,
    GradleRunner,
    GradlewNotFoundError,
    LaunchFailedError,
    RunnerError,
)
from gradledepcheck.models import GradleConfiguration, GradleModule


class RecordingRunner(GradleRunner):
    def __init__(self, modules):
        self.calls = []
        self.modules = modules

    def run_dependencies(self, project_path, configuration):
        self.calls.append(("deps", project_path, configuration))
        return "+--- com.a:lib:1.0"

    def run_module_dependencies(self, project_path, module, configuration):
        self.calls.append(("module", project_path, module.path, configuration))
        return f"output for {module.path}"

    def run_dependency_insight(self, project_path, dependency, configuration):
        self.calls.append(("insight", project_path, dependency, configuration))
        return f"insight {dependency}"

    def list_projects(self, project_path):
        self.calls.append(("projects", project_path))
        return list(self.modules)


def test_runner_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GradleRunner()


def test_implementation_dispatches_and_records_calls():
    module = GradleModule("app", ":app")
    runner = RecordingRunner([module])
    cfg = GradleConfiguration.RUNTIME_CLASSPATH

    assert runner.run_module_dependencies("/proj", module, cfg) == "output for :app"
    assert runner.list_projects("/proj") == [module]
    assert runner.calls == [("module", "/proj", ":app", cfg), ("projects", "/proj")]


def test_gradlew_not_found_is_runner_error_with_path():
    error = GradlewNotFoundError("/proj/gradlew")
    assert isinstance(error, RunnerError)
    assert error.path == "/proj/gradlew"


def test_execution_failed_carries_exit_code_and_stderr():
    error = ExecutionFailedError(2, "build failed")
    assert error.exit_code == 2
    assert error.stderr == "build failed"
    assert "build failed" in str(error)
    assert isinstance(error, RunnerError)


def test_launch_failed_carries_message():
    error = LaunchFailedError("permission denied")
    assert error.message == "permission denied"
    assert "permission denied" in str(error)
    assert isinstance(error, RunnerError)


def test_gradlew_not_found_mentions_path():
    error = GradlewNotFoundError("/nowhere/gradlew")
    assert "/nowhere/gradlew" in str(error)