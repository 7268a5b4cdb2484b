"""
Shared fixtures for taskname tests.
"""
import pytest

import taskname.utils.settings as settings
from taskname.utils import log_utils


@pytest.fixture()
def settings_file(tmp_path, monkeypatch):
    """Point TASKNAME_SETTINGS at a fresh file path and clear the settings cache."""
    path = tmp_path / "taskname_settings.yaml"
    monkeypatch.setenv("TASKNAME_SETTINGS", str(path))
    monkeypatch.setattr(settings, "_cached", {})
    return path


@pytest.fixture()
def fresh_logger(settings_file):
    """Let the library root logger be configured again from ``settings_file``."""
    log_utils.reset_project_root_logger()
    yield settings_file
    log_utils.reset_project_root_logger()


@pytest.fixture()
def accepted_names():
    return [
        "build", "test", "deploy", "A", "a", "1", "a1", "a-b",
        "my-task", "my_task", "build-123", "task_456", "123task",
        "my-task_123", "Build-Task_1", "camelCaseTask",
        "namespace::task", "my-namespace::my-task", "ns1::ns2::task",
        "project::build::release",
    ]


@pytest.fixture()
def rejected_names():
    return [
        "", " ", " task", "task ", "task\t", "\ntask", "task with spaces",
        "-task", "task-", "_task", "task_",
        "::task", "task::", "::", "::::", "task:::name", "task::::name",
        "task@name", "task#name", "task$name", "task%name", "task&name",
        "task*name", "task!name", "task.name", "task/name", "task\\name",
        "a:b", "caf\u00e9", "任务", "ns::-build", "ns::build_", "a" * 257,
    ]
