from pathlib import Path

import pytest

from core import Project, Task, TaskList, Workspace


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch):
    """Keep every test away from the real ~/.gtd_config.yaml and ~/.gtd.yaml."""
    monkeypatch.setenv("GTD_CONFIG_FILE", str(tmp_path / "gtd_config.yaml"))
    monkeypatch.setenv("GTD_WORKSPACE_FILE", str(tmp_path / "workspace.yaml"))
    monkeypatch.delenv("GTD_LANG", raising=False)


@pytest.fixture
def workspace_file(tmp_path: Path) -> Path:
    return tmp_path / "workspace.yaml"


@pytest.fixture
def sample_workspace() -> Workspace:
    """inbox: 2 tasks + project "house" (1 task); next: empty."""
    inbox = TaskList("inbox")
    inbox.push_task(Task("buy milk"))
    inbox.push_task(Task("call mom", description="about sunday", contexts=["phone"]))
    house = Project("house")
    house.push_task(Task("fix sink"))
    inbox.push_project(house)
    workspace = Workspace()
    workspace.push_list(inbox)
    workspace.push_list(TaskList("next"))
    return workspace
