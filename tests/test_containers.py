import pytest

from core import (
    AlreadyExists,
    InvalidInput,
    ListContainer,
    NotFound,
    Project,
    ProjectContainer,
    Task,
    TaskContainer,
    TaskList,
    TaskStatus,
    Workspace,
    normalize_task_status,
)


def test_capabilities_are_independent():
    project = Project("house")
    task_list = TaskList("inbox")
    workspace = Workspace()
    assert isinstance(project, TaskContainer)
    assert not isinstance(project, ProjectContainer)
    assert isinstance(task_list, TaskContainer)
    assert isinstance(task_list, ProjectContainer)
    assert isinstance(workspace, ListContainer)
    assert not isinstance(workspace, TaskContainer)


def test_push_returns_position_and_get_is_optional():
    task_list = TaskList("inbox")
    assert task_list.push_task(Task("a")) == 0
    assert task_list.push_task(Task("b")) == 1
    assert task_list.get_task(1).name == "b"
    assert task_list.get_task(2) is None
    assert task_list.get_task(-1) is None


def test_forced_get_reports_identifier():
    task_list = TaskList("inbox", [Task("a")])
    with pytest.raises(NotFound) as exc:
        task_list.get_task_forced(4)
    assert exc.value.kind == "task"
    assert exc.value.ref == "#5"


def test_remove_shifts_following_positions():
    project = Project("house", [Task("a"), Task("b"), Task("c")])
    removed = project.remove_task(0)
    assert removed.name == "a"
    assert [t.name for t in project.tasks] == ["b", "c"]
    assert project.get_task(0).name == "b"


def test_remove_out_of_range_leaves_sequence_alone():
    project = Project("house", [Task("a")])
    with pytest.raises(NotFound):
        project.remove_task(3)
    assert [t.name for t in project.tasks] == ["a"]


def test_name_uniqueness_checks():
    task_list = TaskList("inbox", [Task("a")], [Project("house")])
    assert task_list.task_exists("a")
    assert not task_list.task_exists("b")
    with pytest.raises(AlreadyExists):
        task_list.task_exists_forced("a")
    task_list.task_exists_forced("b")
    with pytest.raises(AlreadyExists):
        task_list.project_exists_forced("house")


def test_sequences_are_read_only_views():
    task_list = TaskList("inbox")
    assert isinstance(task_list.tasks, tuple)
    assert isinstance(task_list.projects, tuple)
    assert isinstance(Workspace().lists, tuple)


def test_workspace_lists_by_name():
    workspace = Workspace.with_lists(["inbox", "next"])
    assert workspace.list_position("next") == 1
    assert workspace.get_list("later") is None
    with pytest.raises(NotFound):
        workspace.get_list_forced("later")
    with pytest.raises(AlreadyExists):
        workspace.list_exists_forced("inbox")
    assert workspace.remove_list("inbox").name == "inbox"
    assert [tl.name for tl in workspace.lists] == ["next"]
    with pytest.raises(NotFound):
        workspace.remove_list("inbox")


def test_count_tasks_includes_projects(sample_workspace):
    assert sample_workspace.get_list("inbox").count_tasks() == 3
    assert sample_workspace.count_tasks() == 3


def test_task_contexts_and_status():
    task = Task("call mom")
    assert task.status is TaskStatus.TODO
    assert not task.done
    task.add_context("phone")
    with pytest.raises(AlreadyExists):
        task.add_context("phone")
    task.remove_context("phone")
    with pytest.raises(NotFound):
        task.remove_context("phone")


def test_status_parsing():
    assert TaskStatus.from_string("done") is TaskStatus.DONE
    assert TaskStatus.from_string("completed") is TaskStatus.DONE
    assert TaskStatus.from_string("open") is TaskStatus.TODO
    assert TaskStatus.DONE.toggled() is TaskStatus.TODO


def test_normalize_task_status_keeps_unknown_tokens():
    assert normalize_task_status(" completed ") == "DONE"
    assert normalize_task_status("pending") == "TODO"
    assert normalize_task_status("waiting for") == "WAITING_FOR"
    assert normalize_task_status("") == ""
    with pytest.raises(InvalidInput):
        TaskStatus.from_string("waiting for")
