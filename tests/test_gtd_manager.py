import pytest

from core import (
    AlreadyExists,
    ContainerPath,
    InvalidInput,
    InvalidPath,
    NotFound,
    TaskPath,
    TaskStatus,
    Workspace,
)
from core.desktop.devtools.application.gtd_manager import GTDManager, resolve_container


@pytest.fixture
def manager(workspace_file):
    return GTDManager(workspace_file=workspace_file)


def _names(container):
    return [t.name for t in container.tasks]


def test_create_task_returns_its_path(manager):
    workspace = Workspace.with_lists(["inbox"])
    path, task = manager.create_task(workspace, "inbox", "buy milk", "2 liters")
    assert path == TaskPath("inbox", 0)
    assert str(path) == "inbox/1"
    assert task.description == "2 liters"
    assert task.status is TaskStatus.TODO


def test_create_task_duplicate_name_in_same_container(manager, sample_workspace):
    with pytest.raises(AlreadyExists):
        manager.create_task(sample_workspace, "inbox", "buy milk")
    # same name is fine in another container
    manager.create_task(sample_workspace, "inbox/1", "buy milk")
    assert _names(sample_workspace.get_list("inbox").get_project(0)) == ["fix sink", "buy milk"]


def test_create_task_rejects_empty_name(manager, sample_workspace):
    with pytest.raises(InvalidInput):
        manager.create_task(sample_workspace, "inbox", "   ")


def test_create_task_in_missing_list(manager, sample_workspace):
    with pytest.raises(NotFound):
        manager.create_task(sample_workspace, "later", "x")


def test_remove_task_shifts_positions(manager, sample_workspace):
    _, removed = manager.remove_task(sample_workspace, "inbox/1")
    assert removed.name == "buy milk"
    _, task = manager.get_task(sample_workspace, "inbox/1")
    assert task.name == "call mom"


def test_remove_missing_task(manager, sample_workspace):
    with pytest.raises(NotFound):
        manager.remove_task(sample_workspace, "inbox/9")
    assert sample_workspace.count_tasks() == 3


def test_walkthrough_create_remove_move(manager):
    workspace = Workspace.with_lists(["inbox"])
    path, _ = manager.create_task(workspace, "inbox", "buy milk")
    assert str(path) == "inbox/1"
    assert len(workspace.get_list("inbox").tasks) == 1
    manager.remove_task(workspace, "inbox/1")
    assert len(workspace.get_list("inbox").tasks) == 0
    manager.create_task(workspace, "inbox", "buy milk")
    manager.create_list(workspace, "next")
    manager.move_task(workspace, "inbox/1", "next")
    assert _names(workspace.get_list("inbox")) == []
    assert _names(workspace.get_list("next")) == ["buy milk"]


def test_move_task_appends_and_conserves_count(manager, sample_workspace):
    before = sample_workspace.count_tasks()
    source, target, task = manager.move_task(sample_workspace, "inbox/1/1", "inbox")
    assert source == TaskPath("inbox", 0, 0)
    assert target == TaskPath("inbox", 2)
    assert task.name == "fix sink"
    assert sample_workspace.count_tasks() == before
    assert _names(sample_workspace.get_list("inbox")) == ["buy milk", "call mom", "fix sink"]


def test_move_task_into_project(manager, sample_workspace):
    _, target, _ = manager.move_task(sample_workspace, "inbox/2", "inbox/1")
    assert str(target) == "inbox/1/2"
    assert _names(sample_workspace.get_list("inbox")) == ["buy milk"]


@pytest.mark.parametrize("target", ["later", "inbox/5", "next/1"])
def test_move_task_to_missing_target_changes_nothing(manager, sample_workspace, target):
    with pytest.raises(NotFound):
        manager.move_task(sample_workspace, "inbox/1", target)
    assert _names(sample_workspace.get_list("inbox")) == ["buy milk", "call mom"]


def test_move_missing_task(manager, sample_workspace):
    with pytest.raises(NotFound):
        manager.move_task(sample_workspace, "inbox/7", "next")
    assert sample_workspace.count_tasks() == 3


def test_move_task_bad_paths(manager, sample_workspace):
    with pytest.raises(InvalidPath):
        manager.move_task(sample_workspace, "inbox", "next")
    with pytest.raises(InvalidPath):
        manager.move_task(sample_workspace, "inbox/1", "next/1/1")


def test_mark_and_toggle(manager, sample_workspace):
    _, task = manager.mark_task(sample_workspace, "inbox/1")
    assert task.status is TaskStatus.DONE
    _, task = manager.mark_task(sample_workspace, "inbox/1", "todo")
    assert task.status is TaskStatus.TODO
    _, task = manager.toggle_task(sample_workspace, "inbox/1")
    assert task.done
    with pytest.raises(InvalidInput):
        manager.mark_task(sample_workspace, "inbox/1", "someday")


def test_rename_task(manager, sample_workspace):
    _, old, task = manager.rename_task(sample_workspace, "inbox/1", "Buy oat milk")
    assert old == "buy milk"
    assert task.name == "Buy oat milk"
    with pytest.raises(AlreadyExists):
        manager.rename_task(sample_workspace, "inbox/1", "call mom")
    # renaming to its own name is a no-op
    manager.rename_task(sample_workspace, "inbox/2", "call mom")


def test_describe_task_sets_and_clears(manager, sample_workspace):
    _, task = manager.describe_task(sample_workspace, "inbox/1", "  two liters ")
    assert task.description == "two liters"
    _, task = manager.describe_task(sample_workspace, "inbox/1", None)
    assert task.description is None


def test_contexts(manager, sample_workspace):
    _, task = manager.create_context(sample_workspace, "inbox/1", "Errands")
    assert task.contexts == ["errands"]
    with pytest.raises(AlreadyExists):
        manager.create_context(sample_workspace, "inbox/1", "errands")
    _, contexts = manager.list_contexts(sample_workspace, "inbox/2")
    assert contexts == ["phone"]
    manager.remove_context(sample_workspace, "inbox/1", "ERRANDS")
    with pytest.raises(NotFound):
        manager.remove_context(sample_workspace, "inbox/1", "errands")


def test_create_project(manager, sample_workspace):
    path, project = manager.create_project(sample_workspace, "inbox", "Garden")
    assert path == ContainerPath("inbox", 1)
    assert project.name == "garden"
    with pytest.raises(AlreadyExists):
        manager.create_project(sample_workspace, "inbox", "house")
    with pytest.raises(InvalidInput):
        manager.create_project(sample_workspace, "inbox/1", "shed")


def test_project_into_project_is_invalid(manager):
    workspace = Workspace.with_lists(["inbox"])
    manager.create_project(workspace, "inbox", "house")
    assert len(workspace.get_list("inbox").projects) == 1
    with pytest.raises(InvalidInput):
        manager.move_project(workspace, "inbox/1", "inbox/1")
    assert [p.name for p in workspace.get_list("inbox").projects] == ["house"]


def test_move_project_between_lists(manager, sample_workspace):
    source, target, project = manager.move_project(sample_workspace, "inbox/1", "next")
    assert str(source) == "inbox/1"
    assert str(target) == "next/1"
    assert project.name == "house"
    assert sample_workspace.get_list("inbox").projects == ()
    assert _names(sample_workspace.get_list("next").get_project(0)) == ["fix sink"]


def test_move_project_failures_leave_state(manager, sample_workspace):
    with pytest.raises(InvalidInput):
        manager.move_project(sample_workspace, "inbox", "next")
    with pytest.raises(NotFound):
        manager.move_project(sample_workspace, "inbox/1", "later")
    with pytest.raises(NotFound):
        manager.move_project(sample_workspace, "inbox/4", "next")
    assert len(sample_workspace.get_list("inbox").projects) == 1


def test_remove_and_rename_project(manager, sample_workspace):
    with pytest.raises(InvalidInput):
        manager.remove_project(sample_workspace, "inbox")
    _, old, project = manager.rename_project(sample_workspace, "inbox/1", "Home")
    assert (old, project.name) == ("house", "home")
    _, removed = manager.remove_project(sample_workspace, "inbox/1")
    assert removed.name == "home"
    assert sample_workspace.count_tasks() == 2


def test_get_project_requires_index(manager, sample_workspace):
    with pytest.raises(InvalidInput):
        manager.get_project(sample_workspace, "inbox")
    path, project = manager.get_project(sample_workspace, "inbox/1")
    assert str(path) == "inbox/1"
    assert project.name == "house"


def test_list_crud(manager, sample_workspace):
    created = manager.create_list(sample_workspace, " Later ")
    assert created.name == "later"
    with pytest.raises(AlreadyExists):
        manager.create_list(sample_workspace, "LATER")
    with pytest.raises(InvalidInput):
        manager.create_list(sample_workspace, "a/b")
    old, renamed = manager.rename_list(sample_workspace, "later", "someday")
    assert (old, renamed.name) == ("later", "someday")
    with pytest.raises(AlreadyExists):
        manager.rename_list(sample_workspace, "someday", "inbox")
    removed = manager.remove_list(sample_workspace, "inbox")
    assert removed.count_tasks() == 3
    assert [tl.name for tl in sample_workspace.lists] == ["next", "someday"]
    with pytest.raises(NotFound):
        manager.remove_list(sample_workspace, "inbox")


def test_resolve_container(sample_workspace):
    assert resolve_container(sample_workspace, ContainerPath("inbox")).name == "inbox"
    assert resolve_container(sample_workspace, ContainerPath("inbox", 0)).name == "house"
    with pytest.raises(NotFound):
        resolve_container(sample_workspace, ContainerPath("inbox", 3))


def test_initialize_and_reset(manager, workspace_file):
    with pytest.raises(NotFound):
        manager.reset()
    workspace = manager.initialize()
    assert [tl.name for tl in workspace.lists] == ["inbox", "next", "done"]
    assert workspace_file.exists()
    with pytest.raises(AlreadyExists):
        manager.initialize()
    loaded = manager.load()
    manager.create_task(loaded, "inbox", "x")
    manager.save(loaded)
    reset = manager.reset(["a", "b"])
    assert [tl.name for tl in reset.lists] == ["a", "b"]
    assert manager.load().count_tasks() == 0


def test_initialize_uses_configured_default_lists(manager, tmp_path):
    (tmp_path / "gtd_config.yaml").write_text("default_lists: [Today, Later, today]\n", encoding="utf-8")
    workspace = manager.initialize()
    assert [tl.name for tl in workspace.lists] == ["today", "later"]
