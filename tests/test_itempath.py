import pytest

from core import ContainerPath, InvalidIdentifier, InvalidPath, PathErrorReason, TaskPath


def test_container_path_list_only():
    path = ContainerPath.parse("Inbox")
    assert path == ContainerPath("inbox", None)
    assert str(path) == "inbox"


def test_container_path_with_project():
    path = ContainerPath.parse(" next/2 ")
    assert path.list_name == "next"
    assert path.project_index == 1
    assert str(path) == "next/2"


def test_task_path_two_and_three_segments():
    loose = TaskPath.parse("inbox/3")
    assert (loose.list_name, loose.project_index, loose.task_index) == ("inbox", None, 2)
    nested = TaskPath.parse("inbox/1/2")
    assert (nested.list_name, nested.project_index, nested.task_index) == ("inbox", 0, 1)
    assert nested.container == ContainerPath("inbox", 0)
    assert str(nested) == "inbox/1/2"


@pytest.mark.parametrize("raw", ["", "   ", "/1", "/1/2"])
def test_empty_paths(raw):
    with pytest.raises(InvalidPath) as exc:
        TaskPath.parse(raw)
    assert exc.value.reason is PathErrorReason.EMPTY


def test_task_path_needs_a_task_segment():
    with pytest.raises(InvalidPath) as exc:
        TaskPath.parse("inbox")
    assert exc.value.reason is PathErrorReason.WRONG_SEGMENT_COUNT


def test_too_many_segments():
    with pytest.raises(InvalidPath) as exc:
        TaskPath.parse("inbox/a/b/c")
    assert exc.value.reason is PathErrorReason.WRONG_SEGMENT_COUNT
    with pytest.raises(InvalidPath) as exc:
        ContainerPath.parse("inbox/1/2")
    assert exc.value.reason is PathErrorReason.WRONG_SEGMENT_COUNT


@pytest.mark.parametrize("raw", ["inbox/x", "inbox/1/x", "inbox/x/1", "inbox/"])
def test_non_numeric_segments(raw):
    with pytest.raises(InvalidPath) as exc:
        TaskPath.parse(raw)
    assert exc.value.reason is PathErrorReason.BAD_INDEX


def test_zero_identifier_in_path():
    with pytest.raises(InvalidIdentifier):
        TaskPath.parse("inbox/0")


def test_paths_are_values():
    assert TaskPath.parse("INBOX/1") == TaskPath("inbox", 0)
    assert len({TaskPath("a", 0), TaskPath("a", 0)}) == 1
