"""Container capabilities.

Three independent capability sets:

- ``TaskContainer``:    holds Tasks (TaskList, Project)
- ``ProjectContainer``: holds Projects (TaskList)
- ``ListContainer``:    holds TaskLists (Workspace)

Entities implement the protocols directly; there is no shared base class.
The sequence helpers below take the owning sequence explicitly so each
entity's methods stay one-liners.
"""

from typing import TYPE_CHECKING, Callable, List, Optional, Protocol, Sequence, TypeVar, runtime_checkable

from .errors import AlreadyExists, NotFound
from .indexer import index_to_identifier

T = TypeVar("T")


def _ref(position: int) -> str:
    return f"#{index_to_identifier(position)}" if position >= 0 else f"#{position}"


def get_at(items: Sequence[T], position: int) -> Optional[T]:
    if position < 0 or position >= len(items):
        return None
    return items[position]


def get_at_forced(items: Sequence[T], position: int, kind: str) -> T:
    item = get_at(items, position)
    if item is None:
        raise NotFound(kind, _ref(position))
    return item


def find_position(items: Sequence[T], name: str, key: Callable[[T], str]) -> Optional[int]:
    for position, item in enumerate(items):
        if key(item) == name:
            return position
    return None


def ensure_absent(items: Sequence[T], name: str, key: Callable[[T], str], kind: str) -> None:
    if find_position(items, name, key) is not None:
        raise AlreadyExists(kind, name)


def append(items: List[T], item: T) -> int:
    items.append(item)
    return len(items) - 1


def remove_at(items: List[T], position: int, kind: str) -> T:
    get_at_forced(items, position, kind)
    return items.pop(position)


@runtime_checkable
class TaskContainer(Protocol):
    @property
    def tasks(self) -> Sequence["Task"]: ...

    def get_task(self, position: int) -> Optional["Task"]: ...

    def get_task_forced(self, position: int) -> "Task": ...

    def task_exists(self, name: str) -> bool: ...

    def task_exists_forced(self, name: str) -> None: ...

    def push_task(self, task: "Task") -> int: ...

    def remove_task(self, position: int) -> "Task": ...


@runtime_checkable
class ProjectContainer(Protocol):
    @property
    def projects(self) -> Sequence["Project"]: ...

    def get_project(self, position: int) -> Optional["Project"]: ...

    def get_project_forced(self, position: int) -> "Project": ...

    def project_exists(self, name: str) -> bool: ...

    def project_exists_forced(self, name: str) -> None: ...

    def push_project(self, project: "Project") -> int: ...

    def remove_project(self, position: int) -> "Project": ...


@runtime_checkable
class ListContainer(Protocol):
    @property
    def lists(self) -> Sequence["TaskList"]: ...

    def get_list(self, name: str) -> Optional["TaskList"]: ...

    def get_list_forced(self, name: str) -> "TaskList": ...

    def list_position(self, name: str) -> Optional[int]: ...

    def list_exists(self, name: str) -> bool: ...

    def list_exists_forced(self, name: str) -> None: ...

    def push_list(self, task_list: "TaskList") -> int: ...

    def remove_list(self, name: str) -> "TaskList": ...


if TYPE_CHECKING:
    from .gtd_models import Project, TaskList
    from .task import Task


__all__ = [
    "TaskContainer",
    "ProjectContainer",
    "ListContainer",
    "get_at",
    "get_at_forced",
    "find_position",
    "ensure_absent",
    "append",
    "remove_at",
]
