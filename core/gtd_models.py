"""Container entities: Project, TaskList and the Workspace root.

Each class implements its capability protocols from ``core.containers``
on its own. A TaskList is not a Project and vice versa.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from . import containers
from .errors import NotFound
from .task import Task


def _task_name(task: Task) -> str:
    return task.name


@dataclass
class Project:
    """A named group of tasks inside a TaskList (TaskContainer)."""

    name: str
    _tasks: List[Task] = field(default_factory=list)

    @property
    def tasks(self) -> Sequence[Task]:
        return tuple(self._tasks)

    def get_task(self, position: int) -> Optional[Task]:
        return containers.get_at(self._tasks, position)

    def get_task_forced(self, position: int) -> Task:
        return containers.get_at_forced(self._tasks, position, "task")

    def task_exists(self, name: str) -> bool:
        return containers.find_position(self._tasks, name, _task_name) is not None

    def task_exists_forced(self, name: str) -> None:
        containers.ensure_absent(self._tasks, name, _task_name, "task")

    def push_task(self, task: Task) -> int:
        return containers.append(self._tasks, task)

    def remove_task(self, position: int) -> Task:
        return containers.remove_at(self._tasks, position, "task")


@dataclass
class TaskList:
    """Top-level list: holds tasks directly and groups more under projects.

    Implements both TaskContainer and ProjectContainer.
    """

    name: str
    _tasks: List[Task] = field(default_factory=list)
    _projects: List[Project] = field(default_factory=list)

    # tasks
    @property
    def tasks(self) -> Sequence[Task]:
        return tuple(self._tasks)

    def get_task(self, position: int) -> Optional[Task]:
        return containers.get_at(self._tasks, position)

    def get_task_forced(self, position: int) -> Task:
        return containers.get_at_forced(self._tasks, position, "task")

    def task_exists(self, name: str) -> bool:
        return containers.find_position(self._tasks, name, _task_name) is not None

    def task_exists_forced(self, name: str) -> None:
        containers.ensure_absent(self._tasks, name, _task_name, "task")

    def push_task(self, task: Task) -> int:
        return containers.append(self._tasks, task)

    def remove_task(self, position: int) -> Task:
        return containers.remove_at(self._tasks, position, "task")

    # projects
    @property
    def projects(self) -> Sequence[Project]:
        return tuple(self._projects)

    def get_project(self, position: int) -> Optional[Project]:
        return containers.get_at(self._projects, position)

    def get_project_forced(self, position: int) -> Project:
        return containers.get_at_forced(self._projects, position, "project")

    def project_exists(self, name: str) -> bool:
        return containers.find_position(self._projects, name, lambda p: p.name) is not None

    def project_exists_forced(self, name: str) -> None:
        containers.ensure_absent(self._projects, name, lambda p: p.name, "project")

    def push_project(self, project: Project) -> int:
        return containers.append(self._projects, project)

    def remove_project(self, position: int) -> Project:
        return containers.remove_at(self._projects, position, "project")

    def count_tasks(self) -> int:
        return len(self._tasks) + sum(len(p.tasks) for p in self._projects)


@dataclass
class Workspace:
    """Root aggregate (ListContainer). One instance per command invocation."""

    _lists: List[TaskList] = field(default_factory=list)

    @classmethod
    def with_lists(cls, names: Sequence[str]) -> "Workspace":
        workspace = cls()
        for name in names:
            workspace.push_list(TaskList(name))
        return workspace

    @property
    def lists(self) -> Sequence[TaskList]:
        return tuple(self._lists)

    def list_position(self, name: str) -> Optional[int]:
        return containers.find_position(self._lists, name, lambda tl: tl.name)

    def get_list(self, name: str) -> Optional[TaskList]:
        position = self.list_position(name)
        return None if position is None else self._lists[position]

    def get_list_forced(self, name: str) -> TaskList:
        task_list = self.get_list(name)
        if task_list is None:
            raise NotFound("list", repr(name))
        return task_list

    def list_exists(self, name: str) -> bool:
        return self.list_position(name) is not None

    def list_exists_forced(self, name: str) -> None:
        containers.ensure_absent(self._lists, name, lambda tl: tl.name, "list")

    def push_list(self, task_list: TaskList) -> int:
        return containers.append(self._lists, task_list)

    def remove_list(self, name: str) -> TaskList:
        position = self.list_position(name)
        if position is None:
            raise NotFound("list", repr(name))
        return self._lists.pop(position)

    def count_tasks(self) -> int:
        return sum(tl.count_tasks() for tl in self._lists)


__all__ = ["Project", "TaskList", "Workspace"]
