"""Application-level service: CRUD and transfer operations over a Workspace.

The Workspace is passed explicitly to every operation; the manager only
keeps the repository used to load/save it once per command.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from application.ports import WorkspaceRepository
from config import get_default_lists
from core import (
    AlreadyExists,
    ContainerPath,
    InvalidInput,
    NotFound,
    Project,
    Task,
    TaskList,
    TaskPath,
    TaskStatus,
    Workspace,
)
from core.containers import TaskContainer
from infrastructure.file_repository import FileWorkspaceRepository

logger = logging.getLogger("gtd.manager")

PathLike = Union[str, TaskPath, ContainerPath]


def _task_path(source: PathLike) -> TaskPath:
    return source if isinstance(source, TaskPath) else TaskPath.parse(str(source))


def _container_path(source: PathLike) -> ContainerPath:
    return source if isinstance(source, ContainerPath) else ContainerPath.parse(str(source))


def _clean_name(name: str, kind: str, *, lower: bool = False) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidInput(f"The {kind} name can not be empty.")
    return cleaned.lower() if lower else cleaned


def _require_project_index(path: ContainerPath, message: str) -> int:
    if path.project_index is None:
        raise InvalidInput(message)
    return path.project_index


def resolve_container(workspace: Workspace, path: ContainerPath) -> TaskContainer:
    """Return the list, or the project inside it, that ``path`` points at."""
    task_list = workspace.get_list_forced(path.list_name)
    if path.project_index is None:
        return task_list
    return task_list.get_project_forced(path.project_index)


class GTDManager:
    def __init__(
        self,
        workspace_file: Optional[Path] = None,
        repository: Optional[WorkspaceRepository] = None,
        use_global: Optional[bool] = None,
    ):
        if repository is None:
            if workspace_file is None:
                from core.desktop.devtools.interface.workspace_resolver import get_workspace_file
                workspace_file = get_workspace_file(use_global=use_global)
            repository = FileWorkspaceRepository(workspace_file)
        self.repo: WorkspaceRepository = repository

    @property
    def workspace_file(self) -> Path:
        return self.repo.path

    # ------------------------------------------------------------------ storage
    def load(self) -> Workspace:
        return self.repo.load()

    def save(self, workspace: Workspace) -> None:
        self.repo.save(workspace)

    def initialize(self, list_names: Optional[Sequence[str]] = None) -> Workspace:
        """Create a fresh workspace file; fails if one already exists."""
        if self.repo.exists():
            raise AlreadyExists("workspace", str(self.repo.path), f"Workspace already exists at {self.repo.path}.")
        workspace = Workspace.with_lists(list(list_names or get_default_lists()))
        self.repo.save(workspace)
        logger.debug("initialized workspace %s", self.repo.path)
        return workspace

    def reset(self, list_names: Optional[Sequence[str]] = None) -> Workspace:
        """Overwrite an existing workspace with the default lists."""
        if not self.repo.exists():
            raise NotFound("workspace", str(self.repo.path), f"No workspace at {self.repo.path}.")
        workspace = Workspace.with_lists(list(list_names or get_default_lists()))
        self.repo.save(workspace)
        logger.debug("reset workspace %s", self.repo.path)
        return workspace

    # -------------------------------------------------------------------- reads
    @staticmethod
    def lists(workspace: Workspace) -> Sequence[TaskList]:
        return workspace.lists

    @staticmethod
    def get_list(workspace: Workspace, name: str) -> TaskList:
        return workspace.get_list_forced((name or "").strip().lower())

    @staticmethod
    def get_container(workspace: Workspace, path: PathLike) -> TaskContainer:
        return resolve_container(workspace, _container_path(path))

    @staticmethod
    def get_project(workspace: Workspace, path: PathLike) -> Tuple[ContainerPath, Project]:
        project_path = _container_path(path)
        index = _require_project_index(project_path, "No project index provided.")
        return project_path, workspace.get_list_forced(project_path.list_name).get_project_forced(index)

    @staticmethod
    def get_task(workspace: Workspace, path: PathLike) -> Tuple[TaskPath, Task]:
        task_path = _task_path(path)
        container = resolve_container(workspace, task_path.container)
        return task_path, container.get_task_forced(task_path.task_index)

    # -------------------------------------------------------------------- tasks
    def create_task(
        self,
        workspace: Workspace,
        path: PathLike,
        name: str,
        description: Optional[str] = None,
    ) -> Tuple[TaskPath, Task]:
        container_path = _container_path(path)
        name = _clean_name(name, "task")
        container = resolve_container(workspace, container_path)
        container.task_exists_forced(name)
        task = Task(name=name, description=description or None)
        position = container.push_task(task)
        task_path = TaskPath(container_path.list_name, position, container_path.project_index)
        logger.debug("created task %s (%r)", task_path, name)
        return task_path, task

    def remove_task(self, workspace: Workspace, path: PathLike) -> Tuple[TaskPath, Task]:
        task_path = _task_path(path)
        container = resolve_container(workspace, task_path.container)
        container.get_task_forced(task_path.task_index)
        task = container.remove_task(task_path.task_index)
        logger.debug("removed task %s (%r)", task_path, task.name)
        return task_path, task

    def move_task(self, workspace: Workspace, source: PathLike, target: PathLike) -> Tuple[TaskPath, TaskPath, Task]:
        """Move a task to the end of another container.

        Both containers are resolved and the task confirmed before the source
        is touched: once removal starts, insertion can not fail.
        """
        source_path = _task_path(source)
        target_path = _container_path(target)

        source_container = resolve_container(workspace, source_path.container)
        target_container = resolve_container(workspace, target_path)
        source_container.get_task_forced(source_path.task_index)

        task = source_container.remove_task(source_path.task_index)
        position = target_container.push_task(task)
        new_path = TaskPath(target_path.list_name, position, target_path.project_index)
        logger.debug("moved task %s -> %s (%r)", source_path, new_path, task.name)
        return source_path, new_path, task

    def mark_task(self, workspace: Workspace, path: PathLike, status: Union[str, TaskStatus, None] = None) -> Tuple[TaskPath, Task]:
        if status is None:
            new_status = TaskStatus.DONE
        elif isinstance(status, TaskStatus):
            new_status = status
        else:
            new_status = TaskStatus.from_string(status)
        task_path, task = self.get_task(workspace, path)
        task.status = new_status
        logger.debug("marked task %s as %s", task_path, new_status.code)
        return task_path, task

    def toggle_task(self, workspace: Workspace, path: PathLike) -> Tuple[TaskPath, Task]:
        _, task = self.get_task(workspace, path)
        return self.mark_task(workspace, path, task.status.toggled())

    def rename_task(self, workspace: Workspace, path: PathLike, name: str) -> Tuple[TaskPath, str, Task]:
        task_path = _task_path(path)
        name = _clean_name(name, "task")
        container = resolve_container(workspace, task_path.container)
        task = container.get_task_forced(task_path.task_index)
        old_name = task.name
        if name != old_name:
            container.task_exists_forced(name)
            task.name = name
            logger.debug("renamed task %s: %r -> %r", task_path, old_name, name)
        return task_path, old_name, task

    def describe_task(self, workspace: Workspace, path: PathLike, description: Optional[str]) -> Tuple[TaskPath, Task]:
        task_path, task = self.get_task(workspace, path)
        task.description = (description or "").strip() or None
        logger.debug("updated description of task %s", task_path)
        return task_path, task

    # ----------------------------------------------------------------- contexts
    def create_context(self, workspace: Workspace, path: PathLike, name: str) -> Tuple[TaskPath, Task]:
        name = _clean_name(name, "context").lower()
        task_path, task = self.get_task(workspace, path)
        task.add_context(name)
        logger.debug("added context %r to task %s", name, task_path)
        return task_path, task

    def remove_context(self, workspace: Workspace, path: PathLike, name: str) -> Tuple[TaskPath, Task]:
        name = _clean_name(name, "context").lower()
        task_path, task = self.get_task(workspace, path)
        task.remove_context(name)
        logger.debug("removed context %r from task %s", name, task_path)
        return task_path, task

    def list_contexts(self, workspace: Workspace, path: PathLike) -> Tuple[TaskPath, List[str]]:
        task_path, task = self.get_task(workspace, path)
        return task_path, list(task.contexts)

    # ----------------------------------------------------------------- projects
    def create_project(self, workspace: Workspace, list_name: str, name: str) -> Tuple[ContainerPath, Project]:
        list_path = _container_path(list_name)
        if list_path.project_index is not None:
            raise InvalidInput("Projects can only be created inside a list.")
        name = _clean_name(name, "project", lower=True)
        task_list = workspace.get_list_forced(list_path.list_name)
        task_list.project_exists_forced(name)
        project = Project(name)
        position = task_list.push_project(project)
        project_path = ContainerPath(list_path.list_name, position)
        logger.debug("created project %s (%r)", project_path, name)
        return project_path, project

    def remove_project(self, workspace: Workspace, path: PathLike) -> Tuple[ContainerPath, Project]:
        project_path = _container_path(path)
        index = _require_project_index(project_path, "Please specify a project in the path.")
        task_list = workspace.get_list_forced(project_path.list_name)
        task_list.get_project_forced(index)
        project = task_list.remove_project(index)
        logger.debug("removed project %s (%r)", project_path, project.name)
        return project_path, project

    def move_project(
        self, workspace: Workspace, source: PathLike, target: PathLike
    ) -> Tuple[ContainerPath, ContainerPath, Project]:
        source_path = _container_path(source)
        target_path = _container_path(target)
        index = _require_project_index(source_path, "Please specify a project in the source path.")
        if target_path.project_index is not None:
            raise InvalidInput("Can not move a project to another project.")

        source_list = workspace.get_list_forced(source_path.list_name)
        source_list.get_project_forced(index)
        target_list = workspace.get_list_forced(target_path.list_name)

        project = source_list.remove_project(index)
        position = target_list.push_project(project)
        new_path = ContainerPath(target_path.list_name, position)
        logger.debug("moved project %s -> %s (%r)", source_path, new_path, project.name)
        return source_path, new_path, project

    def rename_project(self, workspace: Workspace, path: PathLike, name: str) -> Tuple[ContainerPath, str, Project]:
        project_path = _container_path(path)
        index = _require_project_index(project_path, "Please specify a project in the path.")
        name = _clean_name(name, "project", lower=True)
        task_list = workspace.get_list_forced(project_path.list_name)
        project = task_list.get_project_forced(index)
        old_name = project.name
        if name != old_name:
            task_list.project_exists_forced(name)
            project.name = name
            logger.debug("renamed project %s: %r -> %r", project_path, old_name, name)
        return project_path, old_name, project

    # -------------------------------------------------------------------- lists
    def create_list(self, workspace: Workspace, name: str) -> TaskList:
        name = _clean_name(name, "list", lower=True)
        if "/" in name:
            raise InvalidInput("List names can not contain '/'.")
        workspace.list_exists_forced(name)
        task_list = TaskList(name)
        workspace.push_list(task_list)
        logger.debug("created list %r", name)
        return task_list

    def remove_list(self, workspace: Workspace, name: str) -> TaskList:
        name = _clean_name(name, "list", lower=True)
        workspace.get_list_forced(name)
        task_list = workspace.remove_list(name)
        logger.debug("removed list %r", name)
        return task_list

    def rename_list(self, workspace: Workspace, name: str, new_name: str) -> Tuple[str, TaskList]:
        name = _clean_name(name, "list", lower=True)
        new_name = _clean_name(new_name, "list", lower=True)
        if "/" in new_name:
            raise InvalidInput("List names can not contain '/'.")
        task_list = workspace.get_list_forced(name)
        if new_name != name:
            workspace.list_exists_forced(new_name)
            task_list.name = new_name
            logger.debug("renamed list %r -> %r", name, new_name)
        return name, task_list


__all__ = ["GTDManager", "resolve_container"]
