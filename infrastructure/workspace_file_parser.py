import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from core import AlreadyExists, InvalidInput, Project, Task, TaskList, TaskStatus, Workspace, WorkspaceFileError

logger = logging.getLogger("gtd.storage")


class WorkspaceFileParser:
    """YAML <-> Workspace mapping.

    Sequence order in the document is the addressing basis: positions are
    never written, they are derived from the order lists/projects/tasks
    appear in.
    """

    CURRENT_SCHEMA_VERSION = 1

    @staticmethod
    def _require_name(raw: Any, kind: str, where: str) -> str:
        if not isinstance(raw, Mapping):
            raise WorkspaceFileError(f"{where}: {kind} entry must be a mapping")
        name = raw.get("name")
        # YAML turns bare numbers into ints
        if isinstance(name, (int, float)) and not isinstance(name, bool):
            name = str(name)
        if not isinstance(name, str) or not name.strip():
            raise WorkspaceFileError(f"{where}: {kind} without a name")
        return name

    @staticmethod
    def _entries(raw: Mapping, key: str, where: str) -> List[Any]:
        value = raw.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise WorkspaceFileError(f"{where}: '{key}' must be a list")
        return value

    @classmethod
    def _parse_status(cls, value: Any, where: str) -> TaskStatus:
        try:
            return TaskStatus.from_string(str(value or "TODO"))
        except InvalidInput:
            logger.warning("%s: unknown status %r, using TODO", where, value)
            return TaskStatus.TODO

    @classmethod
    def _parse_task(cls, raw: Any, where: str) -> Task:
        name = cls._require_name(raw, "task", where)
        description = raw.get("description")
        contexts = [str(c) for c in cls._entries(raw, "contexts", where) if str(c).strip()]
        return Task(
            name=name,
            description=None if description is None else str(description),
            status=cls._parse_status(raw.get("status"), where),
            contexts=contexts,
        )

    @classmethod
    def from_dict(cls, data: Any) -> Workspace:
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise WorkspaceFileError("workspace document must be a mapping")
        workspace = Workspace()
        for raw_list in cls._entries(data, "lists", "workspace"):
            list_name = cls._require_name(raw_list, "list", "workspace").lower()
            task_list = TaskList(list_name)
            for raw_task in cls._entries(raw_list, "tasks", list_name):
                task_list.push_task(cls._parse_task(raw_task, list_name))
            for raw_project in cls._entries(raw_list, "projects", list_name):
                project_name = cls._require_name(raw_project, "project", list_name).lower()
                project = Project(project_name)
                where = f"{list_name}/{project_name}"
                for raw_task in cls._entries(raw_project, "tasks", where):
                    project.push_task(cls._parse_task(raw_task, where))
                try:
                    task_list.project_exists_forced(project_name)
                except AlreadyExists as exc:
                    raise WorkspaceFileError(f"{list_name}: duplicate project {project_name!r}") from exc
                task_list.push_project(project)
            try:
                workspace.list_exists_forced(list_name)
            except AlreadyExists as exc:
                raise WorkspaceFileError(f"workspace: duplicate list {list_name!r}") from exc
            workspace.push_list(task_list)
        return workspace

    @staticmethod
    def _task_to_dict(task: Task) -> Dict[str, Any]:
        return {
            "name": task.name,
            "description": task.description,
            "status": task.status.code,
            "contexts": list(task.contexts),
        }

    @classmethod
    def to_dict(cls, workspace: Workspace) -> Dict[str, Any]:
        return {
            "schema_version": cls.CURRENT_SCHEMA_VERSION,
            "lists": [
                {
                    "name": task_list.name,
                    "tasks": [cls._task_to_dict(t) for t in task_list.tasks],
                    "projects": [
                        {"name": project.name, "tasks": [cls._task_to_dict(t) for t in project.tasks]}
                        for project in task_list.projects
                    ],
                }
                for task_list in workspace.lists
            ],
        }

    @classmethod
    def parse_text(cls, content: str, source: Optional[Path] = None) -> Workspace:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise WorkspaceFileError(f"couldn't parse workspace file: {exc}", str(source) if source else None) from exc
        try:
            return cls.from_dict(data)
        except WorkspaceFileError as exc:
            if source is not None and exc.path is None:
                exc.path = str(source)
            raise

    @classmethod
    def parse(cls, filepath: Path) -> Workspace:
        try:
            content = filepath.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise WorkspaceFileError(f"couldn't read workspace file: {exc}", str(filepath)) from exc
        return cls.parse_text(content, filepath)

    @classmethod
    def to_file_content(cls, workspace: Workspace) -> str:
        return yaml.safe_dump(cls.to_dict(workspace), allow_unicode=True, sort_keys=False)
