"""JSON contract for `--json` output.

Identifiers and paths are rendered through the codec, never as raw
positions, so any ``path`` value can be fed back to the CLI.
"""

from typing import Any, Dict

from core import ContainerPath, Project, Task, TaskList, TaskPath, index_to_identifier


def task_to_dict(task: Task, path: TaskPath | None = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "name": task.name,
        "description": task.description,
        "status": task.status.code,
        "contexts": list(task.contexts),
    }
    if path is not None:
        data["path"] = str(path)
        data["id"] = index_to_identifier(path.task_index)
    return data


def project_to_dict(project: Project, path: ContainerPath | None = None, *, include_tasks: bool = True) -> Dict[str, Any]:
    data: Dict[str, Any] = {"name": project.name, "task_count": len(project.tasks)}
    if path is not None:
        data["path"] = str(path)
        if path.project_index is not None:
            data["id"] = index_to_identifier(path.project_index)
    if include_tasks:
        data["tasks"] = [
            task_to_dict(t, TaskPath(path.list_name, i, path.project_index) if path else None)
            for i, t in enumerate(project.tasks)
        ]
    return data


def list_to_dict(task_list: TaskList, *, include_tasks: bool = True) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "name": task_list.name,
        "task_count": len(task_list.tasks),
        "project_count": len(task_list.projects),
    }
    if include_tasks:
        data["tasks"] = [task_to_dict(t, TaskPath(task_list.name, i)) for i, t in enumerate(task_list.tasks)]
        data["projects"] = [
            project_to_dict(p, ContainerPath(task_list.name, i)) for i, p in enumerate(task_list.projects)
        ]
    return data


__all__ = ["task_to_dict", "project_to_dict", "list_to_dict"]
