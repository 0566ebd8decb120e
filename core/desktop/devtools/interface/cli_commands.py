"""Command handlers for the gtd CLI.

Each handler loads the workspace once, runs one manager operation and saves
once. A ``GTDError`` aborts the command before the save, so a failed command
never writes a partial change.
"""

import argparse
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import config
from core import GTDError, InvalidInput, Workspace
from core.desktop.devtools.application.gtd_manager import GTDManager
from core.desktop.devtools.interface.cli_format import (
    list_lines,
    lists_lines,
    project_lines,
    task_lines,
    titlecase,
)
from core.desktop.devtools.interface.cli_io import (
    print_lines,
    send_error,
    send_info,
    send_success,
    structured_error,
    structured_response,
)
from core.desktop.devtools.interface.i18n import available_languages
from core.desktop.devtools.interface.serializers import list_to_dict, project_to_dict, task_to_dict
from core.desktop.devtools.interface.tui_themes import THEMES


ManagerFactory = Callable[[Optional[bool]], GTDManager]
Translate = Callable[..., str]
Mutation = Callable[[GTDManager, Workspace], Tuple[str, Dict[str, Any]]]
View = Callable[[GTDManager, Workspace], Tuple[List[Any], Dict[str, Any]]]


@dataclass
class CliDeps:
    manager_factory: ManagerFactory
    translate: Translate


def _wants_json(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "json", False))


def _manager(args: argparse.Namespace, deps: CliDeps) -> GTDManager:
    return deps.manager_factory(getattr(args, "use_global", None))


def _fail(args: argparse.Namespace, command: str, exc: GTDError, deps: CliDeps) -> int:
    if _wants_json(args):
        return structured_error(command, str(exc), payload={"code": exc.code})
    send_error(deps.translate("ERROR", message=str(exc)))
    return 1


def _mutate(args: argparse.Namespace, deps: CliDeps, command: str, action: Mutation) -> int:
    manager = _manager(args, deps)
    try:
        workspace = manager.load()
        message, payload = action(manager, workspace)
        manager.save(workspace)
    except GTDError as exc:
        return _fail(args, command, exc, deps)
    if _wants_json(args):
        return structured_response(command, message=message, payload=payload, summary=message)
    send_success(message)
    return 0


def _view(args: argparse.Namespace, deps: CliDeps, command: str, action: View) -> int:
    manager = _manager(args, deps)
    try:
        workspace = manager.load()
        lines, payload = action(manager, workspace)
    except GTDError as exc:
        return _fail(args, command, exc, deps)
    if _wants_json(args):
        return structured_response(command, payload=payload)
    if len(lines) == 1 and isinstance(lines[0], str):
        send_info(lines[0])
    else:
        print_lines(lines)
    return 0


# ---------------------------------------------------------------- workspace
def cmd_init(args: argparse.Namespace, deps: CliDeps) -> int:
    manager = _manager(args, deps)
    try:
        workspace = manager.initialize()
    except GTDError as exc:
        return _fail(args, "init", exc, deps)
    message = deps.translate("WORKSPACE_INITIALIZED", path=str(manager.workspace_file))
    if _wants_json(args):
        payload = {"path": str(manager.workspace_file), "lists": [tl.name for tl in workspace.lists]}
        return structured_response("init", message=message, payload=payload, summary=message)
    send_success(message)
    return 0


def cmd_reset(args: argparse.Namespace, deps: CliDeps) -> int:
    manager = _manager(args, deps)
    try:
        workspace = manager.reset()
    except GTDError as exc:
        return _fail(args, "reset", exc, deps)
    message = deps.translate("WORKSPACE_RESET", path=str(manager.workspace_file))
    if _wants_json(args):
        payload = {"path": str(manager.workspace_file), "lists": [tl.name for tl in workspace.lists]}
        return structured_response("reset", message=message, payload=payload, summary=message)
    send_success(message)
    return 0


def cmd_lists(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        lists = list(manager.lists(workspace))
        payload = {"lists": [list_to_dict(tl, include_tasks=False) for tl in lists]}
        if not lists:
            return [deps.translate("LISTS_EMPTY")], payload
        return lists_lines(lists), payload

    return _view(args, deps, "lists", action)


# -------------------------------------------------------------------- tasks
def cmd_task_create(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, task = manager.create_task(workspace, args.path, args.name, getattr(args, "description", None))
        message = deps.translate("TASK_CREATED", path=titlecase(str(path)), name=task.name)
        return message, {"task": task_to_dict(task, path)}

    return _mutate(args, deps, "task.create", action)


def cmd_task_remove(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, task = manager.remove_task(workspace, args.path)
        message = deps.translate("TASK_REMOVED", path=titlecase(str(path)), name=task.name)
        return message, {"task": task_to_dict(task), "path": str(path)}

    return _mutate(args, deps, "task.remove", action)


def cmd_task_move(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        source, target, task = manager.move_task(workspace, args.source, args.destination)
        message = deps.translate(
            "TASK_MOVED", source=titlecase(str(source)), target=titlecase(str(target)), name=task.name
        )
        return message, {"source": str(source), "task": task_to_dict(task, target)}

    return _mutate(args, deps, "task.move", action)


def cmd_task_mark(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, task = manager.mark_task(workspace, args.path, getattr(args, "status", None))
        message = deps.translate("TASK_MARKED", path=titlecase(str(path)), name=task.name, status=task.status.code)
        return message, {"task": task_to_dict(task, path)}

    return _mutate(args, deps, "task.mark", action)


def cmd_task_rename(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, old_name, task = manager.rename_task(workspace, args.path, args.name)
        message = deps.translate("TASK_RENAMED", path=titlecase(str(path)), old=old_name, name=task.name)
        return message, {"task": task_to_dict(task, path), "old_name": old_name}

    return _mutate(args, deps, "task.rename", action)


def cmd_task_describe(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, task = manager.describe_task(workspace, args.path, getattr(args, "description", None))
        message = deps.translate("TASK_DESCRIBED", path=titlecase(str(path)), name=task.name)
        return message, {"task": task_to_dict(task, path)}

    return _mutate(args, deps, "task.describe", action)


def cmd_task_show(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, task = manager.get_task(workspace, args.path)
        return task_lines(titlecase(str(path)), task), {"task": task_to_dict(task, path)}

    return _view(args, deps, "task.show", action)


def cmd_context_create(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, task = manager.create_context(workspace, args.path, args.name)
        message = deps.translate("CONTEXT_CREATED", path=titlecase(str(path)), context=args.name.strip().lower())
        return message, {"task": task_to_dict(task, path)}

    return _mutate(args, deps, "task.context.create", action)


def cmd_context_remove(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, task = manager.remove_context(workspace, args.path, args.name)
        message = deps.translate("CONTEXT_REMOVED", path=titlecase(str(path)), context=args.name.strip().lower())
        return message, {"task": task_to_dict(task, path)}

    return _mutate(args, deps, "task.context.remove", action)


def cmd_context_list(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, contexts = manager.list_contexts(workspace, args.path)
        payload = {"path": str(path), "contexts": contexts}
        if not contexts:
            return [deps.translate("CONTEXTS_EMPTY", path=titlecase(str(path)))], payload
        lines: List[Any] = [[("class:section", deps.translate("TASK_CONTEXTS"))]]
        lines.extend([[("", "- "), ("class:identifier", c)] for c in contexts])
        return lines, payload

    return _view(args, deps, "task.context.list", action)


# -------------------------------------------------------------------- lists
def cmd_list_create(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        task_list = manager.create_list(workspace, args.name)
        message = deps.translate("LIST_CREATED", name=titlecase(task_list.name))
        return message, {"list": list_to_dict(task_list, include_tasks=False)}

    return _mutate(args, deps, "list.create", action)


def cmd_list_remove(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        task_list = manager.remove_list(workspace, args.name)
        message = deps.translate("LIST_REMOVED", name=titlecase(task_list.name))
        return message, {"list": list_to_dict(task_list, include_tasks=False)}

    return _mutate(args, deps, "list.remove", action)


def cmd_list_rename(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        old_name, task_list = manager.rename_list(workspace, args.name, args.new_name)
        message = deps.translate("LIST_RENAMED", old=titlecase(old_name), name=titlecase(task_list.name))
        return message, {"list": list_to_dict(task_list, include_tasks=False), "old_name": old_name}

    return _mutate(args, deps, "list.rename", action)


def cmd_list_show(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        task_list = manager.get_list(workspace, args.name)
        payload = {"list": list_to_dict(task_list)}
        if not task_list.tasks and not task_list.projects:
            return [deps.translate("LIST_EMPTY", name=titlecase(task_list.name))], payload
        return list_lines(task_list, show_all=bool(getattr(args, "all", False))), payload

    return _view(args, deps, "list.show", action)


# ----------------------------------------------------------------- projects
def cmd_project_create(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, project = manager.create_project(workspace, args.path, args.name)
        message = deps.translate("PROJECT_CREATED", path=titlecase(str(path)), name=titlecase(project.name))
        return message, {"project": project_to_dict(project, path)}

    return _mutate(args, deps, "project.create", action)


def cmd_project_remove(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, project = manager.remove_project(workspace, args.path)
        message = deps.translate("PROJECT_REMOVED", path=titlecase(str(path)), name=titlecase(project.name))
        return message, {"project": project_to_dict(project), "path": str(path)}

    return _mutate(args, deps, "project.remove", action)


def cmd_project_move(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        source, target, project = manager.move_project(workspace, args.source, args.destination)
        message = deps.translate(
            "PROJECT_MOVED", source=titlecase(str(source)), target=titlecase(str(target)), name=titlecase(project.name)
        )
        return message, {"source": str(source), "project": project_to_dict(project, target)}

    return _mutate(args, deps, "project.move", action)


def cmd_project_rename(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, old_name, project = manager.rename_project(workspace, args.path, args.name)
        message = deps.translate(
            "PROJECT_RENAMED", path=titlecase(str(path)), old=titlecase(old_name), name=titlecase(project.name)
        )
        return message, {"project": project_to_dict(project, path, include_tasks=False), "old_name": old_name}

    return _mutate(args, deps, "project.rename", action)


def cmd_project_show(args: argparse.Namespace, deps: CliDeps) -> int:
    def action(manager: GTDManager, workspace: Workspace):
        path, project = manager.get_project(workspace, args.path)
        payload = {"project": project_to_dict(project, path)}
        if not project.tasks:
            return [deps.translate("PROJECT_EMPTY", name=titlecase(project.name))], payload
        return project_lines(project), payload

    return _view(args, deps, "project.show", action)


# ------------------------------------------------------------------- config
CONFIG_KEYS = ("lang", "theme", "use_global", "default_lists")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _config_values() -> Dict[str, Any]:
    return {
        "lang": config.get_user_lang(),
        "theme": config.get_user_theme(),
        "use_global": config.get_use_global(),
        "default_lists": config.get_default_lists(),
    }


def _apply_setting(key: str, value: str) -> None:
    value = (value or "").strip()
    if key == "lang":
        if value and value not in available_languages():
            raise InvalidInput(f"Unknown language {value!r} (available: {', '.join(available_languages())}).")
        config.set_user_lang(value)
    elif key == "theme":
        if value and value not in THEMES:
            raise InvalidInput(f"Unknown theme {value!r} (available: {', '.join(THEMES)}).")
        config.set_user_theme(value)
    elif key == "use_global":
        token = value.lower()
        if token and token not in _TRUE | _FALSE:
            raise InvalidInput(f"Expected true or false for use_global, got {value!r}.")
        config.set_use_global(token in _TRUE)
    elif key == "default_lists":
        names = [name.strip() for name in value.split(",")]
        if any("/" in name for name in names):
            raise InvalidInput("List names can not contain '/'.")
        config.set_default_lists(names)
    else:
        raise InvalidInput(f"Unknown setting {key!r}.")


def cmd_config_show(args: argparse.Namespace, deps: CliDeps) -> int:
    values = _config_values()
    path = str(config.user_config_path())
    if _wants_json(args):
        return structured_response("config.show", payload={"path": path, "settings": values})
    lines: List[Any] = [deps.translate("CONFIG_HEADER", path=path)]
    for key in CONFIG_KEYS:
        value = values[key]
        if isinstance(value, list):
            value = ", ".join(value)
        elif isinstance(value, bool):
            value = "true" if value else "false"
        lines.append(f"  {key}: {value or '-'}")
    print_lines(lines)
    return 0


def cmd_config_set(args: argparse.Namespace, deps: CliDeps) -> int:
    value = getattr(args, "value", None) or ""
    try:
        _apply_setting(args.key, value)
    except GTDError as exc:
        return _fail(args, "config.set", exc, deps)
    if value.strip():
        message = deps.translate("CONFIG_SET", key=args.key, value=value.strip())
    else:
        message = deps.translate("CONFIG_UNSET", key=args.key)
    if _wants_json(args):
        payload = {"key": args.key, "settings": _config_values()}
        return structured_response("config.set", message=message, payload=payload, summary=message)
    send_success(message)
    return 0


__all__ = [
    "CliDeps",
    "CONFIG_KEYS",
    "cmd_config_show",
    "cmd_config_set",
    "cmd_init",
    "cmd_reset",
    "cmd_lists",
    "cmd_task_create",
    "cmd_task_remove",
    "cmd_task_move",
    "cmd_task_mark",
    "cmd_task_rename",
    "cmd_task_describe",
    "cmd_task_show",
    "cmd_context_create",
    "cmd_context_remove",
    "cmd_context_list",
    "cmd_list_create",
    "cmd_list_remove",
    "cmd_list_rename",
    "cmd_list_show",
    "cmd_project_create",
    "cmd_project_remove",
    "cmd_project_move",
    "cmd_project_rename",
    "cmd_project_show",
]
