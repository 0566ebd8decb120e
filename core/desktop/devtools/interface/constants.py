#!/usr/bin/env python3
"""Shared interface constants and message catalogue."""

from typing import Dict

OUTPUT_PREFIX = "[gtd]"

LANG_PACK: Dict[str, Dict[str, str]] = {
    "en": {
        "WORKSPACE_INITIALIZED": "A new workspace has been initialized at {path}.",
        "WORKSPACE_RESET": "The workspace at {path} has been reset.",
        "LISTS_HEADER": "Lists in the current workspace:",
        "LISTS_EMPTY": "The workspace has no lists.",
        "LIST_CREATED": "List {name} created.",
        "LIST_REMOVED": "List {name} removed.",
        "LIST_RENAMED": "List {old} renamed to {name}.",
        "LIST_EMPTY": "List {name} is empty.",
        "LIST_CONTENTS": "Contents of list {name}",
        "SECTION_PROJECTS": "Projects",
        "SECTION_TASKS": "Tasks",
        "PROJECT_TASK_COUNT": "({count} tasks)",
        "PROJECT_CREATED": "Project {path} (\"{name}\") created.",
        "PROJECT_REMOVED": "Project {path} (\"{name}\") removed.",
        "PROJECT_MOVED": "Project {source} moved to {target} (\"{name}\").",
        "PROJECT_RENAMED": "Project {path} renamed from \"{old}\" to \"{name}\".",
        "PROJECT_CONTENTS": "Contents of project {name}",
        "PROJECT_EMPTY": "Project {name} is empty.",
        "TASK_CREATED": "Task {path} (\"{name}\") created.",
        "TASK_REMOVED": "Task {path} (\"{name}\") removed.",
        "TASK_MOVED": "Moved task {source} to {target} (\"{name}\").",
        "TASK_MARKED": "Task {path} (\"{name}\") marked as {status}.",
        "TASK_RENAMED": "Task {path} renamed from \"{old}\" to \"{name}\".",
        "TASK_DESCRIBED": "Description of task {path} (\"{name}\") updated.",
        "TASK_DESCRIPTION": "Description",
        "TASK_NO_DESCRIPTION": "No description.",
        "TASK_CONTEXTS": "Contexts",
        "CONTEXT_CREATED": "Context \"{context}\" added to task {path}.",
        "CONTEXT_REMOVED": "Context \"{context}\" removed from task {path}.",
        "CONTEXTS_EMPTY": "Task {path} has no contexts.",
        "ERROR": "Error: {message}",
        "CONFIG_HEADER": "User settings ({path}):",
        "CONFIG_SET": "Setting {key} set to {value}.",
        "CONFIG_UNSET": "Setting {key} restored to its default.",
        "TUI_HELP": "←/→ list  ↑/↓ task  space done  d delete  q quit",
        "TUI_EMPTY": "(empty)",
        "TUI_NO_LISTS": "No lists. Create one with `gtd list create NAME`.",
    },
    "ru": {
        "WORKSPACE_INITIALIZED": "Новое рабочее пространство создано: {path}.",
        "WORKSPACE_RESET": "Рабочее пространство {path} сброшено.",
        "LISTS_HEADER": "Списки в текущем рабочем пространстве:",
        "LISTS_EMPTY": "В рабочем пространстве нет списков.",
        "LIST_CREATED": "Список {name} создан.",
        "LIST_REMOVED": "Список {name} удалён.",
        "LIST_EMPTY": "Список {name} пуст.",
        "LIST_CONTENTS": "Содержимое списка {name}",
        "SECTION_PROJECTS": "Проекты",
        "SECTION_TASKS": "Задачи",
        "PROJECT_CREATED": "Проект {path} (\"{name}\") создан.",
        "PROJECT_REMOVED": "Проект {path} (\"{name}\") удалён.",
        "PROJECT_MOVED": "Проект {source} перемещён в {target} (\"{name}\").",
        "TASK_CREATED": "Задача {path} (\"{name}\") создана.",
        "TASK_REMOVED": "Задача {path} (\"{name}\") удалена.",
        "TASK_MOVED": "Задача {source} перемещена в {target} (\"{name}\").",
        "TASK_MARKED": "Задача {path} (\"{name}\") отмечена как {status}.",
        "ERROR": "Ошибка: {message}",
        "CONFIG_HEADER": "Пользовательские настройки ({path}):",
        "CONFIG_SET": "Параметр {key} установлен: {value}.",
        "CONFIG_UNSET": "Параметр {key} сброшен к значению по умолчанию.",
        "TUI_EMPTY": "(пусто)",
    },
}
