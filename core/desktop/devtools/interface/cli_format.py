"""Styled fragments for human-readable CLI output.

Every number shown to the user goes through ``index_to_identifier`` so it
matches what the path parser accepts back.
"""

from typing import List, Tuple

from core import Project, Task, TaskList, TaskStatus, index_to_identifier
from core.desktop.devtools.interface.i18n import translate

Fragment = Tuple[str, str]


def titlecase(text: str) -> str:
    if len(text) < 2:
        return text.upper()
    return text[0].upper() + text[1:]


def format_index(index: int) -> Fragment:
    return ("class:index", index_to_identifier(index))


def format_list_name(name: str) -> Fragment:
    return ("class:identifier", titlecase(name))


def format_project_name(name: str) -> Fragment:
    return ("class:identifier bold", titlecase(name))


def format_section(name: str) -> Fragment:
    return ("class:section", name)


def format_task_status(status: TaskStatus) -> Fragment:
    return (f"class:{status.style}", status.code)


def format_task(task: Task) -> List[Fragment]:
    style = "class:task.done" if task.status is TaskStatus.DONE else "class:task.todo"
    fragments: List[Fragment] = [format_task_status(task.status), ("", " "), (style, titlecase(task.name))]
    if task.contexts:
        fragments.append(("class:text.dim", " " + " ".join(f"@{c}" for c in task.contexts)))
    return fragments


def _numbered(index: int, rest: List[Fragment]) -> List[Fragment]:
    return [format_index(index), ("", ". ")] + rest


def list_lines(task_list: TaskList, show_all: bool = False) -> List[List[Fragment]]:
    """Lines for ``gtd list show``; projects first, then loose tasks."""
    lines: List[List[Fragment]] = [
        [("", translate("LIST_CONTENTS", name="")), ("class:title", titlecase(task_list.name))],
        [],
    ]
    if task_list.projects:
        lines.append([("", "  "), format_section(translate("SECTION_PROJECTS"))])
        for index, project in enumerate(task_list.projects):
            count = translate("PROJECT_TASK_COUNT", count=len(project.tasks))
            lines.append([("", "    ")] + _numbered(index, [format_project_name(project.name), ("class:text.dim", f" {count}")]))
            if show_all:
                for task_index, task in enumerate(project.tasks):
                    lines.append([("", "      ")] + _numbered(task_index, format_task(task)))
        if task_list.tasks:
            lines.append([])
    if task_list.tasks:
        lines.append([("", "  "), format_section(translate("SECTION_TASKS"))])
        for index, task in enumerate(task_list.tasks):
            lines.append([("", "    ")] + _numbered(index, format_task(task)))
    return lines


def project_lines(project: Project) -> List[List[Fragment]]:
    lines: List[List[Fragment]] = [
        [("", translate("PROJECT_CONTENTS", name="")), ("class:title", titlecase(project.name))],
        [],
    ]
    for index, task in enumerate(project.tasks):
        lines.append([("", "  ")] + _numbered(index, format_task(task)))
    return lines


def task_lines(path: str, task: Task) -> List[List[Fragment]]:
    lines: List[List[Fragment]] = [[("class:index", path), ("", " ")] + format_task(task), []]
    lines.append([("", "  "), format_section(translate("TASK_DESCRIPTION"))])
    if task.description:
        for row in task.description.splitlines() or [""]:
            lines.append([("", "    " + row)])
    else:
        lines.append([("class:text.dim", "    " + translate("TASK_NO_DESCRIPTION"))])
    if task.contexts:
        lines.append([])
        lines.append([("", "  "), format_section(translate("TASK_CONTEXTS"))])
        for context in task.contexts:
            lines.append([("", "    - "), ("class:identifier", context)])
    return lines


def lists_lines(lists: List[TaskList]) -> List[List[Fragment]]:
    lines: List[List[Fragment]] = [[("", translate("LISTS_HEADER"))]]
    for task_list in lists:
        lines.append([("", "- "), format_list_name(task_list.name), ("class:text.dim", f" ({task_list.count_tasks()})")])
    return lines
