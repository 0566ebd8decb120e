#!/usr/bin/env python3
"""TUI data models: a read-only snapshot of the workspace laid out as a board."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from core import Task, TaskList, TaskPath, Workspace
from core.desktop.devtools.application.gtd_manager import GTDManager
from core.desktop.devtools.interface.cli_commands import CliDeps
from core.desktop.devtools.interface.i18n import translate


@dataclass(frozen=True)
class BoardRow:
    """One line of a list column: a project header or a selectable task."""
    label: str
    path: Optional[TaskPath] = None
    task: Optional[Task] = None
    depth: int = 0

    @property
    def selectable(self) -> bool:
        return self.path is not None


@dataclass
class BoardColumn:
    name: str
    rows: List[BoardRow] = field(default_factory=list)

    @property
    def selectable_rows(self) -> List[BoardRow]:
        return [row for row in self.rows if row.selectable]


def build_column(task_list: TaskList) -> BoardColumn:
    """Projects first with their tasks indented, then loose tasks."""
    column = BoardColumn(task_list.name)
    for p_index, project in enumerate(task_list.projects):
        column.rows.append(BoardRow(project.name))
        for t_index, task in enumerate(project.tasks):
            column.rows.append(BoardRow(task.name, TaskPath(task_list.name, t_index, p_index), task, depth=1))
    for t_index, task in enumerate(task_list.tasks):
        column.rows.append(BoardRow(task.name, TaskPath(task_list.name, t_index), task))
    return column


class BoardState:
    """Columns plus the selection cursor; rebuilt after every save."""

    def __init__(self) -> None:
        self.columns: List[BoardColumn] = []
        self.active: int = 0
        self.selected: Dict[str, int] = {}

    def load(self, workspace: Workspace) -> None:
        self.columns = [build_column(task_list) for task_list in workspace.lists]
        self.active = max(0, min(self.active, len(self.columns) - 1))
        for column in self.columns:
            total = len(column.selectable_rows)
            current = self.selected.get(column.name, 0)
            self.selected[column.name] = max(0, min(current, total - 1))

    @property
    def active_column(self) -> Optional[BoardColumn]:
        if not self.columns:
            return None
        return self.columns[self.active]

    def selected_index(self, column: BoardColumn) -> int:
        return self.selected.get(column.name, 0)

    def selected_row(self) -> Optional[BoardRow]:
        column = self.active_column
        if column is None:
            return None
        rows = column.selectable_rows
        if not rows:
            return None
        return rows[self.selected_index(column)]


CLI_DEPS = CliDeps(
    manager_factory=lambda use_global=None: GTDManager(use_global=use_global),
    translate=translate,
)


__all__ = ["BoardRow", "BoardColumn", "BoardState", "build_column", "CLI_DEPS"]
