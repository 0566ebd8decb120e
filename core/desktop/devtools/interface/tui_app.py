#!/usr/bin/env python3
"""TUI application - GTDBrowserTUI class and cmd_tui command."""

import logging
import os
from typing import Callable, List, Optional, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from core import GTDError, TaskPath, TaskStatus, Workspace, index_to_identifier
from core.desktop.devtools.application.gtd_manager import GTDManager
from core.desktop.devtools.interface.cli_format import titlecase
from core.desktop.devtools.interface.cli_io import send_error
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_models import BoardColumn, BoardRow, BoardState
from core.desktop.devtools.interface.tui_navigation import move_horizontal_selection, move_vertical_selection
from core.desktop.devtools.interface.tui_themes import DEFAULT_THEME, build_style
from util.responsive import ResponsiveLayoutManager, display_width, pad_display, trim_display

logger = logging.getLogger("gtd.tui")

Fragment = Tuple[str, str]
BoardAction = Callable[[Workspace, TaskPath], str]

# status bar, header, rule and footer
CHROME_HEIGHT = 4


class GTDBrowserTUI:
    def __init__(self, manager: GTDManager, theme: str = DEFAULT_THEME, *, input=None, output=None):
        self.manager = manager
        self.state = BoardState()
        self.status_message = ""
        self.state.load(manager.load())
        self.style = build_style(theme)

        kb = KeyBindings()

        @kb.add("q")
        @kb.add("c-c")
        def _(event):
            event.app.exit()

        @kb.add("left")
        @kb.add("h")
        def _(event):
            move_horizontal_selection(self, -1)

        @kb.add("right")
        @kb.add("l")
        def _(event):
            move_horizontal_selection(self, 1)

        @kb.add("up")
        @kb.add("k")
        def _(event):
            move_vertical_selection(self, -1)

        @kb.add("down")
        @kb.add("j")
        def _(event):
            move_vertical_selection(self, 1)

        @kb.add("space")
        def _(event):
            self.toggle_selected()

        @kb.add("d")
        def _(event):
            self.delete_selected()

        self.status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)
        self.board = Window(content=FormattedTextControl(self.get_board_text), always_hide_cursor=True, wrap_lines=False)
        self.footer = Window(content=FormattedTextControl(self.get_footer_text), height=1, always_hide_cursor=True)

        self.app = Application(
            layout=Layout(HSplit([self.status_bar, self.board, self.footer])),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            input=input,
            output=output,
        )

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    @staticmethod
    def get_terminal_height() -> int:
        try:
            return os.get_terminal_size().lines
        except (AttributeError, ValueError, OSError):
            return 40

    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    def set_status_message(self, message: str) -> None:
        self.status_message = message
        self.force_render()

    # ---------------------------------------------------------------- actions
    def _apply(self, action: BoardAction) -> None:
        row = self.state.selected_row()
        if row is None or row.path is None:
            return
        try:
            workspace = self.manager.load()
            message = action(workspace, row.path)
            self.manager.save(workspace)
        except GTDError as exc:
            logger.warning("tui action on %s failed: %s", row.path, exc)
            self.set_status_message(translate("ERROR", message=str(exc)))
            return
        self.state.load(workspace)
        self.set_status_message(message)

    def toggle_selected(self) -> None:
        def action(workspace: Workspace, path: TaskPath) -> str:
            task_path, task = self.manager.toggle_task(workspace, path)
            return translate("TASK_MARKED", path=titlecase(str(task_path)), name=task.name, status=task.status.code)

        self._apply(action)

    def delete_selected(self) -> None:
        def action(workspace: Workspace, path: TaskPath) -> str:
            task_path, task = self.manager.remove_task(workspace, path)
            return translate("TASK_REMOVED", path=titlecase(str(task_path)), name=task.name)

        self._apply(action)

    # -------------------------------------------------------------- rendering
    def get_status_text(self) -> FormattedText:
        fragments: List[Fragment] = [("class:title", " gtd "), ("class:text.dim", str(self.manager.workspace_file))]
        if self.status_message:
            fragments.append(("class:text.dim", "  │  "))
            fragments.append(("class:text", self.status_message))
        return FormattedText(fragments)

    def get_footer_text(self) -> FormattedText:
        return FormattedText([("class:footer", " " + translate("TUI_HELP"))])

    def _row_fragments(self, row: BoardRow, width: int, selected: bool) -> List[Fragment]:
        if row.task is None:
            text = pad_display("▸ " + titlecase(row.label), width)
            return [("class:section", text)]
        layout = ResponsiveLayoutManager.select_row_layout(width)
        indent = "  " * row.depth
        parts: List[Fragment] = [("", indent)]
        if layout.has_part("idx") and row.path is not None:
            parts.append(("class:index", index_to_identifier(row.path.task_index) + ". "))
        if layout.has_part("stat"):
            parts.append((f"class:{row.task.status.style}", row.task.status.icon + " "))
        title_style = "class:task.done" if row.task.status is TaskStatus.DONE else "class:task.todo"
        used = sum(display_width(text) for _, text in parts)
        title = titlecase(row.task.name)
        if layout.has_part("contexts") and row.task.contexts:
            title += " " + " ".join(f"@{c}" for c in row.task.contexts)
        parts.append((title_style, pad_display(title, max(0, width - used))))
        if selected:
            return [("class:selected", text) for _, text in parts]
        return parts

    def _column_lines(self, column: BoardColumn, width: int, height: int, active: bool) -> List[List[Fragment]]:
        count = len(column.selectable_rows)
        header = trim_display(f"{titlecase(column.name)} ({count})", width)
        lines: List[List[Fragment]] = [
            [("class:header.active" if active else "class:header", pad_display(header, width))],
            [("class:border", "─" * width)],
        ]
        if not column.rows:
            lines.append([("class:text.dim", pad_display(translate("TUI_EMPTY"), width))])
            return lines
        selected_row = None
        if active and count:
            selected_row = column.selectable_rows[self.state.selected_index(column)]
        offset = 0
        if selected_row is not None:
            position = column.rows.index(selected_row)
            offset = max(0, position - height + 1)
        for row in column.rows[offset:offset + height]:
            lines.append(self._row_fragments(row, width, row is selected_row))
        return lines

    def get_board_text(self, width: Optional[int] = None, height: Optional[int] = None) -> FormattedText:
        width = width or self.get_terminal_width()
        height = height or self.get_terminal_height()
        if not self.state.columns:
            return FormattedText([("class:text.dim", " " + translate("TUI_NO_LISTS"))])
        first, widths = ResponsiveLayoutManager.board_window(width, len(self.state.columns), self.state.active)
        body_height = max(1, height - CHROME_HEIGHT)
        blocks = []
        for offset, column_width in enumerate(widths):
            index = first + offset
            blocks.append(
                (column_width, self._column_lines(self.state.columns[index], column_width, body_height, index == self.state.active))
            )
        total = max(len(lines) for _, lines in blocks)
        fragments: List[Fragment] = []
        for line_no in range(total):
            for block_no, (column_width, lines) in enumerate(blocks):
                if block_no:
                    fragments.append(("class:border", "│"))
                if line_no < len(lines):
                    fragments.extend(lines[line_no])
                else:
                    fragments.append(("", " " * column_width))
            fragments.append(("", "\n"))
        return FormattedText(fragments)

    def run(self):
        self.app.run()


def cmd_tui(args, deps) -> int:
    manager = deps.manager_factory(getattr(args, "use_global", None))
    try:
        tui = GTDBrowserTUI(manager, theme=getattr(args, "theme", DEFAULT_THEME))
    except GTDError as exc:
        send_error(deps.translate("ERROR", message=str(exc)))
        return 1
    tui.run()
    return 0


__all__ = ["GTDBrowserTUI", "cmd_tui"]
