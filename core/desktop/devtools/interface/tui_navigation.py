"""Navigation helpers for GTDBrowserTUI to keep tui_app slim."""


def move_vertical_selection(tui, delta: int) -> None:
    """Move the task cursor of the active list by `delta`, clamping to its tasks."""
    state = tui.state
    column = state.active_column
    if column is None:
        return
    total = len(column.selectable_rows)
    if total <= 0:
        state.selected[column.name] = 0
    else:
        state.selected[column.name] = max(0, min(state.selected_index(column) + delta, total - 1))
    tui.force_render()


def move_horizontal_selection(tui, delta: int) -> None:
    """Switch the active list; each list remembers its own cursor."""
    state = tui.state
    if not state.columns:
        return
    state.active = max(0, min(state.active + delta, len(state.columns) - 1))
    tui.force_render()


__all__ = ["move_vertical_selection", "move_horizontal_selection"]
