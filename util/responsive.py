from dataclasses import dataclass
from typing import List, Tuple

from wcwidth import wcwidth


MIN_COLUMN_WIDTH = 18
SEPARATOR_WIDTH = 1


def display_width(text: str) -> int:
    """Visible terminal width of text, counting wide characters as two cells."""
    width = 0
    for ch in text:
        w = wcwidth(ch)
        if w is None or w < 0:
            w = 0
        width += w
    return width


def trim_display(text: str, width: int, ellipsis: str = "…") -> str:
    """Trim text to at most ``width`` cells, marking the cut with ``ellipsis``."""
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    budget = width - display_width(ellipsis)
    acc = []
    used = 0
    for ch in text:
        w = max(0, wcwidth(ch) or 0)
        if used + w > budget:
            break
        acc.append(ch)
        used += w
    return "".join(acc) + ellipsis if budget >= 0 else ""


def pad_display(text: str, width: int) -> str:
    """Trim and pad with spaces to exactly ``width`` cells."""
    trimmed = trim_display(text, width)
    return trimmed + " " * max(0, width - display_width(trimmed))


@dataclass
class RowLayout:
    """Which parts of a task row fit into a column of a given width."""
    min_width: int
    parts: Tuple[str, ...]

    def has_part(self, name: str) -> bool:
        return name in self.parts


class ResponsiveLayoutManager:
    """Responsive layout selector for the list board."""

    ROW_LAYOUTS = [
        RowLayout(min_width=36, parts=("idx", "stat", "title", "contexts")),
        RowLayout(min_width=22, parts=("idx", "stat", "title")),
        RowLayout(min_width=0, parts=("stat", "title")),
    ]

    @classmethod
    def select_row_layout(cls, column_width: int) -> RowLayout:
        for layout in cls.ROW_LAYOUTS:
            if column_width >= layout.min_width:
                return layout
        return cls.ROW_LAYOUTS[-1]

    @staticmethod
    def visible_column_count(term_width: int, list_count: int) -> int:
        if list_count <= 0:
            return 0
        fits = (max(term_width, MIN_COLUMN_WIDTH) + SEPARATOR_WIDTH) // (MIN_COLUMN_WIDTH + SEPARATOR_WIDTH)
        return max(1, min(list_count, fits))

    @classmethod
    def board_window(cls, term_width: int, list_count: int, active: int) -> Tuple[int, List[int]]:
        """Pick the first visible list and the width of each visible column.

        The active list is always inside the window. Widths fill the terminal,
        spare cells going to the leftmost columns.
        """
        count = cls.visible_column_count(term_width, list_count)
        if count == 0:
            return 0, []
        active = max(0, min(active, list_count - 1))
        first = min(max(0, active - count // 2), list_count - count)
        usable = max(count, term_width - SEPARATOR_WIDTH * (count - 1))
        base, leftover = divmod(usable, count)
        widths = [base + (1 if i < leftover else 0) for i in range(count)]
        return first, widths
