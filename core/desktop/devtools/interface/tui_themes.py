#!/usr/bin/env python3
"""Terminal themes shared by CLI output and the TUI browser."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "prefix": "#9ad974 bold",
        "prefix.error": "#e06c75 bold",
        "prefix.info": "#e5c07b bold",
        "title": "#e5c07b bold",
        "section": "#61afef bold",
        "identifier": "#c678dd",
        "index": "#9ad974",
        "status.todo": "#c678dd bold",
        "status.done": "#6d717a bold",
        "task.todo": "#56b6c2",
        "task.done": "#6d717a",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "header": "#ffb347 bold",
        "header.active": "bg:#3b3b3b #ffb347 bold",
        "border": "#4b525a",
        "footer": "#6d717a",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "prefix": "#b8f171 bold",
        "prefix.error": "#ff6b6b bold",
        "prefix.info": "#f0c674 bold",
        "title": "#f0c674 bold",
        "section": "#7ec8ff bold",
        "identifier": "#ff8cff",
        "index": "#b8f171",
        "status.todo": "#ff8cff bold",
        "status.done": "#8a9097 bold",
        "task.todo": "#6fe3f0",
        "task.done": "#8a9097",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "selected": "bg:#3d4047 #e8eaec bold",
        "header": "#ffb347 bold",
        "header.active": "bg:#3d4047 #ffb347 bold",
        "border": "#5a6169",
        "footer": "#8a9097",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
