#!/usr/bin/env python3
"""
gtd: getting-things-done lists in one YAML file (CLI/TUI).

This is a thin facade that wires the parser to the command modules.
"""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from typing import List, Optional

from config import get_user_theme
from core.desktop.devtools.interface.cli_parser import build_parser as build_cli_parser

from .cli_commands import (
    CONFIG_KEYS,
    CliDeps,
    cmd_config_set,
    cmd_config_show,
    cmd_context_create,
    cmd_context_list,
    cmd_context_remove,
    cmd_init,
    cmd_list_create,
    cmd_list_remove,
    cmd_list_rename,
    cmd_list_show,
    cmd_lists,
    cmd_project_create,
    cmd_project_move,
    cmd_project_remove,
    cmd_project_rename,
    cmd_project_show,
    cmd_reset,
    cmd_task_create,
    cmd_task_describe,
    cmd_task_mark,
    cmd_task_move,
    cmd_task_remove,
    cmd_task_rename,
    cmd_task_show,
)
from .tui_app import GTDBrowserTUI, cmd_tui
from .tui_models import CLI_DEPS
from .tui_themes import DEFAULT_THEME, THEMES

__all__ = [
    "cmd_init",
    "cmd_reset",
    "cmd_lists",
    "cmd_tui",
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
    "cmd_config_show",
    "cmd_config_set",
    "CONFIG_KEYS",
    "CliDeps",
    "CLI_DEPS",
    "GTDBrowserTUI",
    "build_parser",
    "main",
]


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    default_theme = get_user_theme()
    if default_theme not in THEMES:
        default_theme = DEFAULT_THEME
    parser = build_cli_parser(commands=sys.modules[__name__], themes=THEMES, default_theme=default_theme)
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def main(argv: Optional[List[str]] = None, deps: Optional[CliDeps] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("gtd"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if not getattr(args, "command", None):
        parser.print_help()
        return 1
    return args.func(args, deps or CLI_DEPS)


if __name__ == "__main__":
    sys.exit(main())
