"""CLI parser construction for the gtd CLI/TUI."""

import argparse
from typing import Any, Mapping


def _global_flags(suppress: bool) -> argparse.ArgumentParser:
    """Flags accepted both before and after the subcommand.

    The leaf copy uses SUPPRESS so a flag given before the subcommand is not
    reset by the subparser's own default.
    """
    flags = argparse.ArgumentParser(add_help=False)
    flags.add_argument(
        "--global",
        "-g",
        dest="use_global",
        action="store_true",
        default=argparse.SUPPRESS if suppress else None,
        help="use the global workspace file (~/.gtd.yaml)",
    )
    flags.add_argument(
        "--json",
        action="store_true",
        default=argparse.SUPPRESS if suppress else False,
        help="print structured JSON instead of formatted text",
    )
    flags.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=argparse.SUPPRESS if suppress else False,
        help="enable debug logging",
    )
    return flags


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gtd",
        description="gtd: getting-things-done lists, projects and tasks in a single YAML file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        parents=[_global_flags(suppress=False)],
    )
    leaf = [_global_flags(suppress=True)]

    sub = parser.add_subparsers(dest="command", help="commands")

    # workspace
    init_p = sub.add_parser("init", help="create the workspace file", parents=leaf)
    init_p.set_defaults(func=commands.cmd_init)

    reset_p = sub.add_parser("reset", help="replace the workspace with the default lists", parents=leaf)
    reset_p.set_defaults(func=commands.cmd_reset)

    lists_p = sub.add_parser("lists", help="show all lists", parents=leaf)
    lists_p.set_defaults(func=commands.cmd_lists)

    tui_p = sub.add_parser("tui", help="start the interactive browser", parents=leaf)
    tui_p.add_argument("--theme", choices=list(themes.keys()), default=default_theme, help="palette")
    tui_p.set_defaults(func=commands.cmd_tui)

    # task
    task_p = sub.add_parser("task", help="task operations", parents=leaf)
    task_sub = task_p.add_subparsers(dest="task_command", required=True)

    tc = task_sub.add_parser("create", help="create a task", parents=leaf)
    tc.add_argument("path", help="list or list/project, e.g. inbox or next/2")
    tc.add_argument("name")
    tc.add_argument("description", nargs="?")
    tc.set_defaults(func=commands.cmd_task_create)

    tr = task_sub.add_parser("remove", help="remove a task", parents=leaf)
    tr.add_argument("path", help="task path, e.g. inbox/1 or next/2/3")
    tr.set_defaults(func=commands.cmd_task_remove)

    tm = task_sub.add_parser("move", help="move a task to another list or project", parents=leaf)
    tm.add_argument("source")
    tm.add_argument("destination")
    tm.set_defaults(func=commands.cmd_task_move)

    tk = task_sub.add_parser("mark", help="set task status (default DONE)", parents=leaf)
    tk.add_argument("path")
    tk.add_argument("status", nargs="?", type=str.upper)
    tk.set_defaults(func=commands.cmd_task_mark)

    tn = task_sub.add_parser("rename", help="rename a task", parents=leaf)
    tn.add_argument("path")
    tn.add_argument("name")
    tn.set_defaults(func=commands.cmd_task_rename)

    td = task_sub.add_parser("describe", help="set or clear a task description", parents=leaf)
    td.add_argument("path")
    td.add_argument("description", nargs="?")
    td.set_defaults(func=commands.cmd_task_describe)

    ts = task_sub.add_parser("show", help="show a task", parents=leaf)
    ts.add_argument("path")
    ts.set_defaults(func=commands.cmd_task_show)

    ctx_p = task_sub.add_parser("context", help="task contexts", parents=leaf)
    ctx_sub = ctx_p.add_subparsers(dest="context_command", required=True)

    cc = ctx_sub.add_parser("create", help="attach a context", parents=leaf)
    cc.add_argument("path")
    cc.add_argument("name")
    cc.set_defaults(func=commands.cmd_context_create)

    cr = ctx_sub.add_parser("remove", help="detach a context", parents=leaf)
    cr.add_argument("path")
    cr.add_argument("name")
    cr.set_defaults(func=commands.cmd_context_remove)

    cl = ctx_sub.add_parser("list", help="show task contexts", parents=leaf)
    cl.add_argument("path")
    cl.set_defaults(func=commands.cmd_context_list)

    # list
    list_p = sub.add_parser("list", help="list operations", parents=leaf)
    list_sub = list_p.add_subparsers(dest="list_command", required=True)

    lc = list_sub.add_parser("create", help="create a list", parents=leaf)
    lc.add_argument("name")
    lc.set_defaults(func=commands.cmd_list_create)

    lr = list_sub.add_parser("remove", help="remove a list with everything in it", parents=leaf)
    lr.add_argument("name")
    lr.set_defaults(func=commands.cmd_list_remove)

    ls = list_sub.add_parser("show", help="show a list", parents=leaf)
    ls.add_argument("name")
    ls.add_argument("--all", "-a", action="store_true", help="also show tasks inside projects")
    ls.set_defaults(func=commands.cmd_list_show)

    ln = list_sub.add_parser("rename", help="rename a list", parents=leaf)
    ln.add_argument("name")
    ln.add_argument("new_name")
    ln.set_defaults(func=commands.cmd_list_rename)

    # project
    proj_p = sub.add_parser("project", help="project operations", parents=leaf)
    proj_sub = proj_p.add_subparsers(dest="project_command", required=True)

    pc = proj_sub.add_parser("create", help="create a project in a list", parents=leaf)
    pc.add_argument("path", help="list name")
    pc.add_argument("name")
    pc.set_defaults(func=commands.cmd_project_create)

    pr = proj_sub.add_parser("remove", help="remove a project with its tasks", parents=leaf)
    pr.add_argument("path", help="project path, e.g. next/1")
    pr.set_defaults(func=commands.cmd_project_remove)

    pm = proj_sub.add_parser("move", help="move a project to another list", parents=leaf)
    pm.add_argument("source")
    pm.add_argument("destination")
    pm.set_defaults(func=commands.cmd_project_move)

    ps = proj_sub.add_parser("show", help="show a project", parents=leaf)
    ps.add_argument("path")
    ps.set_defaults(func=commands.cmd_project_show)

    pn = proj_sub.add_parser("rename", help="rename a project", parents=leaf)
    pn.add_argument("path")
    pn.add_argument("name")
    pn.set_defaults(func=commands.cmd_project_rename)

    # user settings
    cfg_p = sub.add_parser("config", help="show or change user settings", parents=leaf)
    cfg_sub = cfg_p.add_subparsers(dest="config_command", required=True)

    cfs = cfg_sub.add_parser("show", help="show the user settings", parents=leaf)
    cfs.set_defaults(func=commands.cmd_config_show)

    cft = cfg_sub.add_parser("set", help="change a setting; no value restores the default", parents=leaf)
    cft.add_argument("key", choices=list(commands.CONFIG_KEYS))
    cft.add_argument("value", nargs="?", help="default_lists takes comma-separated names")
    cft.set_defaults(func=commands.cmd_config_set)

    return parser
