import gtd


def test_build_parser_has_core_commands():
    parser = gtd.build_parser()
    help_text = parser.format_help()
    for command in ("init", "reset", "lists", "tui", "task", "list", "project", "config"):
        assert command in help_text


def test_global_flags_in_either_position():
    parser = gtd.build_parser()
    before = parser.parse_args(["-g", "--json", "task", "show", "inbox/1"])
    after = parser.parse_args(["task", "show", "inbox/1", "-g", "--json"])
    for args in (before, after):
        assert args.use_global is True
        assert args.json is True
        assert args.func is gtd.cmd_task_show


def test_global_flags_between_group_and_action():
    parser = gtd.build_parser()
    task = parser.parse_args(["task", "-g", "create", "inbox", "x"])
    assert task.use_global is True
    assert task.func is gtd.cmd_task_create
    ctx = parser.parse_args(["task", "context", "--json", "list", "inbox/1"])
    assert ctx.json is True
    assert ctx.use_global is None
    assert parser.parse_args(["list", "-g", "show", "inbox"]).use_global is True
    assert parser.parse_args(["project", "--json", "show", "next/1"]).json is True


def test_defaults_without_flags():
    args = gtd.build_parser().parse_args(["list", "show", "inbox"])
    assert args.use_global is None
    assert args.json is False
    assert args.all is False
    assert args.func is gtd.cmd_list_show


def test_optional_positionals():
    parser = gtd.build_parser()
    assert parser.parse_args(["task", "create", "inbox", "x"]).description is None
    assert parser.parse_args(["task", "mark", "inbox/1"]).status is None
    assert parser.parse_args(["task", "mark", "inbox/1", "todo"]).status == "TODO"
    assert parser.parse_args(["task", "context", "list", "inbox/1"]).func is gtd.cmd_context_list


def test_version_flag(capsys):
    assert gtd.main(["--version"]) == 0
    assert capsys.readouterr().out.strip()


def test_config_subcommands():
    parser = gtd.build_parser()
    assert parser.parse_args(["config", "show"]).func is gtd.cmd_config_show
    args = parser.parse_args(["config", "set", "default_lists", "inbox,someday"])
    assert (args.key, args.value, args.func) == ("default_lists", "inbox,someday", gtd.cmd_config_set)
    assert parser.parse_args(["config", "set", "lang"]).value is None
