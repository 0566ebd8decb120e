import json

from core import ContainerPath, TaskPath, TaskStatus
from core.desktop.devtools.interface.cli_format import list_lines, titlecase
from core.desktop.devtools.interface.cli_io import send_success, structured_error, structured_response
from core.desktop.devtools.interface.constants import LANG_PACK, OUTPUT_PREFIX
from core.desktop.devtools.interface.i18n import effective_lang, translate
from core.desktop.devtools.interface.serializers import list_to_dict, project_to_dict, task_to_dict
from core.desktop.devtools.interface.tui_themes import DEFAULT_THEME, THEMES, build_style, get_theme_palette


def _line_text(line) -> str:
    return "".join(text for _, text in line)


def test_task_to_dict_uses_identifiers(sample_workspace):
    task = sample_workspace.get_list("inbox").get_task(1)
    data = task_to_dict(task, TaskPath("inbox", 1))
    assert data == {
        "name": "call mom",
        "description": "about sunday",
        "status": "TODO",
        "contexts": ["phone"],
        "path": "inbox/2",
        "id": "2",
    }
    assert "path" not in task_to_dict(task)


def test_project_and_list_dicts(sample_workspace):
    inbox = sample_workspace.get_list("inbox")
    project = project_to_dict(inbox.get_project(0), ContainerPath("inbox", 0))
    assert project["id"] == "1"
    assert project["tasks"][0]["path"] == "inbox/1/1"
    listed = list_to_dict(inbox)
    assert (listed["task_count"], listed["project_count"]) == (2, 1)
    assert listed["projects"][0]["tasks"][0]["path"] == "inbox/1/1"
    assert "tasks" not in list_to_dict(inbox, include_tasks=False)


def test_structured_response(capsys):
    assert structured_response("lists", payload={"lists": []}, summary="ok") == 0
    body = json.loads(capsys.readouterr().out)
    assert body["command"] == "lists"
    assert body["status"] == "OK"
    assert body["summary"] == "ok"
    assert structured_error("task.show", "boom") == 1
    assert json.loads(capsys.readouterr().out)["status"] == "ERROR"


def test_send_success_prefix(capsys):
    send_success("done")
    assert f"{OUTPUT_PREFIX} done" in capsys.readouterr().out


def test_list_lines_numbering(sample_workspace):
    inbox = sample_workspace.get_list("inbox")
    inbox.get_task(0).status = TaskStatus.DONE
    text = [_line_text(line) for line in list_lines(inbox, show_all=True)]
    assert any(line.strip() == "1. House (1 tasks)" for line in text)
    assert any(line.strip() == "1. TODO Fix sink" for line in text)
    assert any(line.strip() == "1. DONE Buy milk" for line in text)
    assert any(line.strip() == "2. TODO Call mom @phone" for line in text)


def test_titlecase():
    assert titlecase("inbox/1") == "Inbox/1"
    assert titlecase("a") == "A"
    assert titlecase("") == ""


def test_translate_and_fallback(monkeypatch):
    assert translate("LIST_CREATED", name="Next") == "List Next created."
    assert translate("NO_SUCH_KEY") == "NO_SUCH_KEY"
    monkeypatch.setenv("GTD_LANG", "ru")
    assert effective_lang() == "ru"
    # keys missing from ru come back in English
    assert translate("TUI_NO_LISTS") == LANG_PACK["en"]["TUI_NO_LISTS"]


def test_themes_cover_the_same_classes():
    keys = set(THEMES[DEFAULT_THEME])
    for palette in THEMES.values():
        assert set(palette) == keys
    assert get_theme_palette("missing") == THEMES[DEFAULT_THEME]
    build_style("dark-contrast")
