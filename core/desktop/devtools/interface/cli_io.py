import json
import sys
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple, Union

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from config import get_user_theme
from core.desktop.devtools.interface.constants import OUTPUT_PREFIX
from core.desktop.devtools.interface.tui_themes import DEFAULT_THEME, build_style

Fragment = Tuple[str, str]
Line = Union[str, List[Fragment]]

PADDING = "  "


def iso_timestamp() -> str:
    """UTC timestamp for structured CLI output."""
    return datetime.now(timezone.utc).isoformat()


def structured_response(
    command: str,
    *,
    status: str = "OK",
    message: str = "",
    payload: Optional[Dict] = None,
    summary: Optional[str] = None,
    exit_code: int = 0,
) -> int:
    """Unified JSON response for non-interactive commands."""
    body: Dict[str, object] = {
        "command": command,
        "status": status,
        "message": message,
        "timestamp": iso_timestamp(),
        "payload": payload or {},
    }
    if summary:
        body["summary"] = summary
    print(json.dumps(body, ensure_ascii=False, indent=2))
    return exit_code


def structured_error(command: str, message: str, *, payload: Optional[Dict] = None, status: str = "ERROR") -> int:
    """Short-hand for structured error responses."""
    return structured_response(command, status=status, message=message, payload=payload, exit_code=1)


def _style():
    return build_style(get_user_theme() or DEFAULT_THEME)


def print_lines(lines: List[Line], *, indent: int = 0) -> None:
    """Print a block of styled lines surrounded by blank lines.

    Each line is either plain text or a list of (style, text) fragments.
    """
    fragments: List[Fragment] = [("", "\n")]
    for line in lines:
        fragments.append(("", PADDING * (indent + 1)))
        if isinstance(line, str):
            fragments.append(("", line))
        else:
            fragments.extend(line)
        fragments.append(("", "\n"))
    print_formatted_text(FormattedText(fragments), style=_style(), file=sys.stdout)


def _send(prefix_style: str, message: str) -> None:
    print_lines([[(f"class:{prefix_style}", OUTPUT_PREFIX), ("", " " + message)]])


def send_success(message: str) -> None:
    _send("prefix", message)


def send_info(message: str) -> None:
    _send("prefix.info", message)


def send_error(message: str) -> None:
    _send("prefix.error", message)


__all__ = [
    "iso_timestamp",
    "structured_response",
    "structured_error",
    "print_lines",
    "send_success",
    "send_info",
    "send_error",
]
