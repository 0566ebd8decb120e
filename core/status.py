from enum import Enum
from typing import Final

from .errors import InvalidInput


class TaskStatus(Enum):
    TODO = ("TODO", "status.todo", "○")
    DONE = ("DONE", "status.done", "✓")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]

    @property
    def icon(self) -> str:
        return self.value[2]

    @classmethod
    def from_string(cls, value: str) -> "TaskStatus":
        code = normalize_task_status(value)
        for status in cls:
            if status.code == code:
                return status
        raise InvalidInput(f"Invalid task status: {value!r} (expected TODO or DONE).")

    def toggled(self) -> "TaskStatus":
        return TaskStatus.TODO if self is TaskStatus.DONE else TaskStatus.DONE


_ALIASES: Final[dict[str, str]] = {"OPEN": "TODO", "PENDING": "TODO", "COMPLETE": "DONE", "COMPLETED": "DONE", "OK": "DONE"}


def normalize_task_status(value: str) -> str:
    """Normalize task status input to an upper-case token.

    Canonical task statuses: TODO, DONE. A few common aliases are accepted
    (open/pending -> TODO, complete/ok -> DONE). Anything else comes back
    uppercased with spaces turned into underscores; callers decide whether
    that is an error.
    """
    token = (value or "").strip().upper().replace(" ", "_")
    return _ALIASES.get(token, token)
