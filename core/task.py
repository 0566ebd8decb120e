from dataclasses import dataclass, field
from typing import List, Optional

from .errors import AlreadyExists, NotFound
from .status import TaskStatus


@dataclass
class Task:
    name: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    contexts: List[str] = field(default_factory=list)

    @property
    def done(self) -> bool:
        return self.status is TaskStatus.DONE

    def has_context(self, name: str) -> bool:
        return name in self.contexts

    def add_context(self, name: str) -> None:
        if self.has_context(name):
            raise AlreadyExists("context", name)
        self.contexts.append(name)

    def remove_context(self, name: str) -> None:
        if not self.has_context(name):
            raise NotFound("context", repr(name))
        self.contexts.remove(name)
