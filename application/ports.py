from pathlib import Path
from typing import Protocol

from core import Workspace


class WorkspaceRepository(Protocol):
    path: Path

    def exists(self) -> bool:
        ...

    def load(self) -> Workspace:
        ...

    def save(self, workspace: Workspace) -> None:
        ...
