import logging
import os
import tempfile
from pathlib import Path

from core import NotFound, Workspace
from application.ports import WorkspaceRepository
from infrastructure.workspace_file_parser import WorkspaceFileParser

logger = logging.getLogger("gtd.storage")


class FileWorkspaceRepository(WorkspaceRepository):
    def __init__(self, path: Path | None = None):
        if path is None:
            from core.desktop.devtools.interface.workspace_resolver import get_workspace_file
            self.path = get_workspace_file()
        else:
            self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Workspace:
        """Read the workspace file; a missing file is reported as NotFound."""
        if not self.exists():
            raise NotFound(
                "workspace",
                str(self.path),
                f"No workspace at {self.path}. Run `gtd init` first.",
            )
        workspace = WorkspaceFileParser.parse(self.path)
        logger.debug("loaded %d lists from %s", len(workspace.lists), self.path)
        return workspace

    def save(self, workspace: Workspace) -> None:
        """Write the workspace through a temp file so readers never see a partial document."""
        content = WorkspaceFileParser.to_file_content(workspace)
        target = self.path.resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                delete=False,
                dir=str(target.parent),
                prefix=f".{target.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
                tmp_path = Path(tmp.name)
            os.replace(str(tmp_path), str(target))
        finally:
            if tmp_path and tmp_path.exists() and tmp_path != target:
                try:
                    tmp_path.unlink()
                except OSError:
                    pass
        logger.debug("saved %d lists to %s", len(workspace.lists), target)
