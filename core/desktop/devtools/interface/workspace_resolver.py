from pathlib import Path
import os

from config import get_use_global

WORKSPACE_FILENAME = ".gtd.yaml"


def global_workspace_file() -> Path:
    return (Path.home() / WORKSPACE_FILENAME).resolve()


def local_workspace_file(root: Path | None = None) -> Path:
    return ((root or Path.cwd()) / WORKSPACE_FILENAME).resolve()


def get_workspace_file(use_global: bool | None = None, root: Path | None = None) -> Path:
    """Unified resolver for the workspace file.

    Priority:
    1. GTD_WORKSPACE_FILE env variable (for tests).
    2. Global (~/.gtd.yaml) when use_global=True, or when the user config
       sets ``use_global`` and no explicit choice was made.
    3. Local .gtd.yaml in ``root`` (defaults to the current directory).
    """
    env_file = os.environ.get("GTD_WORKSPACE_FILE")
    if env_file:
        return Path(env_file).expanduser().resolve()

    if use_global is None:
        use_global = get_use_global()
    if use_global:
        return global_workspace_file()
    return local_workspace_file(root)


__all__ = ["WORKSPACE_FILENAME", "get_workspace_file", "global_workspace_file", "local_workspace_file"]
