"""Failure taxonomy for the addressing and container engine.

Every accessor and operation in ``core`` and the manager layer signals
failure through one of these types. The interface layer catches ``GTDError``
and reports ``code`` + message; nothing else is raised for user input.
"""

from enum import Enum
from typing import Optional


class GTDError(Exception):
    """Base class for all domain errors."""

    code = "error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class PathErrorReason(Enum):
    EMPTY = "empty"
    WRONG_SEGMENT_COUNT = "wrong_segment_count"
    BAD_INDEX = "bad_index"


class InvalidPath(GTDError):
    """Malformed address string."""

    code = "invalid_path"

    def __init__(self, reason: PathErrorReason, message: str = ""):
        super().__init__(message or f"Invalid path: {reason.value.replace('_', ' ')}.")
        self.reason = reason


class InvalidIdentifier(GTDError):
    """Identifier string does not decode to a valid position."""

    code = "invalid_identifier"

    def __init__(self, identifier: str, message: str = ""):
        super().__init__(message or f"Invalid identifier: {identifier!r}.")
        self.identifier = identifier


class NotFound(GTDError):
    code = "not_found"

    def __init__(self, kind: str, ref: str, message: str = ""):
        super().__init__(message or f"{kind.capitalize()} {ref} not found.")
        self.kind = kind
        self.ref = ref


class AlreadyExists(GTDError):
    code = "already_exists"

    def __init__(self, kind: str, name: str, message: str = ""):
        super().__init__(message or f"{kind.capitalize()} {name!r} already exists.")
        self.kind = kind
        self.name = name


class InvalidInput(GTDError):
    """Well-formed request with a disallowed shape (e.g. project into project)."""

    code = "invalid_input"


class WorkspaceFileError(GTDError):
    """Workspace file could not be read or does not match the expected shape."""

    code = "workspace_file"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


__all__ = [
    "GTDError",
    "PathErrorReason",
    "InvalidPath",
    "InvalidIdentifier",
    "NotFound",
    "AlreadyExists",
    "InvalidInput",
    "WorkspaceFileError",
]
