from .errors import (
    GTDError,
    PathErrorReason,
    InvalidPath,
    InvalidIdentifier,
    NotFound,
    AlreadyExists,
    InvalidInput,
    WorkspaceFileError,
)
from .status import TaskStatus, normalize_task_status
from .indexer import index_to_identifier, identifier_to_index
from .itempath import ContainerPath, TaskPath
from .task import Task
from .gtd_models import Project, TaskList, Workspace
from .containers import TaskContainer, ProjectContainer, ListContainer

__all__ = [
    # Errors
    "GTDError",
    "PathErrorReason",
    "InvalidPath",
    "InvalidIdentifier",
    "NotFound",
    "AlreadyExists",
    "InvalidInput",
    "WorkspaceFileError",
    # Addressing
    "index_to_identifier",
    "identifier_to_index",
    "ContainerPath",
    "TaskPath",
    # Entities
    "TaskStatus",
    "normalize_task_status",
    "Task",
    "Project",
    "TaskList",
    "Workspace",
    # Capabilities
    "TaskContainer",
    "ProjectContainer",
    "ListContainer",
]
