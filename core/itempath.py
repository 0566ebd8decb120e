"""Slash-delimited item addresses.

``ContainerPath``: ``list`` or ``list/project``.
``TaskPath``: ``list/task`` or ``list/project/task``.

Numeric segments are user identifiers (see ``core.indexer``); parsed paths
hold zero-based positions. Parsing validates shape only, never existence.
"""

from dataclasses import dataclass
from typing import List, Optional

from .errors import InvalidPath, PathErrorReason
from .indexer import identifier_to_index, index_to_identifier, is_numeric

PATH_DIVISOR = "/"


def _split(source: str) -> List[str]:
    text = (source or "").strip().lower()
    if not text:
        raise InvalidPath(PathErrorReason.EMPTY, "Invalid path: empty path.")
    sections = text.split(PATH_DIVISOR)
    if not sections[0]:
        raise InvalidPath(PathErrorReason.EMPTY, "Invalid path: empty list name.")
    return sections


def parse_index(segment: str) -> int:
    """Decode a numeric path segment into a position."""
    if not is_numeric(segment):
        raise InvalidPath(PathErrorReason.BAD_INDEX, f"Invalid path: {segment!r} is not an index.")
    return identifier_to_index(segment)


@dataclass(frozen=True)
class ContainerPath:
    list_name: str
    project_index: Optional[int] = None

    @classmethod
    def parse(cls, source: str) -> "ContainerPath":
        sections = _split(source)
        if len(sections) > 2:
            raise InvalidPath(
                PathErrorReason.WRONG_SEGMENT_COUNT,
                "Invalid container path: unrecognized additional path section.",
            )
        project_index = parse_index(sections[1]) if len(sections) == 2 else None
        return cls(list_name=sections[0], project_index=project_index)

    def __str__(self) -> str:
        if self.project_index is None:
            return self.list_name
        return f"{self.list_name}{PATH_DIVISOR}{index_to_identifier(self.project_index)}"


@dataclass(frozen=True)
class TaskPath:
    list_name: str
    task_index: int
    project_index: Optional[int] = None

    @classmethod
    def parse(cls, source: str) -> "TaskPath":
        sections = _split(source)
        if len(sections) < 2:
            raise InvalidPath(
                PathErrorReason.WRONG_SEGMENT_COUNT,
                "Invalid task path: no task index provided.",
            )
        if len(sections) > 3:
            raise InvalidPath(
                PathErrorReason.WRONG_SEGMENT_COUNT,
                "Invalid task path: unrecognized additional path section.",
            )
        project_index = parse_index(sections[1]) if len(sections) == 3 else None
        return cls(list_name=sections[0], task_index=parse_index(sections[-1]), project_index=project_index)

    @property
    def container(self) -> ContainerPath:
        return ContainerPath(self.list_name, self.project_index)

    def __str__(self) -> str:
        return f"{self.container}{PATH_DIVISOR}{index_to_identifier(self.task_index)}"


__all__ = ["PATH_DIVISOR", "ContainerPath", "TaskPath", "parse_index"]
