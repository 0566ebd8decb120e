"""Position <-> identifier codec.

Positions are zero-based slots in an owning sequence. Identifiers are the
one-based strings users see and type back in paths.
"""

import re

from .errors import InvalidIdentifier

_DIGITS = re.compile(r"[0-9]+")


def index_to_identifier(index: int) -> str:
    if index < 0:
        raise InvalidIdentifier(str(index), f"Position {index} has no identifier.")
    return str(index + 1)


def identifier_to_index(identifier: str) -> int:
    if not _DIGITS.fullmatch(identifier or ""):
        raise InvalidIdentifier(identifier)
    value = int(identifier)
    if value < 1:
        raise InvalidIdentifier(identifier, f"Invalid identifier: {identifier!r} (numbering starts at 1).")
    return value - 1


def is_numeric(segment: str) -> bool:
    """True when the segment is a plain non-negative decimal integer."""
    return bool(_DIGITS.fullmatch(segment or ""))


__all__ = ["index_to_identifier", "identifier_to_index", "is_numeric"]
