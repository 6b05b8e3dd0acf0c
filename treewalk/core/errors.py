"""Error taxonomy for treewalk.

The traversal algorithm itself never fails. Errors surface either when a
root node is constructed from bad input, or inside a node implementation.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Broad category of a TreeError."""
    INVALID_DATA = "InvalidData"
    IO = "Io"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


class TreeError(Exception):
    """Base class for all treewalk errors.

    Args:
        kind: Category of the error
        message: Optional human-readable message; falls back to the kind
    """

    default_kind = ErrorKind.OTHER

    def __init__(self, message: Optional[str] = None, kind: Optional[ErrorKind] = None):
        self.kind = kind or self.default_kind
        self.message = message
        super().__init__(message if message is not None else str(self.kind))

    def __str__(self) -> str:
        if self.message is not None:
            return self.message
        return str(self.kind)


class InvalidInputError(TreeError):
    """Raised when a supplied value cannot be resolved into a root node."""
    default_kind = ErrorKind.INVALID_DATA


class StorageError(TreeError):
    """An underlying child enumeration attempt failed.

    Node implementations record these instead of propagating them, so an
    unreadable container looks like an empty one.
    """
    default_kind = ErrorKind.IO


class ContractViolationError(TreeError, RuntimeError):
    """A node was asked for children after reporting it has none.

    This is a programming error and is never handled by library code.
    """
    default_kind = ErrorKind.OTHER
