"""Core abstractions for treewalk.

This package contains the node contract, the traversal algorithm and the
error types. It performs no I/O of its own.
"""

from .node import Node, HasChildren
from .traverser import recurse, sorted_children, AbortSignal, Visitor
from .errors import (
    ErrorKind,
    TreeError,
    InvalidInputError,
    StorageError,
    ContractViolationError,
)

__all__ = [
    "Node",
    "HasChildren",
    "recurse",
    "sorted_children",
    "AbortSignal",
    "Visitor",
    "ErrorKind",
    "TreeError",
    "InvalidInputError",
    "StorageError",
    "ContractViolationError",
]
