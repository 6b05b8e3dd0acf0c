"""treewalk - generic depth-first tree traversal.

treewalk walks any tree whose nodes can render a label, say whether they
may have children, and produce those children on demand. Siblings are
always visited in label order, and a visitor callback decides at every
step whether the current level continues.

    from treewalk import FileSystemNode, recurse

    root = FileSystemNode.from_path(".")
    recurse(root, lambda node, depth: print(depth, node) or True)
"""

__version__ = "0.2.0"

from .core import (
    Node,
    HasChildren,
    recurse,
    sorted_children,
    AbortSignal,
    ErrorKind,
    TreeError,
    InvalidInputError,
    StorageError,
    ContractViolationError,
)
from .adapters.filesystem import FileSystemNode
from .config import TreeConfig
from .render import TreePrinter
from .api import collect_nodes, count_nodes

__all__ = [
    "__version__",
    # Core
    "Node",
    "HasChildren",
    "recurse",
    "sorted_children",
    "AbortSignal",
    # Errors
    "ErrorKind",
    "TreeError",
    "InvalidInputError",
    "StorageError",
    "ContractViolationError",
    # Filesystem
    "FileSystemNode",
    # Printing
    "TreeConfig",
    "TreePrinter",
    # API
    "collect_nodes",
    "count_nodes",
]
