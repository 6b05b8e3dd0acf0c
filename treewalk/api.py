"""High-level API for treewalk.

Small functional helpers for the common cases, built only on recurse().
"""

from typing import List, Optional, Tuple

from .core.node import Node
from .core.traverser import recurse


def collect_nodes(root: Node, max_depth: Optional[int] = None) -> List[Tuple[Node, int]]:
    """Collect every visited node with its depth, in visit order.

    Args:
        root: Starting node
        max_depth: Deepest level to include (None = unlimited)

    Returns:
        List of (node, depth) tuples, root first

    Example:
        >>> root = FileSystemNode.from_path("/home/user")
        >>> for node, depth in collect_nodes(root, max_depth=1):
        ...     print("  " * depth + node.render_label())
    """
    visited: List[Tuple[Node, int]] = []

    def visit(node: Optional[Node], depth: int) -> bool:
        if node is None:
            return True
        if max_depth is not None and depth > max_depth:
            return False
        visited.append((node, depth))
        return True

    recurse(root, visit)
    return visited


def count_nodes(root: Node, max_depth: Optional[int] = None) -> int:
    """Count nodes in the tree, including the root."""
    return len(collect_nodes(root, max_depth=max_depth))
