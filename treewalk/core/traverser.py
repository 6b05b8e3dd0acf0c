"""Depth-first traversal for treewalk.

recurse() walks any Node tree in pre-order, visiting siblings sorted by
label and handing every visit to a caller-supplied callback. The callback
decides whether the walk continues at the current level.
"""

import logging
from typing import Callable, Iterator, List, Optional, TypeVar

from .node import Node

logger = logging.getLogger(__name__)

N = TypeVar('N', bound=Node)

# Receives (node, depth). node is None once a level has no more siblings.
# Returning False stops the current level.
Visitor = Callable[[Optional[N], int], bool]


class AbortSignal:
    """Cooperative flag for aborting a whole traversal.

    Returning False from a visitor only stops the level it was called for.
    To stop everything, pass an AbortSignal to recurse() and set it from
    inside the visitor; the walk checks it before every visit.

    Example:
        >>> signal = AbortSignal()
        >>> def visit(node, depth):
        ...     if node is not None and node.render_label() == "target":
        ...         signal.set()
        ...     return True
        >>> recurse(root, visit, abort=signal)
    """

    def __init__(self):
        self._aborted = False

    def set(self) -> None:
        """Request that the traversal stop."""
        self._aborted = True

    def clear(self) -> None:
        """Reset the signal so it can be reused."""
        self._aborted = False

    def is_set(self) -> bool:
        return self._aborted

    def __repr__(self) -> str:
        return f"AbortSignal(aborted={self._aborted})"


class _Level:
    """One level of the walk: the sorted children of a node and their depth."""

    __slots__ = ('pending', 'depth')

    def __init__(self, parent: Node, depth: int):
        self.pending: Iterator[Node] = iter(sorted_children(parent))
        self.depth = depth


def sorted_children(node: N) -> List[N]:
    """Materialize a node's children and sort them by label.

    children() is not guaranteed to be restartable or ordered, so it is
    drained into a list once. The sort is stable, so equal labels keep
    their enumeration order.

    Args:
        node: Node to enumerate; must not report HasChildren.FALSE

    Returns:
        List of children in ascending label order
    """
    return sorted(node.children(), key=lambda child: child.render_label())


def recurse(root: N, visit: Visitor, abort: Optional[AbortSignal] = None) -> None:
    """Walk a tree depth-first, siblings in ascending label order.

    The root is visited at depth 0. If that visit returns False, or the root
    reports HasChildren.FALSE, nothing else happens. Otherwise each level is
    handled the same way:

    1. children() is drained and sorted by render_label()
    2. each child is visited at the parent's depth + 1; if the visit returns
       False the rest of this level is skipped, including descent into that
       child, and the walk resumes in the parent level
    3. a child whose may_have_children() is not FALSE is descended into
       before its next sibling is visited
    4. after the last child, visit(None, depth) marks the end of the level

    Nodes reporting HasChildren.FALSE are never asked for children.

    Args:
        root: Node to start from
        visit: Callback receiving (node or None, depth) and returning
            True to continue or False to stop the current level
        abort: Optional signal that ends the entire walk once set
    """
    if not visit(root, 0) or root.may_have_children().is_leaf:
        return

    # Explicit stack instead of Python recursion so deep trees are not
    # limited by sys.getrecursionlimit().
    stack: List[_Level] = []
    if _aborted(abort, stack):
        return
    stack.append(_Level(root, 1))

    while stack:
        if _aborted(abort, stack):
            return

        level = stack[-1]
        child = next(level.pending, None)

        if not visit(child, level.depth) or child is None:
            stack.pop()
            continue

        if child.may_have_children().is_leaf:
            continue

        # The visit above may have set the signal.
        if _aborted(abort, stack):
            return
        stack.append(_Level(child, level.depth + 1))


def _aborted(abort: Optional[AbortSignal], stack: List[_Level]) -> bool:
    if abort is None or not abort.is_set():
        return False
    logger.debug("Traversal aborted with %d open levels", len(stack))
    return True
