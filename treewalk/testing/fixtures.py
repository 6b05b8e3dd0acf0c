"""Test fixtures for treewalk consumers.

StaticNode builds small in-memory trees, and RecordingVisitor records
every callback invocation so tests can assert on exact visit sequences.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from ..core.errors import ContractViolationError
from ..core.node import HasChildren, Node


class StaticNode(Node):
    """In-memory node with a fixed label and children.

    Children are kept in the order given, so tests can check that the
    traversal sorts them. The has_children classification defaults to
    TRUE when children are supplied and FALSE otherwise.

    Example:
        root = StaticNode("root", [
            StaticNode("b"),
            StaticNode("a", [StaticNode("a1")]),
        ])
    """

    def __init__(self,
                 label: str,
                 children: Optional[Sequence['StaticNode']] = None,
                 has_children: Optional[HasChildren] = None):
        self.label = label
        self._children = list(children or [])
        if has_children is None:
            has_children = HasChildren.TRUE if self._children else HasChildren.FALSE
        self.has_children = has_children
        self.children_calls = 0
        self.label_calls = 0

    def render_label(self) -> str:
        self.label_calls += 1
        return self.label

    def may_have_children(self) -> HasChildren:
        return self.has_children

    def children(self) -> Iterator['StaticNode']:
        if self.has_children is HasChildren.FALSE:
            raise ContractViolationError(f"{self.label} has no children")
        self.children_calls += 1
        return iter(self._children)


class RecordingVisitor:
    """Visitor that records (label, depth) for every call.

    The end-of-level call is recorded with a label of None.

    Args:
        stop_at: Labels for which the visitor returns False
    """

    def __init__(self, stop_at: Optional[Set[str]] = None):
        self.stop_at = set(stop_at or ())
        self.calls: List[Tuple[Optional[str], int]] = []

    def __call__(self, node: Optional[Node], depth: int) -> bool:
        label = None if node is None else node.render_label()
        self.calls.append((label, depth))
        return label not in self.stop_at

    @property
    def labels(self) -> List[str]:
        """Labels of real nodes in visit order, sentinels excluded."""
        return [label for label, _ in self.calls if label is not None]

    @property
    def depths(self) -> Dict[str, int]:
        return {label: depth for label, depth in self.calls if label is not None}
