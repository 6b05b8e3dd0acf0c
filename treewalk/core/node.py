"""Node abstraction for treewalk.

A Node is anything that can describe itself with a label and produce its
children on demand. The traversal engine knows nothing else about it:
filesystem entries, parsed documents or in-memory structures all walk the
same way.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator


class HasChildren(Enum):
    """Whether a node can possibly have children.

    FALSE nodes are never asked for children. MAYBE nodes are asked, and an
    empty answer is treated like FALSE. TRUE nodes definitely have at least
    one child.
    """
    FALSE = "false"
    MAYBE = "maybe"
    TRUE = "true"

    @property
    def is_leaf(self) -> bool:
        """True only for FALSE; MAYBE still has to be descended into."""
        return self is HasChildren.FALSE


class Node(ABC):
    """Abstract base class for anything the traverser can walk.

    Implementations provide exactly three things:

    - render_label(): a side-effect free description, used both for display
      and as the sort key among siblings. It must not change while a
      traversal is running.
    - may_have_children(): a cheap classification that must not enumerate.
    - children(): a fresh, single-pass iterator of child nodes of the same
      type. It may re-enumerate on every call.

    Children are not retained by their parent; each call to children()
    produces new nodes.
    """

    @abstractmethod
    def render_label(self) -> str:
        """Return the display label of this node."""
        pass

    def may_have_children(self) -> HasChildren:
        """Classify whether this node can have children.

        Leaves are the common case, so the default is FALSE.
        """
        return HasChildren.FALSE

    @abstractmethod
    def children(self) -> Iterator['Node']:
        """Produce the child nodes of this node.

        Calling this on a node whose may_have_children() is FALSE is a
        contract violation; implementations should raise
        ContractViolationError.

        Returns:
            A finite, possibly empty, possibly lazy iterator of nodes
        """
        pass

    def __str__(self) -> str:
        """String representation is the label."""
        return self.render_label()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(label={self.render_label()!r})"
