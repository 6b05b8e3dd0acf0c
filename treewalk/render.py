"""Printing policy for directory trees.

Everything the command shows or hides is decided here, inside the visitor
callback handed to recurse(). The engine only reports nodes and depths.
"""

import logging
from typing import Callable, Optional

from .adapters.filesystem import FileSystemNode
from .config import TreeConfig

logger = logging.getLogger(__name__)


class TreePrinter:
    """Visitor that emits one indented line per visible node.

    Rules, applied in order:
    - a node deeper than max_depth stops its level
    - while inside a hidden directory that was not shown, nothing is emitted
    - with directories_only, non-directories are skipped
    - without show_hidden, hidden entries are skipped; a hidden directory
      also hides everything beneath it
    Skipped nodes still return True so their siblings are visited.

    Args:
        config: What to show
        emit: Receives each rendered line (defaults to print)
    """

    def __init__(self, config: TreeConfig, emit: Optional[Callable[[str], None]] = None):
        self.config = config
        self.emit = emit or print
        self.lines_emitted = 0
        self._hidden_depth: Optional[int] = None

    def __call__(self, node: Optional[FileSystemNode], depth: int) -> bool:
        if node is None:
            return True

        if depth == 0:
            self._hidden_depth = None

        if not self.config.should_print_depth(depth):
            return False

        if self._hidden_depth is not None:
            if depth > self._hidden_depth:
                return True
            self._hidden_depth = None

        if self.config.directories_only and not (node.is_dir() or node.links_to_dir()):
            return True

        # The root is always shown, even if its own name is dotted.
        if depth > 0 and not self.config.show_hidden and node.is_hidden():
            if node.is_dir():
                self._hidden_depth = depth
            return True

        self.emit(self.format(node, depth))
        self.lines_emitted += 1
        return True

    def format(self, node: FileSystemNode, depth: int) -> str:
        label = node.render_label(full=self.config.full_path)
        return f"{self.config.indent * depth}{label}"
