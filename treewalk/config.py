"""Configuration for the treewalk command.

TreeConfig captures what the user asked to print. It is consumed by the
TreePrinter visitor; the traversal engine never sees it.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union


DEFAULT_INDENT = "  "


@dataclass
class TreeConfig:
    """Options controlling how a directory tree is printed."""

    directory: Union[str, Path] = "."
    show_hidden: bool = False          # -a
    directories_only: bool = False     # -d
    full_path: bool = False            # -f
    follow_symlinks: bool = False      # -l
    max_depth: Optional[int] = None    # -L, None = unlimited
    indent: str = DEFAULT_INDENT
    verbose: bool = False

    def should_print_depth(self, depth: int) -> bool:
        """Check if nodes at this depth are within the configured limit."""
        return self.max_depth is None or depth <= self.max_depth

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_depth is not None and self.max_depth < 0:
            errors.append("max_depth cannot be negative")

        if not self.indent:
            errors.append("indent cannot be empty")

        if not str(self.directory):
            errors.append("directory is required")

        return errors
