"""Filesystem nodes for treewalk.

FileSystemNode wraps a file or directory path so the traversal engine can
walk a directory tree. Directories report HasChildren.MAYBE: they may be
empty or unreadable, and that is only discovered when they are listed.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from ..core.errors import ContractViolationError, ErrorKind, InvalidInputError, StorageError
from ..core.node import HasChildren, Node

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."

ErrorHook = Callable[[StorageError], None]


class FileSystemNode(Node):
    """Concrete node for a filesystem entry.

    Lightweight: the only thing looked up is whether the entry is a
    directory, and that is cached on first use so the label never changes
    during a traversal.
    """

    def __init__(self,
                 path: Union[str, Path],
                 is_dir: Optional[bool] = None,
                 follow_symlinks: bool = False,
                 on_error: Optional[ErrorHook] = None):
        """Initialize a filesystem node.

        Use from_path() to build a root node from user input; this
        constructor does not check that the path exists.

        Args:
            path: Path to the file or directory
            is_dir: Known directory flag, e.g. from a directory entry
            follow_symlinks: Treat links to directories as directories
            on_error: Called with a StorageError when listing fails;
                inherited by child nodes
        """
        self.path = Path(path) if isinstance(path, str) else path
        self.follow_symlinks = follow_symlinks
        self.on_error = on_error
        self._is_dir = is_dir

    @classmethod
    def from_path(cls,
                  path: Union[str, Path],
                  follow_symlinks: bool = False,
                  on_error: Optional[ErrorHook] = None) -> 'FileSystemNode':
        """Create a root node from a path, canonicalizing it first.

        Raises:
            InvalidInputError: If the path does not exist or cannot be resolved
        """
        try:
            resolved = Path(path).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise InvalidInputError(
                f"cannot access '{path}': {getattr(e, 'strerror', None) or e}",
                kind=ErrorKind.IO,
            ) from e
        # The root itself is always followed, even when it is a link.
        return cls(resolved, is_dir=resolved.is_dir(),
                   follow_symlinks=follow_symlinks, on_error=on_error)

    def is_dir(self) -> bool:
        if self._is_dir is None:
            try:
                if self.follow_symlinks:
                    self._is_dir = self.path.is_dir()
                else:
                    self._is_dir = not self.path.is_symlink() and self.path.is_dir()
            except OSError:
                self._is_dir = False
        return self._is_dir

    def links_to_dir(self) -> bool:
        """True for a symbolic link whose target is a directory."""
        try:
            return self.path.is_symlink() and self.path.is_dir()
        except OSError:
            return False

    def is_file(self) -> bool:
        return self.path.is_file()

    def is_hidden(self) -> bool:
        """Hidden entries are those whose name starts with a dot."""
        return self.path.name.startswith(HIDDEN_PREFIX)

    def render_label(self, full: bool = False) -> str:
        """Return the entry name, or the full path when full is True.

        Directories get a trailing slash either way.
        """
        label = str(self.path) if full else (self.path.name or str(self.path))
        if self.is_dir() and not label.endswith(os.sep):
            return label + "/"
        return label

    def may_have_children(self) -> HasChildren:
        return HasChildren.MAYBE if self.is_dir() else HasChildren.FALSE

    def children(self) -> Iterator['FileSystemNode']:
        """Lazily yield a node for each entry of this directory.

        An unreadable directory yields nothing. Entries that fail while
        listing are skipped.

        Raises:
            ContractViolationError: If this node is not a directory
        """
        if not self.is_dir():
            raise ContractViolationError(f"not a directory: {self.path}")
        return self._iter_entries()

    def _iter_entries(self) -> Iterator['FileSystemNode']:
        try:
            entries = os.scandir(self.path)
        except OSError as e:
            self._report(e)
            return

        with entries:
            while True:
                try:
                    entry = next(entries)
                except StopIteration:
                    break
                except OSError as e:
                    self._report(e)
                    break

                try:
                    is_dir = entry.is_dir(follow_symlinks=self.follow_symlinks)
                except OSError:
                    is_dir = False

                yield FileSystemNode(entry.path, is_dir=is_dir,
                                     follow_symlinks=self.follow_symlinks,
                                     on_error=self.on_error)

    def _report(self, error: OSError) -> None:
        logger.debug("Cannot list %s: %s", self.path, error)
        if self.on_error is not None:
            failure = StorageError(f"cannot open directory '{self.path}': {error.strerror or error}")
            failure.__cause__ = error
            self.on_error(failure)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileSystemNode):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"FileSystemNode(path={self.render_label(full=True)!r})"
