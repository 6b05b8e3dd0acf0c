"""Command-line interface for treewalk.

Usage:
    treewalk DIRECTORY            # Print the tree under DIRECTORY
    treewalk DIRECTORY -L 2       # Only two levels below the root
    treewalk DIRECTORY -a -f      # Include hidden entries, full paths
    treewalk DIRECTORY -l         # Descend into symlinked directories
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .adapters.filesystem import FileSystemNode
from .config import TreeConfig
from .core.errors import StorageError, TreeError
from .core.traverser import recurse
from .render import TreePrinter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treewalk",
        description="Print a tree of directories and files.",
    )
    parser.add_argument("directory", help="Root directory to print")
    parser.add_argument("-a", dest="show_hidden", action="store_true",
                        help="Show hidden directories and files")
    parser.add_argument("-d", dest="directories_only", action="store_true",
                        help="Show only directories")
    parser.add_argument("-f", dest="full_path", action="store_true",
                        help="Print the full path")
    parser.add_argument("-l", dest="follow_symlinks", action="store_true",
                        help="Follow symbolic links to directories")
    parser.add_argument("-L", dest="max_depth", type=int, metavar="LEVEL",
                        help="The maximum depth to recurse")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log unreadable directories and other details to stderr")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def parse_config(argv: Optional[List[str]] = None) -> TreeConfig:
    """Parse command-line arguments into a validated TreeConfig."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = TreeConfig(
        directory=args.directory,
        show_hidden=args.show_hidden,
        directories_only=args.directories_only,
        full_path=args.full_path,
        follow_symlinks=args.follow_symlinks,
        max_depth=args.max_depth,
        verbose=args.verbose,
    )

    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))
    return config


def _log_storage_error(error: StorageError) -> None:
    logger.warning("%s", error)


def run(config: TreeConfig) -> int:
    """Print the tree described by config to stdout.

    Returns:
        Process exit code
    """
    try:
        root = FileSystemNode.from_path(
            config.directory,
            follow_symlinks=config.follow_symlinks,
            on_error=_log_storage_error,
        )
    except TreeError as e:
        print(f"treewalk: {e}", file=sys.stderr)
        return 1

    printer = TreePrinter(config)
    recurse(root, printer)
    logger.debug("Printed %d entries under %s", printer.lines_emitted, root.path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_config(argv)

    # Unreadable directories are reported only with --verbose.
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.ERROR,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
