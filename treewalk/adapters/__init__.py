"""Concrete node implementations."""

from .filesystem import FileSystemNode

__all__ = ["FileSystemNode"]
