"""Testing utilities for treewalk.

Provides in-memory nodes and a recording visitor for use in test suites,
without requiring a real filesystem.
"""

from .fixtures import StaticNode, RecordingVisitor

__all__ = ["StaticNode", "RecordingVisitor"]
