"""Testing utilities for HeaderTreeLib consumers."""

from .fixtures import ListenerRecorder, build_header_tree

__all__ = ['ListenerRecorder', 'build_header_tree']
