"""Core abstractions for HeaderTreeLib.

This module contains the header tree model and the building blocks
used to walk it.
"""

from .notifier import ChangeNotifier
from .header import HeaderNode, HeaderRow
from .adapter import HeaderTreeAdapter, VisibleHeaderAdapter
from .traverser import TreeTraverser
from .collector import DataCollector

__all__ = [
    "ChangeNotifier",
    "HeaderNode",
    "HeaderRow",
    "HeaderTreeAdapter",
    "VisibleHeaderAdapter",
    "TreeTraverser",
    "DataCollector",
]
