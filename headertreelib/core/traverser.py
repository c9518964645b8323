"""Tree traversal strategies for HeaderTreeLib.

Traversers implement different orders for walking a header tree. They
navigate through a HeaderTreeAdapter, so the same algorithm can walk the
whole tree or only its expanded part.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Set, Tuple

from .adapter import HeaderTreeAdapter
from .header import HeaderNode


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    Headers are tracked by identity, so a header reachable twice (a
    contract violation) is still only yielded once.
    """

    def __init__(self, adapter: Optional[HeaderTreeAdapter] = None):
        self.adapter = adapter or HeaderTreeAdapter()

    @abstractmethod
    def traverse(self,
                 root: HeaderNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[HeaderNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting header
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding headers

        Yields:
            Tuples of (header, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Visits all headers at depth N before those at depth N+1."""

    def traverse(self,
                 root: HeaderNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[HeaderNode, int]]:
        queue: Deque[Tuple[HeaderNode, int]] = deque([(root, 0)])
        visited: Set[int] = set()

        while queue:
            node, depth = queue.popleft()

            if id(node) in visited:
                continue
            visited.add(id(node))

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Visits a header before its nested columns.

    This is the left-to-right order in which a table lays out columns.
    """

    def traverse(self,
                 root: HeaderNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[HeaderNode, int]]:
        visited: Set[int] = set()

        def _traverse_recursive(node: HeaderNode, depth: int) -> Iterator[Tuple[HeaderNode, int]]:
            if id(node) in visited:
                return
            visited.add(id(node))

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    yield from _traverse_recursive(child, depth + 1)

        yield from _traverse_recursive(root, 0)


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Visits nested columns before the header that owns them."""

    def traverse(self,
                 root: HeaderNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[HeaderNode, int]]:
        visited: Set[int] = set()

        def _traverse_recursive(node: HeaderNode, depth: int) -> Iterator[Tuple[HeaderNode, int]]:
            if id(node) in visited:
                return
            visited.add(id(node))

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    yield from _traverse_recursive(child, depth + 1)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal that completes each level before the next.

    Handy for building one header row per nesting level.
    """

    def traverse(self,
                 root: HeaderNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[HeaderNode, int]]:
        current_level: List[HeaderNode] = [root]
        current_depth = 0
        visited: Set[int] = set()

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[HeaderNode] = []

            for node in current_level:
                if id(node) in visited:
                    continue
                visited.add(id(node))

                if self._should_yield(current_depth, min_depth, max_depth):
                    yield (node, current_depth)

                if self._should_explore(current_depth, max_depth):
                    next_level.extend(self.adapter.get_children(node))

            current_level = next_level
            current_depth += 1


def create_traverser(strategy: str,
                     adapter: Optional[HeaderTreeAdapter] = None) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, dfs_post, level)
        adapter: Navigation adapter (defaults to the full-tree adapter)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
