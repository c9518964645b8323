"""Navigation adapters for header trees.

Traversers never touch ``HeaderNode.children`` directly. They ask an
adapter, which lets the same traversal walk the full tree or only the
part a table is currently showing.
"""

from typing import Iterator, Optional

from .header import HeaderNode


class HeaderTreeAdapter:
    """Navigates every header, expanded or not."""

    def get_children(self, node: HeaderNode) -> Iterator[HeaderNode]:
        """Yield the nested columns of a header, in order.

        Args:
            node: The parent header

        Returns:
            Iterator over child headers (empty for a leaf)
        """
        return iter(node.children or ())

    def get_parent(self, node: HeaderNode) -> Optional[HeaderNode]:
        return node.parent

    def get_depth(self, node: HeaderNode) -> int:
        """Calculate the depth of a header, where a root is 0."""
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_siblings(self, node: HeaderNode) -> Iterator[HeaderNode]:
        """Get siblings of the given header (excluding the header itself)."""
        parent = self.get_parent(node)
        if parent is None:
            return
        for child in self.get_children(parent):
            if child is not node:
                yield child


class VisibleHeaderAdapter(HeaderTreeAdapter):
    """Adapter that hides the children of collapsed headers.

    Useful for walking exactly the subtree a table can reach by
    expansion state alone.
    """

    def get_children(self, node: HeaderNode) -> Iterator[HeaderNode]:
        if not node.children_expanded:
            return iter(())
        return super().get_children(node)
