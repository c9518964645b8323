"""Data collection strategies for HeaderTreeLib.

DataCollectors decide what to extract from each header during a walk,
so the same traversal can feed a layout engine, a debugging dump or a
custom report.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from .adapter import HeaderTreeAdapter
from .header import HeaderNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: Optional[HeaderTreeAdapter] = None):
        self.adapter = adapter or HeaderTreeAdapter()

    @abstractmethod
    def collect(self, node: HeaderNode, depth: int) -> Any:
        """Collect data from a header.

        Args:
            node: The header to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class CellCollector(DataCollector):
    """Collects the cell payload of each header."""

    def collect(self, node: HeaderNode, depth: int) -> Any:
        return node.cell


class AddressCollector(DataCollector):
    """Collects the address of each header."""

    def collect(self, node: HeaderNode, depth: int) -> List[int]:
        return node.address


class FullNodeCollector(DataCollector):
    """Returns the header itself."""

    def collect(self, node: HeaderNode, depth: int) -> HeaderNode:
        return node


class ColumnSpanCollector(DataCollector):
    """Collects everything a layout engine reads from a header.

    The values are a snapshot. They go stale on the next change
    notification and must be collected again.
    """

    def collect(self, node: HeaderNode, depth: int) -> Dict[str, Any]:
        return {
            'address': node.address,
            'depth': depth,
            'columns': node.columns_count,
            'visible_columns': node.visible_columns_count,
            'visible': node.visible,
            'expanded': node.children_expanded,
            'width': node.width,
        }


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function."""

    def __init__(self,
                 collect_func: Callable[[HeaderNode, int], Any],
                 adapter: Optional[HeaderTreeAdapter] = None):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> Any
            adapter: Navigation adapter
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: HeaderNode, depth: int) -> Any:
        return self.collect_func(node, depth)
