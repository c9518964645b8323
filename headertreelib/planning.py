"""Execution planning for HeaderTreeLib.

The ExecutionPlan turns a TraversalConfig into the adapter, traverser
and collector that carry out a walk, and applies the configured filters.
"""

import logging
from typing import Any, Dict, Iterator, Tuple

from .config import DataRequirement, TraversalConfig, TraversalStrategy
from .core.adapter import HeaderTreeAdapter, VisibleHeaderAdapter
from .core.collector import (
    AddressCollector,
    CellCollector,
    ColumnSpanCollector,
    CustomCollector,
    DataCollector,
    FullNodeCollector,
)
from .core.header import HeaderNode
from .core.traverser import TreeTraverser, create_traverser

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for a header tree walk.

    Args:
        config: Traversal configuration

    Raises:
        ValueError: If the configuration is inconsistent
    """

    def __init__(self, config: TraversalConfig):
        config.validate()
        self.config = config
        self.adapter = self._select_adapter()
        self.traverser = self._select_traverser()
        self.collector = self._select_collector()
        self.nodes_processed = 0

    def _select_adapter(self) -> HeaderTreeAdapter:
        if self.config.filter.visible_only:
            return VisibleHeaderAdapter()
        return HeaderTreeAdapter()

    def _select_traverser(self) -> TreeTraverser:
        strategy_map = {
            TraversalStrategy.BREADTH_FIRST: "bfs",
            TraversalStrategy.DEPTH_FIRST_PRE: "dfs_pre",
            TraversalStrategy.DEPTH_FIRST_POST: "dfs_post",
            TraversalStrategy.LEVEL_ORDER: "level",
        }
        return create_traverser(strategy_map[self.config.strategy], self.adapter)

    def _select_collector(self) -> DataCollector:
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return CustomCollector(self.config.custom_collector, self.adapter)

        collector_map = {
            DataRequirement.CELL: CellCollector,
            DataRequirement.ADDRESS: AddressCollector,
            DataRequirement.COLUMN_SPAN: ColumnSpanCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
        }
        return collector_map[self.config.data_requirements](self.adapter)

    def execute(self, root: HeaderNode) -> Iterator[Tuple[HeaderNode, Any]]:
        """Walk the tree from root.

        Args:
            root: Header to start from

        Yields:
            Tuples of (header, collected_data)
        """
        self.nodes_processed = 0
        logger.debug("Executing plan %s from %r", self.get_summary(), root)

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            if not self.config.filter.should_include(node):
                continue
            if not self.config.depth.should_yield(depth):
                continue

            data = self.collector.collect(node, depth)
            self.nodes_processed += 1
            yield (node, data)

    def get_summary(self) -> Dict[str, Any]:
        """Describe the plan, for debugging and logging."""
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'visible_only': self.config.filter.visible_only,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
