"""Configuration system for HeaderTreeLib.

This module defines how callers describe a walk over a header tree:
the traversal order, what data to collect from each header, which
headers to include and how deep to go.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Set, Any, Union


class DataRequirement(Enum):
    """Specifies what data is collected from each header."""
    CELL = "cell"                  # The header's cell payload
    ADDRESS = "address"            # Root-to-node index path
    COLUMN_SPAN = "column_span"    # Column counts, visibility and width
    FULL_NODE = "full"             # The HeaderNode itself
    CUSTOM = "custom"              # User-defined collection


class TraversalStrategy(Enum):
    """How to walk the header tree.

    Depth-first pre-order matches the left-to-right column order of a
    rendered table and is the default.
    """
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    LEVEL_ORDER = "level"           # Grouped by level


@dataclass
class FilterConfig:
    """Configuration for filtering headers during traversal."""

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    # Only walk into children of expanded headers and only yield
    # headers whose ``visible`` is True
    visible_only: bool = False

    def should_include(self, node) -> bool:
        """Check if a header should be yielded.

        Args:
            node: Header to check

        Returns:
            True if the header passes all filters
        """
        if self.visible_only and not node.visible:
            return False

        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return self.include_filter(node)

        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                          # Minimum depth to yield
    max_depth: Optional[int] = None             # Maximum depth to traverse
    specific_depths: Optional[Set[int]] = None  # Only these specific depths

    def should_yield(self, depth: int) -> bool:
        """Check if headers at this depth should be yielded."""
        if self.specific_depths is not None:
            return depth in self.specific_depths

        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False

        return True

    def validate(self) -> None:
        """Raise ValueError for an impossible depth range."""
        if self.min_depth < 0:
            raise ValueError(f"min_depth must be >= 0, got {self.min_depth}")
        if self.max_depth is not None and self.max_depth < self.min_depth:
            raise ValueError(
                f"max_depth ({self.max_depth}) is less than "
                f"min_depth ({self.min_depth})"
            )


@dataclass
class TraversalConfig:
    """Complete description of a walk over a header tree."""

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    data_requirements: DataRequirement = DataRequirement.FULL_NODE
    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Only used with DataRequirement.CUSTOM
    custom_collector: Optional[Callable[[Any, int], Any]] = None

    def validate(self) -> None:
        """Check the configuration is usable.

        Raises:
            ValueError: If the configuration is inconsistent
        """
        self.depth.validate()
        if (self.data_requirements == DataRequirement.CUSTOM
                and self.custom_collector is None):
            raise ValueError("DataRequirement.CUSTOM requires custom_collector")

    @classmethod
    def visible_columns(cls) -> "TraversalConfig":
        """Walk only the headers currently shown, in column order."""
        return cls(filter=FilterConfig(visible_only=True))


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    key = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if key in strategy_map:
        return strategy_map[key]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
