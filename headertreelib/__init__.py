"""HeaderTreeLib - Observable header trees for expandable tables.

HeaderTreeLib models the column headers of a table whose columns can
nest sub-columns. Any header can be expanded or collapsed, and every
header reports whether it is visible, where it sits in the tree and how
many columns it spans. Changes anywhere in the tree are reported to
listeners attached above them.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from headertreelib import HeaderNode

    totals = HeaderNode("Totals", children=[HeaderNode("Q1"), HeaderNode("Q2")])
    totals.add_listener(relayout)
    totals.toggle_expand()
━━━━━━━━━━━━━━━━━━━━━━━━━━

Layout, rendering and input handling are left to the table that reads
the tree.
"""

__version__ = "0.1.0"

from .core.notifier import ChangeNotifier
from .core.header import HeaderNode, HeaderRow
from .core.adapter import HeaderTreeAdapter, VisibleHeaderAdapter
from .core.traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    CellCollector,
    AddressCollector,
    FullNodeCollector,
    ColumnSpanCollector,
    CustomCollector,
)
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
)
from .planning import ExecutionPlan
from .errors import HeaderTreeError, NotifierDisposedError, AddressLookupError
from .api import (
    traverse_headers,
    collect_header_data,
    count_headers,
    find_headers,
    get_leaf_headers,
    get_visible_headers,
    get_header_addresses,
    find_by_address,
    expand_all,
    collapse_all,
    reveal,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'ChangeNotifier',
    'HeaderNode',
    'HeaderRow',
    'HeaderTreeAdapter',
    'VisibleHeaderAdapter',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'DataCollector',
    'CellCollector',
    'AddressCollector',
    'FullNodeCollector',
    'ColumnSpanCollector',
    'CustomCollector',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
    'ExecutionPlan',
    # Errors
    'HeaderTreeError',
    'NotifierDisposedError',
    'AddressLookupError',
    # API
    'traverse_headers',
    'collect_header_data',
    'count_headers',
    'find_headers',
    'get_leaf_headers',
    'get_visible_headers',
    'get_header_addresses',
    'find_by_address',
    'expand_all',
    'collapse_all',
    'reveal',
    'get_tree_stats',
]
