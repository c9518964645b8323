"""High-level API for HeaderTreeLib.

Simple functions for the things a table does with its header tree:
walking it in column order, finding headers, resolving addresses and
expanding or collapsing whole subtrees. They wrap the configuration and
planning classes for the common cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .config import (
    DataRequirement,
    DepthConfig,
    FilterConfig,
    TraversalConfig,
    TraversalStrategy,
    parse_strategy,
)
from .core.header import HeaderNode, HeaderRow
from .errors import AddressLookupError
from .planning import ExecutionPlan


def traverse_headers(
    root: HeaderNode,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[HeaderNode], bool]] = None,
    exclude_filter: Optional[Callable[[HeaderNode], bool]] = None,
    visible_only: bool = False,
) -> Iterator[HeaderNode]:
    """Walk a header tree.

    Args:
        root: Starting header
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding headers
        include_filter: Predicate a header must satisfy to be yielded
        exclude_filter: Predicate that rejects a header
        visible_only: Skip collapsed subtrees and hidden headers

    Yields:
        Headers that match the criteria

    Example:
        >>> for header in traverse_headers(root, visible_only=True):
        ...     print(header.cell, header.address)
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
            visible_only=visible_only,
        ),
    )
    for node, _ in ExecutionPlan(config).execute(root):
        yield node


def collect_header_data(
    root: HeaderNode,
    data_requirement: DataRequirement = DataRequirement.COLUMN_SPAN,
    custom_collector: Optional[Callable[[HeaderNode, int], Any]] = None,
    **kwargs
) -> Iterator[Tuple[HeaderNode, Any]]:
    """Walk a header tree and collect data from each header.

    Args:
        root: Starting header
        data_requirement: What data to collect
        custom_collector: Function(node, depth) used with DataRequirement.CUSTOM
        **kwargs: Traversal options (see traverse_headers)

    Yields:
        Tuples of (header, collected_data)

    Example:
        >>> for header, span in collect_header_data(root):
        ...     print(span['address'], span['visible_columns'])
    """
    config = _build_config_from_kwargs(**kwargs)
    config.data_requirements = data_requirement
    config.custom_collector = custom_collector
    yield from ExecutionPlan(config).execute(root)


def count_headers(root: HeaderNode, **kwargs) -> int:
    """Count headers that match the traversal options.

    With ``visible_only=True`` this is the number of headers currently
    shown, which can differ from ``root.visible_columns_count``: the
    latter also counts headers inside collapsed subtrees.
    """
    count = 0
    for _ in traverse_headers(root, **kwargs):
        count += 1
    return count


def find_headers(
    root: HeaderNode,
    predicate: Callable[[HeaderNode], bool],
    **kwargs
) -> Iterator[HeaderNode]:
    """Find headers that match a predicate.

    Example:
        >>> wide = list(find_headers(root, lambda h: (h.width or 0) > 100))
    """
    kwargs['include_filter'] = predicate
    yield from traverse_headers(root, **kwargs)


def get_leaf_headers(root: HeaderNode, **kwargs) -> Iterator[HeaderNode]:
    """Yield headers with no nested columns."""
    for node in traverse_headers(root, **kwargs):
        if node.is_leaf:
            yield node


def get_visible_headers(root: HeaderNode, **kwargs) -> List[HeaderNode]:
    """Return the headers currently shown, in column order."""
    kwargs['visible_only'] = True
    return list(traverse_headers(root, **kwargs))


def get_header_addresses(root: HeaderNode, **kwargs) -> Iterator[List[int]]:
    """Yield the address of every header reached by the walk."""
    for _, address in collect_header_data(
        root, data_requirement=DataRequirement.ADDRESS, **kwargs
    ):
        yield address


def find_by_address(
    target: Union[HeaderNode, HeaderRow],
    address: Sequence[int],
) -> HeaderNode:
    """Resolve an address to a header.

    Addresses are full paths, as ``address`` reports them. For a
    HeaderRow the first element selects a top-level header. For a
    HeaderNode the lookup starts at the topmost ancestor of that node,
    whose own index (or -1 when it has none) must be the first element,
    so any header of the same tree can be passed as target.

    Raises:
        AddressLookupError: If the address does not resolve
    """
    if not address:
        raise AddressLookupError(address, 0)

    if isinstance(target, HeaderRow):
        node = _child_at(target.headers, address, 0)
    else:
        node = target.root
        own = node.index if node.index is not None else -1
        if address[0] != own:
            raise AddressLookupError(address, 0)

    for position in range(1, len(address)):
        node = _child_at(node.children or [], address, position)
    return node


def expand_all(root: HeaderNode) -> None:
    """Expand every header that has nested columns."""
    for node in traverse_headers(root):
        if not node.is_leaf:
            node.children_expanded = True


def collapse_all(root: HeaderNode) -> None:
    """Collapse root and, through the cascade, its whole subtree."""
    root.children_expanded = False


def reveal(node: HeaderNode) -> None:
    """Expand every ancestor of a header so that its parent chain is open.

    The header itself stays hidden if it hides itself while expanded.
    """
    ancestors = []
    current = node.parent
    while current is not None:
        ancestors.append(current)
        current = current.parent
    for ancestor in reversed(ancestors):
        if not ancestor.children_expanded:
            ancestor.children_expanded = True


def get_tree_stats(root: HeaderNode, **kwargs) -> Dict[str, Any]:
    """Get statistics about a header tree.

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"{stats['shown_headers']} of {stats['total_headers']} shown")
    """
    stats = {
        'total_headers': 0,
        'leaf_headers': 0,
        'expanded_headers': 0,
        'shown_headers': 0,
        'max_depth': 0,
        'depths': {},
    }

    for node, depth in collect_header_data(
        root,
        data_requirement=DataRequirement.CUSTOM,
        custom_collector=lambda node, depth: depth,
        **kwargs
    ):
        stats['total_headers'] += 1
        if node.is_leaf:
            stats['leaf_headers'] += 1
        if node.children_expanded:
            stats['expanded_headers'] += 1
        if node.visible:
            stats['shown_headers'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['columns'] = root.columns_count
    stats['visible_columns'] = root.visible_columns_count
    return stats


# Helper functions

def _child_at(children: Sequence[HeaderNode], address: Sequence[int], position: int) -> HeaderNode:
    index = address[position]
    if not 0 <= index < len(children):
        raise AddressLookupError(address, position)
    return children[index]


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments.

    Raises:
        TypeError: For an unknown option
    """
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = parse_strategy(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'visible_only' in kwargs:
        config.filter.visible_only = kwargs.pop('visible_only')

    if kwargs:
        raise TypeError(f"Unknown traversal options: {', '.join(sorted(kwargs))}")

    return config
