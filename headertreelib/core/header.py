"""Header tree model for HeaderTreeLib.

A HeaderNode describes one column header of an expandable table. Nodes
may own nested sub-columns, may be expanded or collapsed, and report
their visibility, their address and the number of columns they span.

Each node subscribes to its direct children and re-emits their changes,
so a listener attached anywhere in the tree hears about every change at
or below that point.
"""

import logging
import weakref
from typing import Any, Iterable, Iterator, List, Optional

from .notifier import ChangeNotifier

logger = logging.getLogger(__name__)


class HeaderNode(ChangeNotifier):
    """A single, possibly expandable, column header.

    Args:
        cell: Header content. Opaque to the tree, never interpreted.
        children: Nested columns. ``None`` marks a leaf column.
        width: Width hint. ``None`` means the table default applies.
        hide_when_expanded: Hide this column while its children are expanded.
        children_expanded: Initial expansion state.
        disable_default_on_tap_expansion: Signal for input handling code that
            this header manages expansion itself. The tree never reads it.
    """

    def __init__(self,
                 cell: Any,
                 children: Optional[Iterable["HeaderNode"]] = None,
                 width: Optional[float] = None,
                 hide_when_expanded: bool = False,
                 children_expanded: bool = False,
                 disable_default_on_tap_expansion: bool = False):
        super().__init__()
        self._cell = cell
        self._width = width
        self._hide_when_expanded = hide_when_expanded
        self._disable_default_on_tap_expansion = disable_default_on_tap_expansion
        self._children_expanded = children_expanded
        self._parent_ref: Optional["weakref.ReferenceType[HeaderNode]"] = None
        self._index: Optional[int] = None
        self._children: Optional[List[HeaderNode]] = (
            list(children) if children is not None else None
        )
        self._attach_children()

    # Immutable attributes

    @property
    def cell(self) -> Any:
        return self._cell

    @property
    def width(self) -> Optional[float]:
        return self._width

    @property
    def hide_when_expanded(self) -> bool:
        return self._hide_when_expanded

    @property
    def disable_default_on_tap_expansion(self) -> bool:
        return self._disable_default_on_tap_expansion

    # Structure

    @property
    def parent(self) -> Optional["HeaderNode"]:
        """The header this one is nested in, or None for a root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def index(self) -> Optional[int]:
        """Position of this header within its parent (or row)."""
        return self._index

    @property
    def children(self) -> Optional[List["HeaderNode"]]:
        return self._children

    @children.setter
    def children(self, value: Optional[Iterable["HeaderNode"]]) -> None:
        self.replace_children(value)

    def replace_children(self, children: Optional[Iterable["HeaderNode"]]) -> None:
        """Replace the nested columns of this header.

        Previous children stop being listened to but keep their stale
        ``parent`` and ``index``. Each new child gets this node as parent,
        its position as index, and a subscription. Listeners are notified
        once afterwards.

        Args:
            children: New nested columns, or None to make this a leaf
        """
        self._detach_children()
        self._children = list(children) if children is not None else None
        self._attach_children()
        logger.debug("Replaced children of %r (%d now)",
                     self, len(self._children or ()))
        self.notify_listeners()

    @property
    def is_leaf(self) -> bool:
        return not self._children

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        """Number of ancestors above this header."""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    @property
    def root(self) -> "HeaderNode":
        current = self
        while current.parent is not None:
            current = current.parent
        return current

    # Expansion

    @property
    def children_expanded(self) -> bool:
        """Whether nested columns are revealed. Always False for a leaf."""
        return bool(self._children) and self._children_expanded

    @children_expanded.setter
    def children_expanded(self, value: bool) -> None:
        if self._children is None:
            return
        self._children_expanded = value
        if not value:
            self._collapse_children()
        logger.debug("%r children_expanded=%s", self, value)
        self.notify_listeners()

    def _collapse_children(self) -> None:
        # Collapsing closes the whole subtree
        for child in self._children or ():
            if not child.disposed:
                child.children_expanded = False
            elif child._children is not None:
                # Disposed headers have no listeners left to tell
                child._children_expanded = False
                child._collapse_children()

    def toggle_expand(self) -> None:
        """Flip the expansion state of this header."""
        self.children_expanded = not self.children_expanded

    # Derived values, recomputed on every access

    @property
    def columns_count(self) -> int:
        """This column plus every column nested in it, visible or not."""
        count = 1
        for child in self._children or ():
            count += child.columns_count
        return count

    @property
    def visible_columns_count(self) -> int:
        """Columns this header contributes, honouring hide_when_expanded.

        The recursion always descends into children, whatever the
        expansion state of this node. Callers relying on the total for a
        given expansion state must set the flags before asking.
        """
        count = 0 if self.children_expanded and self._hide_when_expanded else 1
        for child in self._children or ():
            count += child.visible_columns_count
        return count

    @property
    def visible(self) -> bool:
        """True if this header should currently be shown."""
        if self.children_expanded and self._hide_when_expanded:
            return False
        parent = self.parent
        return parent is None or parent.children_expanded

    @property
    def address(self) -> List[int]:
        """Indices from the topmost ancestor down to this header.

        A header without an assigned index contributes -1.
        """
        parent = self.parent
        address = parent.address if parent is not None else []
        address.append(self._index if self._index is not None else -1)
        return address

    # Lifecycle

    def dispose(self) -> None:
        """Stop listening to children and release listeners.

        Children are not disposed. The node must not be used afterwards,
        except that a parent still holding it will collapse it silently
        when the parent collapses.
        """
        self._detach_children()
        super().dispose()

    def _on_child_changed(self) -> None:
        self.notify_listeners()

    def _attach_children(self) -> None:
        for i, child in enumerate(self._children or ()):
            child._parent_ref = weakref.ref(self)
            child._index = i
            child.add_listener(self._on_child_changed)

    def _detach_children(self) -> None:
        for child in self._children or ():
            child.remove_listener(self._on_child_changed)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(cell={self._cell!r}, index={self._index})"


class HeaderRow(ChangeNotifier):
    """The top-level headers of a table.

    Assigns each header its position as ``index`` while leaving its
    ``parent`` empty, so the address of the header at position 2 is
    ``[2]``. Changes from any header in the row are re-emitted.
    """

    def __init__(self, headers: Optional[Iterable[HeaderNode]] = None):
        super().__init__()
        self._headers: List[HeaderNode] = list(headers or ())
        self._attach_headers()

    @property
    def headers(self) -> List[HeaderNode]:
        return self._headers

    @headers.setter
    def headers(self, value: Optional[Iterable[HeaderNode]]) -> None:
        self.replace_headers(value)

    def replace_headers(self, headers: Optional[Iterable[HeaderNode]]) -> None:
        """Replace the top-level headers and notify listeners once."""
        self._detach_headers()
        self._headers = list(headers or ())
        self._attach_headers()
        logger.debug("Replaced headers of %r (%d now)", self, len(self._headers))
        self.notify_listeners()

    @property
    def columns_count(self) -> int:
        return sum(header.columns_count for header in self._headers)

    @property
    def visible_columns_count(self) -> int:
        return sum(header.visible_columns_count for header in self._headers)

    def dispose(self) -> None:
        self._detach_headers()
        super().dispose()

    def _on_header_changed(self) -> None:
        self.notify_listeners()

    def _attach_headers(self) -> None:
        for i, header in enumerate(self._headers):
            header._index = i
            header.add_listener(self._on_header_changed)

    def _detach_headers(self) -> None:
        for header in self._headers:
            header.remove_listener(self._on_header_changed)

    def __len__(self) -> int:
        return len(self._headers)

    def __iter__(self) -> Iterator[HeaderNode]:
        return iter(self._headers)

    def __getitem__(self, index: int) -> HeaderNode:
        return self._headers[index]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(headers={len(self._headers)})"
