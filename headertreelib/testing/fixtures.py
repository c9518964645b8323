"""Test fixtures for HeaderTreeLib consumers.

These helpers make it easy to build header trees from plain data and to
observe the notifications a tree emits, without reaching into private
state.
"""

from typing import Any, Dict, Iterable, Optional, Union

from ..core.header import HeaderNode
from ..core.notifier import ChangeNotifier


class ListenerRecorder:
    """Counts change notifications from one notifier.

    Example:
        recorder = ListenerRecorder(root)
        leaf.parent.toggle_expand()
        assert recorder.count == 1
        recorder.detach()
    """

    def __init__(self, notifier: Optional[ChangeNotifier] = None):
        self.count = 0
        self._notifier: Optional[ChangeNotifier] = None
        if notifier is not None:
            self.attach(notifier)

    def __call__(self) -> None:
        self.count += 1

    @property
    def notified(self) -> bool:
        return self.count > 0

    def attach(self, notifier: ChangeNotifier) -> "ListenerRecorder":
        """Start listening to a notifier, detaching from any previous one."""
        self.detach()
        notifier.add_listener(self)
        self._notifier = notifier
        return self

    def detach(self) -> None:
        if self._notifier is not None:
            self._notifier.remove_listener(self)
            self._notifier = None

    def reset(self) -> None:
        self.count = 0


HeaderSpec = Union[str, Dict[str, Any]]


def build_header_tree(spec: HeaderSpec) -> HeaderNode:
    """Build a header tree from nested dicts.

    A string is shorthand for a leaf header with that cell. A dict takes
    the HeaderNode keyword arguments, with ``children`` given as a list
    of further specs.

    Example:
        root = build_header_tree({
            'cell': 'Totals',
            'children_expanded': True,
            'children': ['Q1', {'cell': 'Q2', 'children': ['Apr', 'May']}],
        })
    """
    if isinstance(spec, str):
        return HeaderNode(spec)

    options = dict(spec)
    children: Optional[Iterable[HeaderSpec]] = options.pop('children', None)
    if children is not None:
        options['children'] = [build_header_tree(child) for child in children]
    return HeaderNode(**options)
