"""Change notification channel for HeaderTreeLib.

A ChangeNotifier keeps a list of zero-argument callbacks and calls them,
synchronously and in registration order, whenever the owner reports a
change. Header nodes subscribe to their children through this channel,
which is how a change deep in the tree reaches listeners near the root.
"""

import logging
from typing import Callable, List

from ..errors import NotifierDisposedError

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class ChangeNotifier:
    """Observable base class with add/remove/notify semantics.

    Delivery is synchronous. Listeners must not mutate the object they
    are listening to while being notified, otherwise notifications nest.
    """

    def __init__(self):
        self._listeners: List[Listener] = []
        self._disposed = False

    @property
    def has_listeners(self) -> bool:
        """True if at least one listener is registered."""
        return bool(self._listeners)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add_listener(self, listener: Listener) -> None:
        """Register a callback to be called on every change.

        The same callback may be registered more than once; it is then
        called once per registration.

        Args:
            listener: Zero-argument callable

        Raises:
            NotifierDisposedError: If this notifier has been disposed
        """
        self._ensure_not_disposed()
        self._listeners.append(listener)
        logger.debug("Listener added to %r: %s", self, _describe(listener))

    def remove_listener(self, listener: Listener) -> None:
        """Remove the first registration of a callback.

        Unknown callbacks are ignored. This is allowed after disposal.
        """
        try:
            self._listeners.remove(listener)
        except ValueError:
            return
        logger.debug("Listener removed from %r: %s", self, _describe(listener))

    def notify_listeners(self) -> None:
        """Call every registered listener.

        Listeners added during delivery wait for the next notification.
        Listeners removed during delivery are skipped if they have not
        been called yet. An exception raised by a listener is logged and
        the remaining listeners are still called, so a failing listener
        cannot leave a tree mutation half done.

        Raises:
            NotifierDisposedError: If this notifier has been disposed
        """
        self._ensure_not_disposed()
        for listener in list(self._listeners):
            if listener not in self._listeners:
                continue
            try:
                listener()
            except Exception:
                logger.exception("Error in listener of %r: %s", self, _describe(listener))

    def dispose(self) -> None:
        """Drop all listeners and mark this notifier as dead.

        Raises:
            NotifierDisposedError: If called a second time
        """
        self._ensure_not_disposed()
        count = len(self._listeners)
        self._listeners.clear()
        self._disposed = True
        logger.debug("Disposed %r (dropped %d listeners)", self, count)

    def _ensure_not_disposed(self) -> None:
        if self._disposed:
            raise NotifierDisposedError(self)


def _describe(listener: Listener) -> str:
    return getattr(listener, "__qualname__", None) or repr(listener)
