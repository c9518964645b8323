"""Exceptions raised by HeaderTreeLib.

The header tree itself is error-free for well-formed trees. These
exceptions cover misuse of disposed notifiers and lookups that cannot
be resolved.
"""


class HeaderTreeError(Exception):
    """Base class for all HeaderTreeLib errors."""
    pass


class NotifierDisposedError(HeaderTreeError, RuntimeError):
    """Raised when a disposed notifier is used again."""
    
    def __init__(self, notifier):
        self.notifier = notifier
        super().__init__(
            f"{notifier.__class__.__name__} was used after being disposed"
        )


class AddressLookupError(HeaderTreeError, LookupError):
    """Raised when an address does not resolve to a header."""
    
    def __init__(self, address, position: int):
        self.address = list(address)
        self.position = position
        super().__init__(
            f"Address {self.address} does not resolve: "
            f"no header at step {position}"
        )
