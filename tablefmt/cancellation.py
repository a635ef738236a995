"""Cancellation token passed by hosts into formatting requests."""

import threading


class CancelToken:
    """Thread-safe cancellation token.

    Formatting checks the token once before starting a pass; a pass that
    has started always runs to completion.

    Example:
        token = CancelToken()
        edits = plugin.provide_formatting_edits(document, options, token)

        # From the host, before the request is served
        token.cancel()
    """

    def __init__(self):
        """Initialize a new cancel token."""
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation. Calling it again has no further effect."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        """Check if cancellation has been requested."""
        return self._event.is_set()
