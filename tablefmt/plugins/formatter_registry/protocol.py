# tablefmt/plugins/formatter_registry/protocol.py
"""Protocol for document formatters.

A document formatter answers a whole-document request with a list of
replacement edits, the way an editor asks for "format document". It is
registered per language id on a FormatterRegistry.

Usage:
    class MyFormatter:
        def provide_formatting_edits(self, document, options=None, token=None):
            if token is not None and token.is_cancelled:
                return []
            return [TextEdit(range_, new_text)]
"""

from typing import Any, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class DocumentFormattingEditProvider(Protocol):
    """Protocol for whole-document formatters."""

    def provide_formatting_edits(
        self,
        document: Any,
        options: Optional[Any] = None,
        token: Optional[Any] = None,
    ) -> List[Any]:
        """Return non-overlapping TextEdits in document order.

        Args:
            document: Document exposing get_text() and position_at().
            options: FormattingOptions, or None to read configuration.
            token: Optional CancelToken checked before starting.
        """
        ...
