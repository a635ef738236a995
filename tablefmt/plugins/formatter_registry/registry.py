# tablefmt/plugins/formatter_registry/registry.py
"""Formatter registry: activation of document formatters.

Document formatters are registered per language id and answer
"format document" requests. Registration returns a Disposable whose
dispose() removes the registration again.

Usage:
    from tablefmt.plugins.formatter_registry import FormatterRegistry

    registry = FormatterRegistry()
    handle = registry.register_document_formatter("markdown", provider)
    edits = registry.provide_edits("markdown", document, options)
    handle.dispose()
"""

from typing import Any, Callable, Dict, List, Optional

from .protocol import DocumentFormattingEditProvider
from tablefmt.trace import trace as _trace_write


def _trace(msg: str) -> None:
    _trace_write("FormatterRegistry", msg)


class Disposable:
    """Handle returned by a registration; dispose() undoes it once."""

    def __init__(self, on_dispose: Callable[[], None]):
        self._on_dispose: Optional[Callable[[], None]] = on_dispose

    @property
    def disposed(self) -> bool:
        return self._on_dispose is None

    def dispose(self) -> None:
        if self._on_dispose is None:
            return
        callback, self._on_dispose = self._on_dispose, None
        callback()

    def __enter__(self) -> "Disposable":
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()


class FormatterRegistry:
    """Maps language ids to the document formatters serving them.

    Several providers may be registered for one language; the most
    recent one answers requests until it is disposed, after which the
    previous one takes over again.
    """

    def __init__(self):
        self._document_formatters: Dict[str, List[DocumentFormattingEditProvider]] = {}

    def register_document_formatter(
        self, language_id: str, provider: DocumentFormattingEditProvider
    ) -> Disposable:
        """Register ``provider`` for documents of ``language_id``.

        Returns:
            Disposable that unregisters the provider.
        """
        providers = self._document_formatters.setdefault(language_id, [])
        providers.append(provider)
        _trace(f"register_document_formatter: {type(provider).__name__} for {language_id}")

        def _unregister() -> None:
            registered = self._document_formatters.get(language_id, [])
            if provider in registered:
                registered.remove(provider)
                _trace(f"dispose: {type(provider).__name__} for {language_id}")
            if not registered:
                self._document_formatters.pop(language_id, None)

        return Disposable(_unregister)

    def get_document_formatter(self, language_id: str) -> Optional[DocumentFormattingEditProvider]:
        """Provider answering requests for ``language_id``, if any."""
        providers = self._document_formatters.get(language_id)
        return providers[-1] if providers else None

    def provide_edits(
        self,
        language_id: str,
        document: Any,
        options: Optional[Any] = None,
        token: Optional[Any] = None,
    ) -> List[Any]:
        """Dispatch a formatting request; no provider means no edits."""
        provider = self.get_document_formatter(language_id)
        if provider is None:
            _trace(f"provide_edits: no formatter for {language_id}")
            return []
        return provider.provide_formatting_edits(document, options, token)


def create_registry() -> FormatterRegistry:
    """Factory function to create a FormatterRegistry instance."""
    return FormatterRegistry()
