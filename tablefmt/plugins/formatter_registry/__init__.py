"""Activation registry for document formatters.

Example (editor host):
    from tablefmt.plugins.formatter_registry import create_registry
    from tablefmt.plugins.table_formatter import activate

    registry = create_registry()
    handle = activate(registry)
    edits = registry.provide_edits("markdown", document)
"""

from .protocol import DocumentFormattingEditProvider
from .registry import Disposable, FormatterRegistry, create_registry

__all__ = [
    "Disposable",
    "DocumentFormattingEditProvider",
    "FormatterRegistry",
    "create_registry",
]
