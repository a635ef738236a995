"""Markdown pipe table formatter.

Usage (editor host):
    from tablefmt.plugins.formatter_registry import create_registry
    from tablefmt.plugins.table_formatter import activate

    registry = create_registry()
    handle = activate(registry)      # formats "markdown" documents
    edits = registry.provide_edits("markdown", document, options)
    handle.dispose()
"""

from .config import FormattingOptions, load_formatting_options
from .document import Document, Position, Range, TextEdit, apply_edits
from .locator import TableBlock, find_range, locate_tables, resolve_range
from .plugin import TableFormatterPlugin, create_plugin
from .reflow import Alignment, reflow_table

LANGUAGE_ID = "markdown"


def activate(registry, plugin=None):
    """Register the table formatter for markdown documents.

    Args:
        registry: FormatterRegistry to register with.
        plugin: Formatter instance; a new one is created when None.

    Returns:
        Disposable handle; dispose() unregisters the formatter.
    """
    return registry.register_document_formatter(LANGUAGE_ID, plugin or create_plugin())


__all__ = [
    "Alignment",
    "Document",
    "FormattingOptions",
    "LANGUAGE_ID",
    "Position",
    "Range",
    "TableBlock",
    "TableFormatterPlugin",
    "TextEdit",
    "activate",
    "apply_edits",
    "create_plugin",
    "find_range",
    "load_formatting_options",
    "locate_tables",
    "reflow_table",
    "resolve_range",
]
