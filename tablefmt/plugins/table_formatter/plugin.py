# tablefmt/plugins/table_formatter/plugin.py
"""Markdown table formatter plugin.

Finds GitHub-flavored-markdown pipe tables in a document and reflows
them: every column padded to the width of its widest cell (wide CJK
characters count double), separator hyphen runs resized with their
colons kept in place, indentation kept or normalized to a tab stop.

Returns one TextEdit per table, the way an editor host asks for
"format document":

    plugin = create_plugin()
    edits = plugin.provide_formatting_edits(Document(text), options)

Registered with a FormatterRegistry through activate().
"""

import logging
from typing import Any, Dict, List, Optional

from tablefmt.cancellation import CancelToken

from .config import FormattingOptions, load_formatting_options
from .document import Document, TextEdit, apply_edits
from .locator import locate_tables, resolve_range
from .reflow import reflow_table

logger = logging.getLogger(__name__)


class TableFormatterPlugin:
    """Reflows markdown pipe tables.

    Implements the DocumentFormattingEditProvider protocol. Formatting
    options are resolved on every request unless passed in explicitly.

    Args:
        config_path: Settings file to read; the default location when None.
        overrides: Option values that win over the settings file and
            the environment (keys: tab_size, normalize_indentation, eol,
            wide_chars).
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ):
        self._config_path = config_path
        self._overrides = dict(overrides or {})

    def get_options(self, document_text: Optional[str] = None) -> FormattingOptions:
        """Read formatting options fresh from the configuration sources."""
        return load_formatting_options(self._config_path, document_text, self._overrides)

    def provide_formatting_edits(
        self,
        document: Document,
        options: Optional[FormattingOptions] = None,
        token: Optional[CancelToken] = None,
    ) -> List[TextEdit]:
        """Compute one replacement edit per table in ``document``.

        Args:
            document: Document to format.
            options: Formatting options; read from configuration when None.
            token: Checked once before starting; a cancelled request
                yields no edits.

        Returns:
            Non-overlapping edits in document order, empty when the
            document has no tables.
        """
        uri = getattr(document, "uri", None) or "<text>"
        if token is not None and token.is_cancelled:
            logger.debug("Formatting cancelled before start: %s", uri)
            return []

        text = document.get_text()
        if options is None:
            options = self.get_options(text)
        else:
            options = options.resolve_eol(text)

        edits = [
            TextEdit(resolve_range(document, block), reflow_table(block.text, options))
            for block in locate_tables(text)
        ]
        logger.debug("Produced %d table edit(s) for %s", len(edits), uri)
        return edits

    def format_text(self, text: str, options: Optional[FormattingOptions] = None) -> str:
        """Return ``text`` with every table reflowed."""
        document = Document(text)
        return apply_edits(document, self.provide_formatting_edits(document, options))


def create_plugin(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> TableFormatterPlugin:
    """Factory function to create a TableFormatterPlugin instance."""
    return TableFormatterPlugin(config_path, overrides)
