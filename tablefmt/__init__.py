# tablefmt package
#
# Reflows markdown pipe tables so every column lines up:
#
#   from tablefmt import format_markdown, FormattingOptions
#
#   text = format_markdown(text, FormattingOptions(normalize_indentation=True))

from typing import Optional

from tablefmt.plugins.table_formatter import (
    Document,
    FormattingOptions,
    TextEdit,
    create_plugin,
    load_formatting_options,
    locate_tables,
    reflow_table,
)

__version__ = "0.3.0"


def format_markdown(text: str, options: Optional[FormattingOptions] = None) -> str:
    """Return ``text`` with every markdown table reflowed.

    Options are read from configuration when not given.
    """
    return create_plugin().format_text(text, options)


__all__ = [
    "Document",
    "FormattingOptions",
    "TextEdit",
    "format_markdown",
    "load_formatting_options",
    "locate_tables",
    "reflow_table",
]
