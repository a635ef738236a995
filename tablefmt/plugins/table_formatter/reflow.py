"""Reflow a located markdown table block.

Parses the block into rows of cells, measures each column in display
columns, rewrites the separator row to the new widths and pads every
cell. Malformed input is formatted on a best-effort basis and never
rejected.
"""

import logging
import re
from enum import Enum
from typing import List, Optional

from .config import FormattingOptions
from .display_width import HEURISTIC, display_length, pad_to_width

logger = logging.getLogger(__name__)

# One cell: escaped pipes, code spans (pipes inside don't split) or any
# other non-pipe character, optionally preceded by the delimiter pipe.
CELL_PATTERN = re.compile(r"\|?((?:\\\||`.*?`|[^|])+)")
INDENT_PATTERN = re.compile(r"^(\s*)\S")
# Only the line breaks the locator accepts; form feeds and the like stay in the cell
LINE_BREAK_PATTERN = re.compile(r"\r?\n")

ALIGNMENT_ROW = 1
# Filler for separator cells added to a ragged table
FILLER_ALIGNMENT = "---"


class Alignment(Enum):
    """Separator cell shapes."""
    CENTER = "center"                # :---:
    LEFT_EXPLICIT = "left-explicit"  # :---
    RIGHT = "right"                  # ---:
    LEFT = "left"                    # ---


# Checked in order; the first pattern found anywhere in the cell wins.
_ALIGNMENT_PATTERNS = (
    (Alignment.CENTER, re.compile(r":-+:")),
    (Alignment.LEFT_EXPLICIT, re.compile(r":-+")),
    (Alignment.RIGHT, re.compile(r"-+:")),
    (Alignment.LEFT, re.compile(r"-+")),
)


def table_indentation(text: str, options: FormattingOptions) -> str:
    """Indentation to emit before every row of the table.

    Taken from the first line. With normalize_indentation the character
    count is rounded to the nearest multiple of tab_size and emitted as
    spaces; otherwise the original whitespace is kept verbatim.
    """
    match = INDENT_PATTERN.match(text)
    indent = match.group(1) if match else ""
    if not options.normalize_indentation:
        return indent
    tab_stops = round(len(indent) / options.tab_size)
    return " " * (options.tab_size * tab_stops)


def parse_rows(text: str) -> List[List[str]]:
    """Split a table block into rows of trimmed cell strings."""
    rows = []
    for line in LINE_BREAK_PATTERN.split(text):
        line = line.strip()
        if not line:
            continue
        rows.append([match.group(1).strip() for match in CELL_PATTERN.finditer(line)])
    return rows


def pad_rows(rows: List[List[str]]) -> List[List[str]]:
    """Extend short rows up to the widest row.

    Content rows get empty cells. The separator row gets plain hyphen
    cells so it stays a valid delimiter row when a body row is wider
    than the header.
    """
    column_count = max((len(row) for row in rows), default=0)
    padded = []
    for index, row in enumerate(rows):
        filler = FILLER_ALIGNMENT if index == ALIGNMENT_ROW else ""
        padded.append(row + [filler] * (column_count - len(row)))
    return padded


def compute_widths(rows: List[List[str]], wide_chars: str = HEURISTIC) -> List[int]:
    """Display width of each column: the longest cell, separator included."""
    widths: List[int] = []
    for row in rows:
        for i, cell in enumerate(row):
            length = display_length(cell, wide_chars)
            if i < len(widths):
                widths[i] = max(widths[i], length)
            else:
                widths.append(length)
    return widths


def classify_alignment(cell: str) -> Optional[Alignment]:
    """Shape of a separator cell, or None when it holds no hyphen."""
    for alignment, pattern in _ALIGNMENT_PATTERNS:
        if pattern.search(cell):
            return alignment
    return None


def render_alignment(alignment: Alignment, width: int) -> str:
    """Separator cell of ``width`` columns keeping the colon positions."""
    if alignment is Alignment.CENTER:
        return ":" + "-" * (width - 2) + ":"
    if alignment is Alignment.LEFT_EXPLICIT:
        return ":" + "-" * (width - 1)
    if alignment is Alignment.RIGHT:
        return "-" * (width - 1) + ":"
    return "-" * width


def normalize_alignment_row(cells: List[str], widths: List[int]) -> List[str]:
    result = []
    for cell, width in zip(cells, widths):
        alignment = classify_alignment(cell)
        if alignment is None:
            logger.debug("Unrecognized separator cell %r left unchanged", cell)
            result.append(cell)
        else:
            result.append(render_alignment(alignment, width))
    return result


def render_row(cells: List[str], widths: List[int], indentation: str,
               wide_chars: str = HEURISTIC) -> str:
    padded = [pad_to_width(cell, width, wide_chars) for cell, width in zip(cells, widths)]
    return indentation + "| " + " | ".join(padded) + " |"


def reflow_table(text: str, options: FormattingOptions) -> str:
    """Reformat one table block.

    Args:
        text: Block text as returned by the locator.
        options: Formatting options. An "auto" eol falls back to the
            block's own line break.

    Returns:
        The reflowed block, rows joined by the end-of-line string.
    """
    options = options.resolve_eol(text)
    indentation = table_indentation(text, options)
    rows = pad_rows(parse_rows(text))
    if not rows:
        return text

    widths = compute_widths(rows, options.wide_chars)
    if len(rows) > ALIGNMENT_ROW:
        rows[ALIGNMENT_ROW] = normalize_alignment_row(rows[ALIGNMENT_ROW], widths)

    return options.eol.join(
        render_row(row, widths, indentation, options.wide_chars) for row in rows
    )
