"""Locate markdown pipe tables in free-form text.

A table block is a content line, a separator line and any number of
further content lines, each separated by a line break:

    | Name | Age |        <- content line (at least one pipe)
    |:-----|----:|        <- separator line (two or more hyphen groups)
    | Bob  |  25 |        <- content lines, until the first line without a pipe

Blank lines end a block because every content line needs a pipe. A
line with anything after the separator cells is not a separator line.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from .document import Document, Range

logger = logging.getLogger(__name__)

LINE_BREAK = r"\r?\n"
CONTENT_LINE = r"\|?[^\r\n]*\|[^\r\n]*"
# Trailing [ \t]* picks up whitespace after the last pipe of the separator
SEPARATOR_LINE = r"[ \t]*\|?(?: *:?-{3,}:? *\|)+(?: *:?-{3,}:? *\|?)[ \t]*"
# The separator must fill its whole line, so "|---|---|x" is not a table
LINE_END = r"(?=\r?\n|$)"

TABLE_PATTERN = re.compile(
    CONTENT_LINE + LINE_BREAK + SEPARATOR_LINE + LINE_END
    + "(?:" + LINE_BREAK + CONTENT_LINE + ")*"
)


@dataclass(frozen=True)
class TableBlock:
    """A table found in a document: its verbatim text and offsets."""
    text: str
    start: int
    end: int


def locate_tables(text: str) -> List[TableBlock]:
    """Find every table block in ``text``, in document order.

    Args:
        text: Full document text.

    Returns:
        Non-overlapping blocks; ``block.text == text[block.start:block.end]``.
        Empty when the text holds no table.
    """
    blocks = [
        TableBlock(match.group(0), match.start(), match.end())
        for match in TABLE_PATTERN.finditer(text)
    ]
    logger.debug("Located %d table(s)", len(blocks))
    return blocks


def resolve_range(document: Document, block: TableBlock) -> Range:
    """Range of ``block`` in ``document`` from its tracked offsets."""
    return Range(document.position_at(block.start), document.position_at(block.end))


def find_range(document: Document, block_text: str) -> Optional[Range]:
    """Range of the first occurrence of ``block_text`` in ``document``.

    Identical tables all resolve to the first one; prefer resolve_range()
    when the TableBlock is at hand.
    """
    start = document.get_text().find(block_text)
    if start == -1:
        return None
    return Range(document.position_at(start), document.position_at(start + len(block_text)))
