"""Minimal document model: positions, ranges and text edits.

Mirrors the slice of an editor document API the formatter needs:
translating character offsets to (line, character) positions and back,
plus applying a batch of non-overlapping replacements.
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line and character position."""
    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """Span between two positions; ``end`` is exclusive."""
    start: Position
    end: Position


@dataclass(frozen=True)
class TextEdit:
    """Replace the text covered by ``range`` with ``new_text``."""
    range: Range
    new_text: str


class Document:
    """Read-only text document with offset/position translation.

    Lines are separated by ``\\n``; a preceding ``\\r`` stays part of the
    line it terminates, which keeps ``\\r\\n`` documents addressable by
    the same positions an editor reports.
    """

    def __init__(self, text: str, uri: Optional[str] = None, language_id: str = "markdown"):
        self._text = text
        self.uri = uri
        self.language_id = language_id
        self._line_starts = [0]
        for i, char in enumerate(text):
            if char == "\n":
                self._line_starts.append(i + 1)

    def get_text(self) -> str:
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        """Convert a character offset to a Position (clamped to the text)."""
        offset = max(0, min(offset, len(self._text)))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line, offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        """Convert a Position back to a character offset."""
        if position.line < 0:
            return 0
        if position.line >= len(self._line_starts):
            return len(self._text)
        start = self._line_starts[position.line]
        if position.line + 1 < len(self._line_starts):
            line_end = self._line_starts[position.line + 1] - 1
        else:
            line_end = len(self._text)
        return min(start + max(position.character, 0), line_end)


def apply_edits(document: Document, edits: Sequence[TextEdit]) -> str:
    """Apply non-overlapping edits and return the resulting text.

    Edits may be given in any order; they are applied from the end of the
    document backwards so earlier offsets stay valid.
    """
    text = document.get_text()
    spans: List[tuple] = []
    for edit in edits:
        start = document.offset_at(edit.range.start)
        end = document.offset_at(edit.range.end)
        spans.append((start, end, edit.new_text))

    for start, end, new_text in sorted(spans, key=lambda s: s[0], reverse=True):
        text = text[:start] + new_text + text[end:]
    return text
