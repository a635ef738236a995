"""Display width utilities for table cells.

A character is "wide" when it renders two columns in a fixed-width font.
Two classification modes are supported:

- ``heuristic``: a fixed code point set covering CJK symbols and
  ideographs (U+3000-U+9FFF), fullwidth forms (U+FF01-U+FF60) and the
  curly quotes and em dash that CJK fonts draw full width.
- ``unicode``: the heuristic set plus anything wcwidth reports as two
  columns (Hangul, CJK extensions, emoji, ...).

The display length of a cell is its character count plus one per wide
character, so padding can be computed in raw characters.
"""

import re

import wcwidth

HEURISTIC = "heuristic"
UNICODE = "unicode"
WIDE_CHAR_MODES = (HEURISTIC, UNICODE)

_WIDE_CHAR = re.compile(r"[\u3000-\u9fff\uff01-\uff60\u2018\u201c\u2019\u201d\u2014]")


def is_wide_char(char: str, mode: str = HEURISTIC) -> bool:
    """Return True if ``char`` occupies two display columns.

    Args:
        char: A single character.
        mode: ``"heuristic"`` or ``"unicode"``.
    """
    if _WIDE_CHAR.match(char):
        return True
    if mode == UNICODE:
        return wcwidth.wcwidth(char) == 2
    return False


def wide_char_count(text: str, mode: str = HEURISTIC) -> int:
    """Count the wide characters in ``text``."""
    if mode == HEURISTIC:
        return len(_WIDE_CHAR.findall(text))
    return sum(1 for char in text if is_wide_char(char, mode))


def display_length(text: str, mode: str = HEURISTIC) -> int:
    """Display length of ``text``: wide characters count double.

    >>> display_length("ab")
    2
    >>> display_length("！！")
    4
    """
    return len(text) + wide_char_count(text, mode)


def pad_to_width(text: str, width: int, mode: str = HEURISTIC) -> str:
    """Left-align ``text`` in a field ``width`` display columns wide.

    The raw character target is ``width`` minus the wide characters in
    ``text``; the result is padded with spaces and cut to exactly that
    many characters.
    """
    target = width - wide_char_count(text, mode)
    if target <= 0:
        return ""
    return (text + " " * target)[:target]
