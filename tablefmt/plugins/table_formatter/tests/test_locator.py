# tablefmt/plugins/table_formatter/tests/test_locator.py
"""Tests for table block detection and span resolution."""

from tablefmt.plugins.table_formatter.document import Document, Position, Range
from tablefmt.plugins.table_formatter.locator import (
    TableBlock,
    find_range,
    locate_tables,
    resolve_range,
)


TABLE = "| a | b |\n|---|---|\n| 1 | 2 |"


class TestLocateTables:
    """Tests for locate_tables()."""

    def test_finds_table_in_prose(self):
        """Should return the table block with its offsets."""
        text = "intro\n" + TABLE + "\n\noutro"

        blocks = locate_tables(text)

        assert blocks == [TableBlock(TABLE, 6, 6 + len(TABLE))]

    def test_block_text_matches_offsets(self):
        """Block text is the verbatim slice between its offsets."""
        text = "# Title\n\n" + TABLE + "\n\nmore\n\n| x | y |\n| :--- | ---: |\n"

        blocks = locate_tables(text)

        assert len(blocks) == 2
        for block in blocks:
            assert text[block.start:block.end] == block.text

    def test_no_table_yields_empty_list(self):
        """A lone pipe without a separator line is not a table."""
        assert locate_tables("|\nplain text") == []
        assert locate_tables("just a | pipe\nnothing else") == []
        assert locate_tables("") == []

    def test_separator_needs_three_hyphens(self):
        """Hyphen runs shorter than three do not form a separator."""
        assert locate_tables("| a | b |\n|--|--|\n| 1 | 2 |") == []

    def test_single_column_table_not_located(self):
        """The separator needs at least two hyphen groups."""
        assert locate_tables("| a |\n|---|\n| 1 |") == []

    def test_table_without_outer_pipes(self):
        """Leading and trailing pipes are optional."""
        text = "a | b\n :--- | ---: \nc | d"

        blocks = locate_tables(text)

        assert [b.text for b in blocks] == [text]

    def test_crlf_line_breaks(self):
        """CRLF tables are found and the block stops before the final CR."""
        text = "| a | b |\r\n| --- | --- |\r\n| 1 | 2 |\r\nafter"

        blocks = locate_tables(text)

        assert len(blocks) == 1
        assert blocks[0].text == "| a | b |\r\n| --- | --- |\r\n| 1 | 2 |"

    def test_blank_line_ends_table(self):
        """Rows after a blank line belong to no table."""
        text = TABLE + "\n\n| 3 | 4 |"

        blocks = locate_tables(text)

        assert [b.text for b in blocks] == [TABLE]

    def test_prose_line_without_pipe_ends_table(self):
        text = TABLE + "\nSome text\n| 3 | 4 |"

        assert [b.text for b in locate_tables(text)] == [TABLE]

    def test_indented_table_keeps_indentation(self):
        """The block starts at the beginning of the indented line."""
        text = "list:\n    | a | b |\n    |---|---|"

        blocks = locate_tables(text)

        assert blocks[0].text == "    | a | b |\n    |---|---|"
        assert blocks[0].start == 6

    def test_header_only_table(self):
        """A header and separator without body rows is a table."""
        text = "| a | b |\n|---|---|"
        assert [b.text for b in locate_tables(text)] == [text]

    def test_separator_must_end_its_line(self):
        """Trailing text after the separator cells rules the line out."""
        assert locate_tables("| a | b |\n|---|---|x\n| 1 | 2 |") == []
        assert locate_tables("| a | b |\n| --- | --- |   |\n| 1 | 2 | 3 |") == []

    def test_separator_trailing_whitespace_allowed(self):
        text = "| a | b |\n|---|---|  \n| 1 | 2 |"

        assert [b.text for b in locate_tables(text)] == [text]

    def test_wider_body_row_located_as_one_table(self):
        text = "| a   | b   |     |\n| --- | --- | --- |\n| 1   | 2   | 3   |\n"

        assert [b.text for b in locate_tables(text)] == [text.rstrip("\n")]


class TestSpanResolution:
    """Tests for resolve_range() and find_range()."""

    def test_resolve_range_positions(self):
        text = "# T\n\n" + "| a | b |\n|---|---|"
        document = Document(text)

        block = locate_tables(text)[0]

        assert resolve_range(document, block) == Range(Position(2, 0), Position(3, 9))

    def test_identical_tables_resolve_to_own_ranges(self):
        """Two byte-identical tables each keep their own range."""
        text = TABLE + "\n\ntext\n\n" + TABLE
        document = Document(text)

        blocks = locate_tables(text)
        ranges = [resolve_range(document, block) for block in blocks]

        assert ranges[0].start == Position(0, 0)
        assert ranges[1].start == Position(6, 0)

    def test_find_range_returns_first_occurrence(self):
        """Text lookup cannot tell identical tables apart."""
        text = TABLE + "\n\ntext\n\n" + TABLE
        document = Document(text)

        assert find_range(document, TABLE).start == Position(0, 0)

    def test_find_range_missing_text(self):
        assert find_range(Document("no tables"), TABLE) is None
