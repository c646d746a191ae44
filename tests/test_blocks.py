"""
Tests for the content block parser.

Run with: pytest tests/test_blocks.py -v
"""

from outline_notes.models import BlockKind, Bullet
from outline_notes.parsers import parse_blocks, split_cells


class TestBullets:
    """Bullet list grouping and nesting."""

    def test_nested_depths(self):
        blocks = parse_blocks(["- a", "  - b", "    - c", "- d"])

        assert len(blocks) == 1
        assert [b.depth for b in blocks[0].entries] == [0, 1, 2, 0]

    def test_tab_indent_is_one_level(self):
        blocks = parse_blocks(["- a", "\t- b"])
        assert blocks[0].entries[1].depth == 1

    def test_continuation_line_joins_previous_bullet(self):
        blocks = parse_blocks(["- Prefer composition", "  over inheritance"])
        assert blocks[0].entries == (Bullet(text="Prefer composition over inheritance"),)

    def test_blank_line_splits_lists(self):
        blocks = parse_blocks(["- a", "", "- b"])
        assert [b.kind for b in blocks] == [BlockKind.BULLETS, BlockKind.BULLETS]

    def test_thematic_break_splits_lists(self):
        blocks = parse_blocks(["- a", "---", "- b"])
        assert len(blocks) == 2

    def test_bullet_of_only_dashes_is_a_break(self):
        blocks = parse_blocks(["- a", "- ---", "- b"])

        assert len(blocks) == 2
        assert [b.texts() for b in blocks] == [["a"], ["b"]]

    def test_bullet_starting_with_dashes_is_kept(self):
        blocks = parse_blocks(["- --- note"])
        assert blocks[0].entries == (Bullet(text="--- note"),)

    def test_alternative_markers(self):
        blocks = parse_blocks(["* star", "+ plus", "2) paren"])
        entries = blocks[0].entries
        assert [b.text for b in entries] == ["star", "plus", "paren"]
        assert [b.ordered for b in entries] == [False, False, True]


class TestTables:
    """Pipe tables."""

    def test_alignment_row_dropped(self):
        blocks = parse_blocks(["| a | b |", "|:--|--:|", "| 1 | 2 |"])

        table = blocks[0]
        assert table.kind is BlockKind.TABLE
        assert table.header == ("a", "b")
        assert table.rows == (("1", "2"),)

    def test_table_without_alignment_row(self):
        table = parse_blocks(["| a | b |", "| 1 | 2 |"])[0]
        assert table.rows == (("1", "2"),)

    def test_ragged_rows_are_kept(self):
        table = parse_blocks(["| a | b |", "|---|---|", "| 1 | 2 | 3 |"])[0]
        assert table.column_count == 2
        assert table.rows[0] == ("1", "2", "3")

    def test_escaped_pipe_stays_in_cell(self):
        assert split_cells(r"| a \| b | c |") == (r"a \| b", "c")

    def test_table_after_bullets(self):
        blocks = parse_blocks(["- a", "| x |", "| 1 |"])
        assert [b.kind for b in blocks] == [BlockKind.BULLETS, BlockKind.TABLE]


class TestOtherBlocks:
    """Paragraphs and fenced code."""

    def test_paragraph_lines(self):
        blocks = parse_blocks(["Some prose", "  more prose"])

        assert blocks[0].kind is BlockKind.PARAGRAPH
        assert blocks[0].lines == ("Some prose", "more prose")
        assert blocks[0].text == "Some prose more prose"

    def test_code_block_keeps_lines_verbatim(self):
        blocks = parse_blocks(["~~~", "  - not a bullet", "| not a table |", "~~~"])

        code = blocks[0]
        assert code.kind is BlockKind.CODE
        assert code.fence == "~~~"
        assert code.lines == ("  - not a bullet", "| not a table |")

    def test_unterminated_fence_runs_to_end(self):
        blocks = parse_blocks(["```python", "x = 1"])
        assert blocks[0].lines == ("x = 1",)
        assert blocks[0].info == "python"

    def test_empty_input(self):
        assert parse_blocks([]) == ()
