"""Unit tests for pipe / markdown table detection."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from content_detect.pipe import detect_pipe_tables, split_pipe_cells

MARKDOWN = """\
| Name | Cost | Weight |
|------|------|--------|
| Sword | 50gp | 3lb |
| Shield | 25gp | 5lb |
| Helmet | 15gp | 2lb |"""


# ===========================================================================
# split_pipe_cells tests
# ===========================================================================


class TestSplitPipeCells:

    def test_outer_pipes(self):
        assert split_pipe_cells("| Sword | 50gp |") == ["Sword", "50gp"]

    def test_no_outer_pipes(self):
        assert split_pipe_cells("Sword | 50gp | 3lb") == ["Sword", "50gp", "3lb"]

    def test_leading_pipe_only(self):
        assert split_pipe_cells("| a | b") == ["a", "b"]

    def test_escaped_pipe_stays_in_cell(self):
        assert split_pipe_cells(r"| a \| b | c |") == ["a | b", "c"]

    def test_escaped_trailing_pipe_is_content(self):
        assert split_pipe_cells(r"a | b \|") == ["a", "b |"]

    def test_empty_cells_kept(self):
        assert split_pipe_cells("| a |  | c |") == ["a", "", "c"]

    def test_no_pipe(self):
        assert split_pipe_cells("no pipes here") is None

    def test_single_cell(self):
        assert split_pipe_cells("| lonely |") is None


# ===========================================================================
# detect_pipe_tables tests
# ===========================================================================


class TestDetectPipeTables:

    def test_markdown_table(self):
        (table,) = detect_pipe_tables(MARKDOWN)
        assert table.kind == "pipe-table"
        assert table.columns == ["Name", "Cost", "Weight"]
        assert table.rows == [["Sword", "50gp", "3lb"], ["Shield", "25gp", "5lb"], ["Helmet", "15gp", "2lb"]]
        assert table.confidence == "high"
        assert table.raw_text == MARKDOWN
        assert table.start_line == 0

    def test_without_separator_is_medium(self):
        text = "a | b\nc | d\ne | f"
        (table,) = detect_pipe_tables(text)
        assert table.confidence == "medium"
        assert table.columns == ["a", "b"]
        assert len(table.rows) == 2

    def test_one_data_row_is_medium(self):
        (table,) = detect_pipe_tables("| a | b |\n|---|---|\n| c | d |")
        assert table.confidence == "medium"

    def test_title_and_start_line(self):
        (table,) = detect_pipe_tables("Equipment\n\n" + MARKDOWN + "\n\nSome prose after.")
        assert table.title == "Equipment"
        assert table.start_line == 2
        assert table.raw_text == MARKDOWN

    def test_header_only_is_not_a_table(self):
        assert detect_pipe_tables("| a | b |\n|---|---|\nprose") == []

    def test_second_separator_ends_block(self):
        text = "| a | b |\n|---|---|\n| c | d |\n|---|---|\n| e | f |"
        (table,) = detect_pipe_tables(text)
        assert table.rows == [["c", "d"]]

    def test_two_tables(self):
        text = "| a | b |\n| c | d |\n\n| e | f |\n| g | h |"
        tables = detect_pipe_tables(text)
        assert [t.start_line for t in tables] == [0, 3]

    def test_ragged_rows_left_for_bounds(self):
        (table,) = detect_pipe_tables("| a | b | c |\n| d | e |")
        assert table.rows == [["d", "e"]]

    def test_plain_text(self):
        assert detect_pipe_tables("hello\nworld") == []
