"""Unit tests for whitespace-aligned table detection."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from content_detect.aligned import aligned_fraction, detect_aligned_tables, find_aligned_runs, label_fraction, split_aligned_cells

UNITS = """\
UNIT           COST    STATS
Infantry       10      M4 WS3 BS3
Cavalry        25      M8 WS4 BS2
Artillery      50      M2 WS2 BS4
Commander      100     M5 WS5 BS4"""


# ===========================================================================
# split_aligned_cells tests
# ===========================================================================


class TestSplitAlignedCells:

    def test_two_space_gap_splits(self):
        assert split_aligned_cells("Infantry       10      M4 WS3 BS3") == [(0, "Infantry"), (15, "10"), (23, "M4 WS3 BS3")]

    def test_single_space_keeps_words_together(self):
        assert split_aligned_cells("Just a sentence") == [(0, "Just a sentence")]

    def test_leading_indent_offset(self):
        assert split_aligned_cells("   a  b") == [(3, "a"), (6, "b")]


# ===========================================================================
# run / alignment tests
# ===========================================================================


class TestFindAlignedRuns:

    def test_run_of_same_width_lines(self):
        runs = find_aligned_runs(UNITS.split("\n"))
        assert len(runs) == 1
        start, rows = runs[0]
        assert start == 0
        assert len(rows) == 5

    def test_width_change_splits_runs(self):
        lines = ["a  b", "c  d", "e  f", "g  h  i", "j  k  l", "m  n  o"]
        runs = find_aligned_runs(lines)
        assert [(start, len(rows)) for start, rows in runs] == [(0, 3), (3, 3)]

    def test_short_run_ignored(self):
        assert find_aligned_runs(["a  b", "c  d", "", "e  f"]) == []

    def test_tab_lines_are_not_candidates(self):
        assert find_aligned_runs(["a  b\tc", "d  e\tf", "g  h\ti"]) == []


class TestAlignedFraction:

    def test_all_aligned(self):
        rows = [split_aligned_cells(line) for line in UNITS.split("\n")]
        assert aligned_fraction(rows) == 1.0

    def test_right_aligned_numbers_count(self):
        lines = ["Item      Cost", "Sword        50", "Shield      125", "Helmet        5"]
        rows = [split_aligned_cells(line) for line in lines[1:]]
        assert aligned_fraction(rows) == 1.0

    def test_prose_double_spaces_not_aligned(self):
        lines = [
            "He went home.  Then he slept.",
            "A much longer sentence goes here.  Short.",
            "Hi.  There is more text on this line than before.",
        ]
        rows = [split_aligned_cells(line) for line in lines]
        assert aligned_fraction(rows) < 0.5


# ===========================================================================
# detect_aligned_tables tests
# ===========================================================================


class TestDetectAlignedTables:

    def test_units_table(self):
        (table,) = detect_aligned_tables(UNITS)
        assert table.kind == "whitespace-table"
        assert table.columns == ["UNIT", "COST", "STATS"]
        assert len(table.rows) == 4
        assert table.rows[3] == ["Commander", "100", "M5 WS5 BS4"]
        assert table.confidence == "high"
        assert table.title == "Table"
        assert table.raw_text == UNITS

    def test_title_above(self):
        (table,) = detect_aligned_tables("Army List\n" + UNITS)
        assert table.title == "Army List"
        assert table.start_line == 1

    def test_numeric_first_line_gets_synthetic_columns(self):
        text = "1     Rusty sword\n2     Old shield\n3     Gold coins"
        (table,) = detect_aligned_tables(text)
        assert table.columns == ["Column 1", "Column 2"]
        assert len(table.rows) == 3

    def test_partially_aligned_is_medium(self):
        lines = [
            "Name       Cost",
            "Sword      50",
            "Shield     25",
            "Helmet     15",
            "Boots      10",
            "Chainmail      100",
        ]
        (table,) = detect_aligned_tables("\n".join(lines))
        assert table.confidence == "medium"

    def test_prose_rejected(self):
        text = "He went home.  Then he slept.\nA much longer sentence goes here.  Short.\nHi.  There is more text on this line than before."
        assert detect_aligned_tables(text) == []

    def test_plain_text(self):
        assert detect_aligned_tables("hello\nworld") == []


# ===========================================================================
# lines claimed by other detectors
# ===========================================================================

PADDED_MARKDOWN = """\
| Name      | Cost  |
|-----------|-------|
| Sword     | 50gp  |
| Shield    | 25gp  |
| Helmet    | 15gp  |"""

ALIGNED_STATS = """\
Name:      Iron Sword
Damage:    2d6+3
Weight:    3 lbs
Value:     50 gold"""


class TestOtherDetectorsLines:

    def test_padded_pipe_rows_are_not_candidates(self):
        assert not find_aligned_runs(PADDED_MARKDOWN.split("\n"))
        assert detect_aligned_tables(PADDED_MARKDOWN) == []

    def test_pipe_without_outer_pipes_not_candidate(self):
        lines = ["Name      |  Cost", "Sword     |  50gp", "Shield    |  25gp"]
        assert not find_aligned_runs(lines)

    def test_label_fraction(self):
        rows = [split_aligned_cells(line) for line in ALIGNED_STATS.split("\n")]
        assert label_fraction(rows) == 1.0
        assert label_fraction([split_aligned_cells(line) for line in UNITS.split("\n")]) == 0.0

    def test_padded_label_block_rejected(self):
        assert detect_aligned_tables(ALIGNED_STATS) == []
