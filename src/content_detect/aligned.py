"""Whitespace-aligned table detection (fixed-width columns, common in rulebooks).

    UNIT           COST    STATS
    Infantry       10      M4 WS3 BS3
    Cavalry        25      M8 WS4 BS2

Cells are separated by gaps of two or more spaces.  A table is a run of at
least three consecutive lines that split into the same number of cells; the
run's confidence depends on how many of its lines put each cell at the same
horizontal offset as the rest of its column.
"""

import logging
from collections import Counter

from content_detect.classifiers import find_block_title, is_header_like, split_lines, synthetic_columns
from content_detect.patterns import (
    ALIGNED_CELL_RE,
    ALIGNED_HIGH_RATIO,
    ALIGNED_MIN_LINES,
    ALIGNED_MIN_RATIO,
    ALIGNED_OFFSET_TOLERANCE,
    KEY_VALUE_LINE_RATIO,
)
from content_detect.pipe import split_pipe_cells
from content_detect.schema import Detection

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Table"

# One aligned cell: (start offset in the line, cell text)
Cell = tuple[int, str]


def split_aligned_cells(line: str) -> list[Cell]:
    """Split *line* on gaps of two or more spaces, keeping each cell's start offset."""
    return [(match.start(), match.group()) for match in ALIGNED_CELL_RE.finditer(line)]


def _candidate_cells(line: str) -> list[Cell] | None:
    """Return the cells of a line that could be a table row, or None."""
    # Tab-delimited lines belong to the TSV pass, pipe rows to the pipe pass
    if "\t" in line:
        return None
    stripped = line.strip()
    if stripped.startswith("|") or stripped.endswith("|") or split_pipe_cells(line) is not None:
        return None
    cells = split_aligned_cells(line)
    return cells if len(cells) >= 2 else None


def label_fraction(run: list[list[Cell]]) -> float:
    """Return the fraction of lines whose first cell is a 'Label:' key."""
    return sum(1 for row in run if len(row[0][1]) > 1 and row[0][1].endswith(":")) / len(run)


def aligned_fraction(run: list[list[Cell]]) -> float:
    """Return the fraction of lines whose cells all sit at their column's modal start or end offset."""
    n_cols = len(run[0])
    starts = [Counter(row[c][0] for row in run).most_common(1)[0][0] for c in range(n_cols)]
    ends = [Counter(row[c][0] + len(row[c][1]) for row in run).most_common(1)[0][0] for c in range(n_cols)]

    def is_aligned(row: list[Cell]) -> bool:
        # Left-aligned text shares a start offset, right-aligned numbers share an end offset
        return all(
            abs(offset - starts[c]) <= ALIGNED_OFFSET_TOLERANCE
            or abs(offset + len(cell) - ends[c]) <= ALIGNED_OFFSET_TOLERANCE
            for c, (offset, cell) in enumerate(row)
        )

    return sum(1 for row in run if is_aligned(row)) / len(run)


def find_aligned_runs(lines: list[str]) -> list[tuple[int, list[list[Cell]]]]:
    """Return (start_line, cell rows) for every run of same-width candidate lines."""
    runs: list[tuple[int, list[list[Cell]]]] = []
    start = -1
    current: list[list[Cell]] = []

    for idx, line in enumerate(lines):
        cells = _candidate_cells(line)
        if cells is not None and current and len(cells) == len(current[0]):
            current.append(cells)
            continue
        # Anything else ends the current run
        if len(current) >= ALIGNED_MIN_LINES:
            runs.append((start, current))
        start, current = (idx, [cells]) if cells is not None else (-1, [])

    if len(current) >= ALIGNED_MIN_LINES:
        runs.append((start, current))
    return runs


def detect_aligned_tables(text: str) -> list[Detection]:
    """Return one whitespace-table Detection per aligned run found in *text*."""
    lines = split_lines(text)
    detections: list[Detection] = []

    for start, run in find_aligned_runs(lines):
        fraction = aligned_fraction(run)
        if fraction < ALIGNED_MIN_RATIO:
            logger.debug("Run at line %d is only %.0f%% aligned; skipping", start, fraction * 100)
            continue
        # Padded "Label:   value" lines belong to the key-value pass
        if label_fraction(run) >= KEY_VALUE_LINE_RATIO:
            logger.debug("Run at line %d is a label/value block; skipping", start)
            continue

        # First line doubles as the header when it reads like column names
        first = [cell for _, cell in run[0]]
        if is_header_like(first):
            columns, body = first, run[1:]
        else:
            columns, body = synthetic_columns(len(first)), run
        rows = [[cell for _, cell in row] for row in body]

        logger.debug("Aligned table at line %d: %d columns, %d rows", start, len(columns), len(rows))
        detections.append(
            Detection(
                kind="whitespace-table",
                title=find_block_title(lines, start) or DEFAULT_TITLE,
                confidence="high" if fraction >= ALIGNED_HIGH_RATIO else "medium",
                columns=columns,
                rows=rows,
                raw_text="\n".join(lines[start : start + len(run)]),
                start_line=start,
            )
        )

    return detections
