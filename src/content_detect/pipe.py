"""Pipe-delimited (markdown style) table detection.

    | Name  | Cost |
    |-------|-----:|
    | Sword | 50gp |

Leading and trailing pipes are optional, one separator line is tolerated
between the header and the body, and a backslash-escaped pipe stays inside its
cell as a literal "|".
"""

import logging

from content_detect.classifiers import find_block_title, is_separator_line, split_lines
from content_detect.schema import Detection

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Table"


def split_pipe_cells(line: str) -> list[str] | None:
    """Split a line on unescaped pipes, or return None if it is not a pipe row.

    Optional outer pipes are dropped and cells are trimmed.  A row needs at
    least two cells.
    """
    stripped = line.strip()
    cells: list[str] = []
    current: list[str] = []
    saw_pipe = False
    trailing_pipe = False

    i = 0
    while i < len(stripped):
        char = stripped[i]
        if char == "\\" and i + 1 < len(stripped) and stripped[i + 1] == "|":
            current.append("|")
            i += 2
            continue
        if char == "|":
            cells.append("".join(current).strip())
            current = []
            saw_pipe = True
            trailing_pipe = i == len(stripped) - 1
        else:
            current.append(char)
        i += 1
    cells.append("".join(current).strip())

    if not saw_pipe:
        return None
    # The text before a leading pipe and after a trailing pipe is not a cell
    if stripped.startswith("|"):
        cells = cells[1:]
    if trailing_pipe:
        cells = cells[:-1]
    return cells if len(cells) >= 2 else None


def _build_detection(lines: list[str], start: int, end: int, rows: list[list[str]], has_separator: bool) -> Detection:
    """Turn a closed block of parsed pipe rows (header first) into a Detection."""
    header, body = rows[0], rows[1:]
    confidence = "high" if has_separator and len(body) >= 2 else "medium"
    logger.debug("Pipe table at line %d: %d columns, %d rows, separator=%s", start, len(header), len(body), has_separator)
    return Detection(
        kind="pipe-table",
        title=find_block_title(lines, start) or DEFAULT_TITLE,
        confidence=confidence,
        columns=header,
        rows=body,
        raw_text="\n".join(lines[start : end + 1]),
        start_line=start,
    )


def detect_pipe_tables(text: str) -> list[Detection]:
    """Return one pipe-table Detection per block of consecutive pipe rows in *text*."""
    lines = split_lines(text)
    detections: list[Detection] = []

    start = -1
    rows: list[list[str]] = []
    has_separator = False

    def close(end: int) -> None:
        # A table needs a header and at least one data row
        if len(rows) >= 2:
            detections.append(_build_detection(lines, start, end, rows, has_separator))

    for idx, line in enumerate(lines):
        # The separator is only accepted once, directly after the header
        if len(rows) == 1 and not has_separator and is_separator_line(line):
            has_separator = True
            continue

        cells = None if is_separator_line(line) else split_pipe_cells(line)
        if cells is not None:
            if not rows:
                start = idx
            rows.append(cells)
            continue

        close(idx - 1)
        start, rows, has_separator = -1, [], False

    close(len(lines) - 1)
    return detections
