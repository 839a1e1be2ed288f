"""Tab- and comma-separated value detection.

Both passes look at the whole text rather than at blocks: the tab pass fires
when most non-blank lines carry a tab, the comma pass when most carry a comma
and the text is not already tab-delimited.  Each pass then checks that the
rows have a consistent width before inferring a header and normalising rows.
"""

import logging
from collections import Counter

from content_detect.classifiers import is_header_like, non_blank_lines, synthetic_columns
from content_detect.patterns import DELIMITER_LINE_RATIO, HIGH_CONFIDENCE_ROWS, ROW_SHAPE_RATIO
from content_detect.schema import Detection

logger = logging.getLogger(__name__)

TSV_TITLE = "Tab-Separated Data"
CSV_TITLE = "CSV Data"


# ─── Line Splitting ──────────────────────────────────────────────────────────


def split_tsv_line(line: str) -> list[str]:
    """Split a line strictly on tabs, trimming each cell."""
    return [cell.strip() for cell in line.split("\t")]


def split_csv_line(line: str) -> list[str]:
    """Split a line on commas outside double quotes, trimming each cell.

    A quote toggles quote mode; inside quote mode a doubled quote is a literal
    quote character and commas do not split.
    """
    cells: list[str] = []
    current: list[str] = []
    in_quotes = False

    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    cells.append("".join(current).strip())
    return cells


# ─── Shape Checks ────────────────────────────────────────────────────────────


def line_ratio(lines: list[str], needle: str) -> float:
    """Return the fraction of *lines* containing *needle*."""
    return sum(1 for line in lines if needle in line) / len(lines) if lines else 0.0


def modal_width(rows: list[list[str]]) -> int:
    """Return the most common row width (ties go to the width seen first)."""
    return Counter(len(row) for row in rows).most_common(1)[0][0]


def has_consistent_shape(rows: list[list[str]], mode: int) -> bool:
    """Return True if enough rows are within one cell of the modal width."""
    consistent = sum(1 for row in rows if abs(len(row) - mode) <= 1)
    return consistent >= len(rows) * ROW_SHAPE_RATIO


def normalise_rows(rows: list[list[str]], width: int) -> list[list[str]]:
    """Pad short rows with empty cells and cut long rows to *width*."""
    return [(row + [""] * (width - len(row)))[:width] for row in rows]


def _build_detection(kind: str, title: str, text: str, rows: list[list[str]]) -> Detection | None:
    """Verify row shape, infer the header and build the Detection, or return None."""
    mode = modal_width(rows)
    if not has_consistent_shape(rows, mode):
        logger.debug("%s rows are ragged around width %d; no detection", kind, mode)
        return None

    first = rows[0]
    if is_header_like(first):
        columns, body = first, rows[1:]
    else:
        columns, body = synthetic_columns(mode), rows
    body = normalise_rows(body, len(columns))

    logger.debug("%s detection: %d columns, %d rows", kind, len(columns), len(body))
    return Detection(
        kind=kind,
        title=title,
        confidence="high" if len(body) >= HIGH_CONFIDENCE_ROWS else "medium",
        columns=columns,
        rows=body,
        raw_text=text,
    )


# ─── Detectors ───────────────────────────────────────────────────────────────


def detect_tsv(text: str) -> Detection | None:
    """Return a tsv Detection if most non-blank lines are tab-delimited."""
    lines = non_blank_lines(text)
    if len(lines) < 2 or line_ratio(lines, "\t") < DELIMITER_LINE_RATIO:
        return None
    return _build_detection("tsv", TSV_TITLE, text, [split_tsv_line(line) for line in lines])


def detect_csv(text: str) -> Detection | None:
    """Return a csv Detection if most non-blank lines carry commas and the text is not tab-delimited."""
    lines = non_blank_lines(text)
    if len(lines) < 2:
        return None
    # Tab-delimited text is claimed by the tab pass, even when its cells hold commas
    if line_ratio(lines, "\t") >= DELIMITER_LINE_RATIO or line_ratio(lines, ",") < DELIMITER_LINE_RATIO:
        return None
    return _build_detection("csv", CSV_TITLE, text, [split_csv_line(line) for line in lines])
