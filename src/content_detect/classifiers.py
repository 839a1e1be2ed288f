"""Line and cell classification helpers for structured content detection.

Each function takes a line, a cell, or a list of lines and answers one small
question about it: is it blank, is it a number, does it look like a header
row, is it a markdown separator, which die does a header name, and what title
sits above a block.
"""

from content_detect.patterns import (
    DIE_EXPR_RE,
    HEADER_MAX_CHARS,
    PURE_NUMBER_RE,
    ROLL_LINE_RE,
    SEPARATOR_CHARS,
    TITLE_LOOKBACK,
    TITLE_MAX_CHARS,
    TITLE_TRAILER_RE,
)


def split_lines(text: str) -> list[str]:
    """Split text into lines, accepting \\n, \\r\\n and \\r endings."""
    return text.splitlines()


def is_blank(line: str) -> bool:
    """Return True if the line has no visible characters."""
    return not line.strip()


def non_blank_lines(text: str) -> list[str]:
    """Return every line of *text* that has visible characters (untrimmed)."""
    return [line for line in split_lines(text) if not is_blank(line)]


def is_pure_number(cell: str) -> bool:
    """Return True if the cell is an integer, decimal or simple fraction."""
    return bool(PURE_NUMBER_RE.match(cell.strip()))


def is_header_like(cells: list[str]) -> bool:
    """Return True if every cell is short and non-numeric, i.e. usable as a column name."""
    return all(len(cell) < HEADER_MAX_CHARS and not is_pure_number(cell) for cell in cells)


def synthetic_columns(count: int) -> list[str]:
    """Return generated column names "Column 1" .. "Column <count>"."""
    return [f"Column {i + 1}" for i in range(count)]


def is_separator_line(line: str) -> bool:
    """Return True for a markdown header/body separator such as '|---|:---:|'."""
    stripped = line.strip()
    return "-" in stripped and set(stripped) <= SEPARATOR_CHARS


def is_roll_line(line: str) -> bool:
    """Return True if the line starts with a dice roll token followed by a result."""
    return bool(ROLL_LINE_RE.match(line))


def named_die(header: str) -> str | None:
    """Return the die expression ('d6', 'd66' or '2d6') named in a header line, if any."""
    match = DIE_EXPR_RE.search(header)
    if match is None:
        return None
    die = match.group(1).lower()
    # "1d6" is just a verbose "d6"
    return "d6" if die == "1d6" else die


def _is_title_candidate(line: str) -> bool:
    """Return True if a line above a block could be that block's title."""
    stripped = line.strip()
    if not stripped or len(stripped) >= TITLE_MAX_CHARS:
        return False
    # Rows of a neighbouring table are never titles
    if stripped.startswith("|") or "\t" in stripped:
        return False
    return not is_roll_line(stripped)


def find_block_title(lines: list[str], start: int) -> str | None:
    """Look back up to TITLE_LOOKBACK lines above *start* for a short title line.

    Blank lines are skipped; the first non-blank line decides.  Returns the
    title with trailing colons / dashes stripped, or None if there is none.
    """
    for i in range(start - 1, max(-1, start - 1 - TITLE_LOOKBACK), -1):
        line = lines[i]
        if is_blank(line):
            continue
        if _is_title_candidate(line):
            return TITLE_TRAILER_RE.sub("", line.strip()).strip() or None
        return None
    return None
