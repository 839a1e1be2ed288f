"""Key-value list detection ("Damage: 2d6+3" style stat blocks)."""

import logging

from content_detect.classifiers import non_blank_lines
from content_detect.patterns import HIGH_CONFIDENCE_ROWS, KEY_VALUE_LINE_RATIO
from content_detect.schema import Detection

logger = logging.getLogger(__name__)

TITLE = "Key-Value Data"
COLUMNS = ["Property", "Value"]


def split_key_value(line: str) -> tuple[str, str] | None:
    """Split "label: value" at the first colon, or return None if either side is empty."""
    label, sep, value = line.partition(":")
    if not sep or not label.strip() or not value.strip():
        return None
    return label.strip(), value.strip()


def detect_key_value(text: str) -> Detection | None:
    """Return a key-value Detection if at least half the non-blank lines are "label: value" pairs.

    Lines that are not pairs are kept as ["", line] so nothing is lost.
    """
    lines = non_blank_lines(text)
    if len(lines) < 2:
        return None

    pairs = [split_key_value(line) for line in lines]
    n_pairs = sum(1 for pair in pairs if pair is not None)
    if n_pairs < len(lines) * KEY_VALUE_LINE_RATIO:
        return None

    rows = [list(pair) if pair is not None else ["", line.strip()] for pair, line in zip(pairs, lines)]
    logger.debug("Key-value detection: %d pairs across %d lines", n_pairs, len(lines))
    return Detection(
        kind="key-value",
        title=TITLE,
        confidence="high" if n_pairs >= HIGH_CONFIDENCE_ROWS else "medium",
        columns=list(COLUMNS),
        rows=rows,
        raw_text=text,
    )
