"""Compiled regex patterns and threshold constants for structured content detection.

These patterns identify structural elements in raw pasted text: dice-roll
lines, die expressions in headers, aligned-column gaps and numeric cells.
Used by classifiers.py and the individual detector modules.

Every pattern here is anchored and free of nested quantifiers so that matching
stays linear in the line length, whatever the input looks like.
"""

import re

# ─── Dice Patterns ────────────────────────────────────────────────────────────

# Roll line such as "3 Goblins", "1-2 Nothing", "11–16 Wolves", "4. Storm", "5 - Ambush".
# Group 1 = roll (or range start), group 2 = range end, group 3 = result text.
# Token and result must be separated by spaces; tabs are left to the TSV pass.
ROLL_LINE_RE = re.compile(r"^\s*(\d{1,2})(?:\s*[-–—]\s*(\d{1,2}))?(?:[.):]| +[-–—:.])? +(\S.*)$")

# Die expression named in a header, e.g. "D66 Encounters", "Roll 2d6", "1D6 Loot"
DIE_EXPR_RE = re.compile(r"\b(2d6|d66|1?d6)\b", re.IGNORECASE)

# Indented continuation of the previous roll result
CONTINUATION_RE = re.compile(r"^\s{2,}[^\s\d]")


# ─── Cell Patterns ────────────────────────────────────────────────────────────

# Pure number (integer, decimal, or fraction like "1/2")
PURE_NUMBER_RE = re.compile(r"^-?\d+$|^-?\d+\.\d+$|^\d+/\d+$")

# A cell in a whitespace-aligned line: words joined by single spaces
ALIGNED_CELL_RE = re.compile(r"\S+(?: \S+)*")

# Trailing punctuation stripped from inferred titles ("Random Events:" -> "Random Events")
TITLE_TRAILER_RE = re.compile(r"[:\-–—]+$")


# ─── Character Sets ───────────────────────────────────────────────────────────

# Characters allowed in a markdown header/body separator line ("|---|:--:|")
SEPARATOR_CHARS = frozenset("-|: ")


# ─── Thresholds ──────────────────────────────────────────────────────────────

# Header cells must be shorter than this to be used as column names
HEADER_MAX_CHARS = 50

# Titles are looked up at most this many lines above a block, and must be shorter than TITLE_MAX_CHARS
TITLE_LOOKBACK = 3
TITLE_MAX_CHARS = 80

# Fraction of non-blank lines that must carry a tab / comma for the TSV / CSV passes
DELIMITER_LINE_RATIO = 0.7

# Fraction of rows whose column count must be within +/-1 of the modal count
ROW_SHAPE_RATIO = 0.7

# Fraction of non-blank lines that must be "label: value" pairs
KEY_VALUE_LINE_RATIO = 0.5

# Whitespace-aligned runs: minimum lines, aligned fraction for "high", minimum aligned fraction at all
ALIGNED_MIN_LINES = 3
ALIGNED_HIGH_RATIO = 0.9
ALIGNED_MIN_RATIO = 0.5

# Alignment tolerance (characters) around a column's modal start / end offset
ALIGNED_OFFSET_TOLERANCE = 1

# Data-row count at which delimited and key-value detections become "high"
HIGH_CONFIDENCE_ROWS = 5

# Dedup: dice / whitespace start lines closer than this describe the same block
DEDUP_LINE_WINDOW = 3

# Dedup: raw_text lengths closer than this are treated as the same block
DEDUP_LENGTH_WINDOW = 50
