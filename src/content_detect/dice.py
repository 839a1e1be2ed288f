"""Dice-roll table detection (d6, d66 and 2d6 random tables).

Rulebooks print random tables as numbered lines under a header naming the die:

    D66 Encounters
    11-13 Goblins
    14-16 Wolves
    21 Bandits
    ...

A block is a run of roll lines whose tokens strictly increase.  Blank lines
inside the run are tolerated and indented non-roll lines continue the previous
result.  The shape of the roll tokens decides which die the table is for, and
the header plus the completeness of the roll sequence decide the confidence.
"""

import logging
from dataclasses import dataclass, field

from content_detect.classifiers import find_block_title, is_blank, named_die, split_lines
from content_detect.patterns import CONTINUATION_RE, ROLL_LINE_RE
from content_detect.schema import Detection

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Dice Roll Table"
COLUMNS = ["Roll", "Result"]

# Every face each die kind can roll, in ascending order
D6_FACES = list(range(1, 7))
D66_FACES = [tens * 10 + ones for tens in range(1, 7) for ones in range(1, 7)]
TWO_D6_FACES = list(range(2, 13))
FACES = {"d6": D6_FACES, "d66": D66_FACES, "2d6": TWO_D6_FACES}

_D66_SET = frozenset(D66_FACES)


@dataclass
class _RollBlock:
    """Accumulator for a run of roll lines while scanning."""

    start: int
    end: int
    spans: list[tuple[int, int]] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    @property
    def upper(self) -> int:
        return self.spans[-1][1]


# ─── Roll Parsing ────────────────────────────────────────────────────────────


def parse_roll_line(line: str) -> tuple[int, int, str, str] | None:
    """Parse a roll line into (low, high, roll_cell, result), or None if it is not one.

    Single rolls have low == high.  A reversed range such as "6-1" is rejected.
    """
    match = ROLL_LINE_RE.match(line)
    if match is None:
        return None
    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) else low
    if high < low:
        return None
    roll_cell = f"{match.group(1)}-{match.group(2)}" if match.group(2) else match.group(1)
    return low, high, roll_cell, match.group(3).strip()


def _close(block: _RollBlock | None, blocks: list[_RollBlock]) -> None:
    """Keep *block* if it has at least two rolls."""
    if block is not None and len(block.rows) >= 2:
        blocks.append(block)


def find_roll_blocks(lines: list[str]) -> list[_RollBlock]:
    """Group consecutive, strictly increasing roll lines into blocks."""
    blocks: list[_RollBlock] = []
    current: _RollBlock | None = None

    for idx, line in enumerate(lines):
        roll = parse_roll_line(line)
        if roll is not None:
            low, high, roll_cell, result = roll
            # A roll that does not follow on from the last one starts a new table
            if current is None or low <= current.upper:
                _close(current, blocks)
                current = _RollBlock(start=idx, end=idx)
            current.spans.append((low, high))
            current.rows.append([roll_cell, result])
            current.end = idx
            continue

        if is_blank(line):
            continue

        # Indented text continues the previous result
        if current is not None and CONTINUATION_RE.match(line):
            current.rows[-1][1] += " " + line.strip()
            current.end = idx
            continue

        _close(current, blocks)
        current = None

    _close(current, blocks)
    return blocks


# ─── Dice Classification ─────────────────────────────────────────────────────


def classify_dice_kind(spans: list[tuple[int, int]], header_die: str | None) -> str | None:
    """Return 'd6', 'd66' or '2d6' from the roll token shapes, or None for mixed shapes.

    Single digits 1-6 are a d6 unless the header says 2d6 and nothing rolls a 1.
    """
    ends = [value for span in spans for value in span]
    if all(value in _D66_SET for value in ends):
        return "d66"
    if all(1 <= value <= 6 for value in ends):
        if header_die == "2d6" and min(ends) >= 2:
            return "2d6"
        return "d6"
    if all(2 <= value <= 12 for value in ends):
        return "2d6"
    return None


def sequence_coverage(spans: list[tuple[int, int]], dice_kind: str) -> tuple[bool, bool]:
    """Return (contiguous, complete) for the faces covered by *spans*.

    Contiguous means the spans cover a gap-free stretch of the die's faces;
    complete means that stretch is every face.
    """
    faces = FACES[dice_kind]
    position = {face: i for i, face in enumerate(faces)}
    covered: list[int] = []
    for low, high in spans:
        covered.extend(range(position[low], position[high] + 1))
    contiguous = covered == list(range(covered[0], covered[0] + len(covered)))
    complete = contiguous and len(covered) == len(faces)
    return contiguous, complete


# ─── Detector ────────────────────────────────────────────────────────────────


def detect_dice_tables(text: str) -> list[Detection]:
    """Return one dice-table Detection per roll block found in *text*."""
    lines = split_lines(text)
    detections: list[Detection] = []

    for block in find_roll_blocks(lines):
        title = find_block_title(lines, block.start)
        header_die = named_die(title) if title else None
        dice_kind = classify_dice_kind(block.spans, header_die)
        if dice_kind is None:
            logger.debug("Roll block at line %d has mixed token shapes; skipping", block.start)
            continue

        _, complete = sequence_coverage(block.spans, dice_kind)
        confidence = "high" if header_die == dice_kind and complete else "medium"
        logger.debug(
            "Dice table at line %d: %s, %d rolls, header die=%s, complete=%s",
            block.start,
            dice_kind,
            len(block.rows),
            header_die,
            complete,
        )
        detections.append(
            Detection(
                kind="dice-table",
                title=title or DEFAULT_TITLE,
                confidence=confidence,
                columns=list(COLUMNS),
                rows=block.rows,
                raw_text="\n".join(lines[block.start : block.end + 1]),
                dice_kind=dice_kind,
                start_line=block.start,
            )
        )

    return detections
