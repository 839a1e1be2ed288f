"""Cross-detector deduplication.

Several detectors can describe the same physical block of text.  Two rules
suppress the repeats, scanning in discovery order:

  - a whitespace table starting within DEDUP_LINE_WINDOW lines of a dice table
    is the same block read less specifically, so the dice table wins;
  - a pipe, tsv, csv or key-value detection whose raw_text length is within
    DEDUP_LENGTH_WINDOW characters of an already kept detection is treated as
    the same block (an approximate heuristic, not an overlap test).
"""

import logging

from content_detect.patterns import DEDUP_LENGTH_WINDOW, DEDUP_LINE_WINDOW
from content_detect.schema import Detection

logger = logging.getLogger(__name__)

# Kinds subject to the raw_text length rule
LENGTH_CHECKED_KINDS = frozenset({"pipe-table", "tsv", "csv", "key-value"})


def _shadowed_by_dice(detection: Detection, dice_starts: list[int]) -> bool:
    """Return True if a whitespace table starts next to a dice table."""
    if detection.kind != "whitespace-table":
        return False
    return any(abs(start - detection.start_line) < DEDUP_LINE_WINDOW for start in dice_starts)


def _same_length_as_kept(detection: Detection, kept: list[Detection]) -> bool:
    """Return True if a length-checked detection matches a kept one's raw_text length."""
    if detection.kind not in LENGTH_CHECKED_KINDS:
        return False
    length = len(detection.raw_text)
    return any(abs(len(other.raw_text) - length) < DEDUP_LENGTH_WINDOW for other in kept)


def deduplicate(detections: list[Detection]) -> list[Detection]:
    """Return *detections* minus the ones describing an already covered block, order preserved."""
    dice_starts = [d.start_line for d in detections if d.kind == "dice-table"]
    kept: list[Detection] = []

    for detection in detections:
        if _shadowed_by_dice(detection, dice_starts):
            logger.debug("Dedup: dropping whitespace table at line %d (dice table nearby)", detection.start_line)
            continue
        if _same_length_as_kept(detection, kept):
            logger.debug("Dedup: dropping %s (%d chars, same block as a kept detection)", detection.kind, len(detection.raw_text))
            continue
        kept.append(detection)

    return kept
