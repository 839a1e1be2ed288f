"""Main detection pipeline: analyze() entry point and command line.

Orchestrates one pass over a block of text:

  preprocess -> primitive detectors -> dedup -> fallback (only if nothing
  survived) -> bound enforcement -> ranking

Every primitive detector runs on every call, in a fixed discovery order, and
sees only the size-bounded text.  The pipeline holds no state between calls.

Usage:
  python -m content_detect.pipeline notes.txt --shape table
  pbpaste | python -m content_detect.pipeline --verbose
"""

import argparse
import logging
import sys
from typing import Callable

from content_detect.adapters import to_sections_shape, to_table_shape
from content_detect.aligned import detect_aligned_tables
from content_detect.bounds import enforce_bounds
from content_detect.config import DetectionLimits, load_limits
from content_detect.dedup import deduplicate
from content_detect.delimited import detect_csv, detect_tsv
from content_detect.dice import detect_dice_tables
from content_detect.fallback import detect_lines
from content_detect.key_value import detect_key_value
from content_detect.pipe import detect_pipe_tables
from content_detect.ranking import pick_best
from content_detect.schema import Detection, ParseResult

logger = logging.getLogger(__name__)

DetectorFn = Callable[[str], list[Detection] | Detection | None]

# Discovery order matters: dedup keeps the earlier of two same-block detections
PRIMITIVE_DETECTORS: tuple[tuple[str, DetectorFn], ...] = (
    ("dice", detect_dice_tables),
    ("whitespace", detect_aligned_tables),
    ("pipe", detect_pipe_tables),
    ("tsv", detect_tsv),
    ("csv", detect_csv),
    ("key-value", detect_key_value),
)


# ─── Stages ──────────────────────────────────────────────────────────────────


def preprocess(raw_text: str, max_chars: int) -> tuple[str, bool, list[str]]:
    """Cut *raw_text* to at most *max_chars* characters.

    Returns (text, truncated, notices) where notices holds the truncation
    warning to attach to every detection of this call.
    """
    if len(raw_text) <= max_chars:
        return raw_text, False, []
    logger.info("Input of %d chars truncated to %d", len(raw_text), max_chars)
    return raw_text[:max_chars], True, [f"text truncated to {max_chars:,} characters"]


def _run_detector(name: str, detector: DetectorFn, text: str) -> list[Detection]:
    """Run one detector, normalising its result to a list.

    A detector that raises is logged and treated as having found nothing, so
    analyze() itself never raises.
    """
    try:
        found = detector(text)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.error("Detector %s failed: %s", name, exc)
        return []
    if found is None:
        return []
    return found if isinstance(found, list) else [found]


def _with_notices(detection: Detection, notices: list[str]) -> Detection:
    """Prefix call-wide notices (truncation) to a detection's own warnings."""
    if not notices:
        return detection
    return detection.model_copy(update={"warnings": [*notices, *detection.warnings]})


# ─── Entry Point ─────────────────────────────────────────────────────────────


def analyze(raw_text: str, limits: DetectionLimits | None = None) -> ParseResult:
    """Detect every structured reading of *raw_text* and pick the best one.

    `limits` carries the character, row and column caps; the defaults apply
    when it is None.  Blank input yields no detections and no best match.
    """
    limits = limits or DetectionLimits()

    # ── 1. Bound the input ───────────────────────────────────────────────
    text, truncated, notices = preprocess(raw_text, limits.max_chars)

    # ── 2. Run every primitive detector ──────────────────────────────────
    found: list[Detection] = []
    for name, detector in PRIMITIVE_DETECTORS:
        found.extend(_run_detector(name, detector, text))

    # ── 3. Drop repeats of the same block ────────────────────────────────
    surviving = deduplicate(found)

    # ── 4. Fall back to one row per line ─────────────────────────────────
    if not surviving:
        surviving = _run_detector("lines", detect_lines, text)

    # ── 5. Cap rows / columns and square every row ───────────────────────
    detections = [enforce_bounds(_with_notices(d, notices), limits.max_rows, limits.max_cols) for d in surviving]

    # ── 6. Rank ──────────────────────────────────────────────────────────
    best = pick_best(detections)
    logger.debug(
        "Analyzed %d chars: %d found, %d kept, best=%s",
        len(text),
        len(found),
        len(detections),
        f"{best.kind}/{best.confidence}" if best else None,
    )

    return ParseResult(
        detections=detections,
        best_match=best,
        truncated=truncated,
        raw_char_count=len(raw_text),
    )


# ─── Command Line ────────────────────────────────────────────────────────────


def _read_input(path: str) -> str:
    """Read the text to analyze from *path*, or from stdin for '-'."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as fopen:
        return fopen.read()


def main(argv: list[str] | None = None) -> int:
    """Analyze a text file (or stdin) and print the report or an adapter shape as JSON."""
    parser = argparse.ArgumentParser(description="Detect tables, dice-roll lists and key-value blocks in text")
    parser.add_argument("file", nargs="?", default="-", help="Text file to analyze (default: stdin)")
    parser.add_argument("--shape", choices=["report", "table", "sections"], default="report", help="Output shape (default: report)")
    parser.add_argument("--max-chars", type=int, default=None, help="Character ceiling (default: from environment, else 60000)")
    parser.add_argument("--max-rows", type=int, default=None, help="Row cap per detection (default: from environment, else 300)")
    parser.add_argument("--max-cols", type=int, default=None, help="Column cap per detection (default: from environment, else 25)")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    # Flags override the environment, which overrides the defaults
    flags = {"max_chars": args.max_chars, "max_rows": args.max_rows, "max_cols": args.max_cols}
    try:
        limits = load_limits()
        limits = DetectionLimits(**{**limits.model_dump(), **{k: v for k, v in flags.items() if v is not None}})
    except ValueError as exc:
        parser.error(str(exc))

    try:
        raw_text = _read_input(args.file)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.file, exc)
        return 1

    result = analyze(raw_text, limits)
    logger.info(
        "%d detection(s) in %d chars; best match: %s",
        len(result.detections),
        result.raw_char_count,
        result.best_match.kind if result.best_match else "none",
    )

    if args.shape == "report":
        print(result.model_dump_json(indent=2))
        return 0

    if result.best_match is None:
        logger.error("Input is blank; nothing to convert to a %s shape", args.shape)
        return 1
    shape = to_table_shape(result.best_match) if args.shape == "table" else to_sections_shape(result.best_match)
    print(shape.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
