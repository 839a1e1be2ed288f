"""Row and column caps applied to each surviving detection.

Caps run after detection and deduplication so they never influence which
strategy wins.  This is also where every row is squared up to exactly
len(columns) cells, which is the shape guarantee callers rely on.
"""

import logging

from content_detect.schema import Detection

logger = logging.getLogger(__name__)


def enforce_bounds(detection: Detection, max_rows: int, max_cols: int) -> Detection:
    """Return a copy of *detection* with rows/columns capped and every row exactly len(columns) wide.

    Each cap that bites appends a warning naming the true count; existing
    warnings are kept.
    """
    columns = list(detection.columns)
    rows = detection.rows
    warnings = list(detection.warnings)

    if len(rows) > max_rows:
        warnings.append(f"rows limited to {max_rows} ({len(rows)} detected)")
        logger.debug("Capping %s rows %d -> %d", detection.kind, len(rows), max_rows)
        rows = rows[:max_rows]

    if len(columns) > max_cols:
        warnings.append(f"columns limited to {max_cols} ({len(columns)} detected)")
        logger.debug("Capping %s columns %d -> %d", detection.kind, len(columns), max_cols)
        columns = columns[:max_cols]

    width = len(columns)
    squared = [(list(row) + [""] * (width - len(row)))[:width] for row in rows]
    return detection.model_copy(update={"columns": columns, "rows": squared, "warnings": warnings})
