"""Confidence ranking and best-match selection."""

from content_detect.schema import CONFIDENCE_WEIGHTS, Detection


def score(detection: Detection) -> int:
    """Confidence tier dominates; row count breaks ties within a tier."""
    return CONFIDENCE_WEIGHTS[detection.confidence] * 1000 + len(detection.rows)


def pick_best(detections: list[Detection]) -> Detection | None:
    """Return the highest-scoring detection, keeping the earliest one on ties."""
    best: Detection | None = None
    best_score = -1
    for detection in detections:
        current = score(detection)
        # Strictly greater: an equal score never displaces an earlier detection
        if current > best_score:
            best, best_score = detection, current
    return best
