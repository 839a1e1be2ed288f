"""Line-list fallback: one row per non-blank line when nothing else matched."""

from content_detect.classifiers import non_blank_lines
from content_detect.schema import Detection

TITLE = "Content"
FALLBACK_WARNING = "no table structure detected; treating each line as a row."


def detect_lines(text: str) -> Detection | None:
    """Return a low-confidence lines Detection, or None if *text* is blank."""
    lines = non_blank_lines(text)
    if not lines:
        return None
    return Detection(
        kind="lines",
        title=TITLE,
        confidence="low",
        columns=["Content"],
        rows=[[line.strip()] for line in lines],
        raw_text=text,
        warnings=[FALLBACK_WARNING],
    )
