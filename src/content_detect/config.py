"""Size limits for the detection pipeline and their environment overrides."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()

DEFAULT_MAX_CHARS = 60_000
DEFAULT_MAX_ROWS = 300
DEFAULT_MAX_COLS = 25

# Environment variable -> DetectionLimits field
ENV_VARS = {
    "CONTENT_DETECT_MAX_CHARS": "max_chars",
    "CONTENT_DETECT_MAX_ROWS": "max_rows",
    "CONTENT_DETECT_MAX_COLS": "max_cols",
}


class DetectionLimits(BaseModel):
    """Hard caps applied by the pipeline.

    max_chars bounds the text any detector sees; max_rows / max_cols bound each
    surviving detection after detection has finished.
    """

    max_chars: int = Field(default=DEFAULT_MAX_CHARS, gt=0)
    max_rows: int = Field(default=DEFAULT_MAX_ROWS, gt=0)
    max_cols: int = Field(default=DEFAULT_MAX_COLS, gt=0)


def load_limits() -> DetectionLimits:
    """Build DetectionLimits from the environment (and ROOT/.env), falling back to defaults."""
    load_dotenv(ROOT / ".env")
    overrides: dict[str, int] = {}
    for var, field in ENV_VARS.items():
        raw = os.getenv(var, "").strip()
        if not raw:
            continue
        try:
            overrides[field] = int(raw)
        except ValueError as exc:
            raise ValueError(f"{var} must be an integer, got {raw!r}") from exc
    if overrides:
        logger.info("Limit overrides from environment: %s", overrides)
    return DetectionLimits(**overrides)
