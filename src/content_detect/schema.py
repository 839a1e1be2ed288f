"""Pydantic models for detections, parse results and adapter output shapes.

A Detection is one candidate structured reading of (part of) the input.  Its
`kind` is a Literal tag rather than a subclass, so every consumer handles all
seven kinds through the same fields.  ParseResult is the single value returned
by pipeline.analyze(); TableShape and SectionsShape are the two adapter outputs
handed to the hosting application.
"""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

DetectionKind = Literal["dice-table", "whitespace-table", "pipe-table", "tsv", "csv", "key-value", "lines"]
Confidence = Literal["high", "medium", "low"]
DiceKind = Literal["d6", "d66", "2d6"]

# Ranking weight per confidence tier (high > medium > low)
CONFIDENCE_WEIGHTS: dict[str, int] = {"high": 3, "medium": 2, "low": 1}


class Detection(BaseModel):
    """One candidate structured interpretation of a block of text.

    Rows are only guaranteed to be exactly len(columns) wide once the bound
    enforcer has run; detectors may emit ragged rows (pipe tables often do).
    `start_line` is the zero-based line index of the block in the bounded
    input and is used by the deduplicator.
    """

    kind: DetectionKind
    title: str
    confidence: Confidence
    columns: list[str]
    rows: list[list[str]]
    raw_text: str
    dice_kind: DiceKind | None = None
    start_line: int = 0
    warnings: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_dice_kind(self) -> "Detection":
        """Ensure dice_kind is set for dice tables and only for dice tables."""
        if self.kind == "dice-table" and self.dice_kind is None:
            raise ValueError("dice-table detections must carry a dice_kind")
        if self.kind != "dice-table" and self.dice_kind is not None:
            raise ValueError(f"{self.kind} detections cannot carry a dice_kind")
        return self

    @property
    def is_rectangular(self) -> bool:
        """True if every row has exactly len(columns) cells."""
        width = len(self.columns)
        return all(len(row) == width for row in self.rows)


class ParseResult(BaseModel):
    """Everything analyze() found in one call.

    `detections` keeps discovery order; `best_match` is None only when the
    input had no visible characters at all.
    """

    detections: list[Detection]
    best_match: Detection | None
    truncated: bool
    raw_char_count: int


# ─── Adapter Shapes ──────────────────────────────────────────────────────────


class TableRow(BaseModel):
    """One table row: a fresh id plus its cells keyed by column name."""

    id: str
    values: dict[str, str]


class TableShape(BaseModel):
    """Row/column shape consumed by the editable-table view."""

    columns: list[str]
    rows: list[TableRow]
    raw_text: str
    parsing_mode: Literal["auto"] = "auto"


class Section(BaseModel):
    """One titled card: a header line and its body text."""

    header: str
    content: str


class SectionsShape(BaseModel):
    """Titled-sections shape consumed by the editable-card view."""

    title: str
    sections: list[Section]
    raw_text: str
    parsing_mode: Literal["auto"] = "auto"
