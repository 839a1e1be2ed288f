"""Output adapters turning a Detection into the shapes the hosting views consume.

to_table_shape feeds the editable-table view (rows keyed by column name, each
with a fresh id); to_sections_shape feeds the editable-card view (one section
per key-value pair, or a single section holding the whole table).
"""

import uuid

from content_detect.schema import Detection, Section, SectionsShape, TableRow, TableShape

CELL_SEPARATOR = " | "
DEFAULT_SECTION_HEADER = "Item"


def to_table_shape(detection: Detection) -> TableShape:
    """Convert positional rows into name-keyed rows with a fresh unique id each.

    Duplicate column names collapse onto one key (the rightmost cell wins).
    """
    rows = []
    for row in detection.rows:
        values = {column: (row[i] if i < len(row) else "") for i, column in enumerate(detection.columns)}
        rows.append(TableRow(id=str(uuid.uuid4()), values=values))
    return TableShape(columns=list(detection.columns), rows=rows, raw_text=detection.raw_text)


def to_sections_shape(detection: Detection) -> SectionsShape:
    """Convert a detection into titled sections.

    Key-value detections give one section per pair; every other kind gives a
    single section titled after the detection, one " | "-joined row per line.
    """
    if detection.kind == "key-value":
        sections = [
            Section(
                header=(row[0] if row else "") or DEFAULT_SECTION_HEADER,
                content=row[1] if len(row) > 1 else "",
            )
            for row in detection.rows
        ]
    else:
        content = "\n".join(CELL_SEPARATOR.join(row) for row in detection.rows)
        sections = [Section(header=detection.title, content=content)]
    return SectionsShape(title=detection.title, sections=sections, raw_text=detection.raw_text)
