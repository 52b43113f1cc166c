# chronologizer/layout.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .axis import AxisMapper
from .config import TimelineConfig
from .dateparse import format_instant
from .model import Entry, ScaleInfo

# Offsets relative to a row baseline (pixels).
ROW_BASELINE = 30
POINT_DATE_DY = -25
POINT_LABEL_DY = 25
RANGE_DATE_DY = -10
RANGE_LABEL_DY = 20
POINT_DELETE_DX = 50
RANGE_DELETE_DX = 30
MARKER_RADIUS = 7


@dataclass(frozen=True)
class TextItem:
    x: float
    y: float
    text: str
    anchor: str  # "start" | "middle" | "end"


@dataclass(frozen=True)
class RowLayout:
    index: int
    entry: Entry
    y: float
    start_x: float
    end_x: float
    dates: Tuple[TextItem, ...]
    label: Optional[TextItem]
    delete_x: float
    editing: bool = False

    @property
    def is_point(self) -> bool:
        return self.entry.is_point


@dataclass(frozen=True)
class TimelineLayout:
    width: int
    height: int
    scale: Optional[ScaleInfo]
    rows: Tuple[RowLayout, ...]


def _row(index: int, entry: Entry, y: float, mapper: AxisMapper, scale: ScaleInfo, editing: bool) -> RowLayout:
    start_x = mapper.project(entry.start, scale)
    end_x = mapper.project(entry.end, scale)

    if entry.is_point:
        dates: Tuple[TextItem, ...] = (
            TextItem(start_x, y + POINT_DATE_DY, format_instant(entry.start), "middle"),
        )
        label_pos = (start_x, y + POINT_LABEL_DY)
        delete_x = start_x + POINT_DELETE_DX
    else:
        dates = (
            TextItem(start_x, y + RANGE_DATE_DY, format_instant(entry.start), "start"),
            TextItem(end_x, y + RANGE_DATE_DY, format_instant(entry.end), "end"),
        )
        label_pos = ((start_x + end_x) / 2, y + RANGE_LABEL_DY)
        delete_x = end_x + RANGE_DELETE_DX

    label = None
    if entry.label or editing:
        label = TextItem(label_pos[0], label_pos[1], entry.label, "middle")

    return RowLayout(
        index=index,
        entry=entry,
        y=y,
        start_x=start_x,
        end_x=end_x,
        dates=dates,
        label=label,
        delete_x=delete_x,
        editing=editing,
    )


def build_layout(
    entries: Sequence[Entry],
    config: TimelineConfig,
    *,
    editing_index: Optional[int] = None,
) -> TimelineLayout:
    """Pixel geometry for every row, recomputed from scratch."""
    if not entries:
        return TimelineLayout(width=config.width, height=config.empty_height, scale=None, rows=())

    mapper = AxisMapper(config.margin_left)
    scale = mapper.compute_scale(entries, config.available_width)

    rows = []
    for i, entry in enumerate(entries):
        y = config.margin_top + i * config.row_height + ROW_BASELINE
        rows.append(_row(i, entry, y, mapper, scale, editing_index == i))

    height = config.margin_top + len(entries) * config.row_height
    return TimelineLayout(width=config.width, height=height, scale=scale, rows=tuple(rows))


__all__ = ["MARKER_RADIUS", "TextItem", "RowLayout", "TimelineLayout", "build_layout"]
