# chronologizer/render/svg.py
from __future__ import annotations

import html
from typing import List

from chronologizer.layout import MARKER_RADIUS, RowLayout, TextItem, TimelineLayout

SVG_ID = "timeline-svg"


def _num(v: float) -> str:
    s = f"{float(v):.2f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def _attr(v: object) -> str:
    return html.escape(str(v), quote=True)


def _text(item: TextItem, cls: str) -> str:
    return (
        f'<text x="{_num(item.x)}" y="{_num(item.y)}" text-anchor="{item.anchor}" '
        f'class="{cls}">{html.escape(item.text, quote=False)}</text>'
    )


def _row(row: RowLayout) -> str:
    parts: List[str] = [f'<g class="timeline-group" data-index="{row.index}">']

    if row.is_point:
        parts.append(
            f'<circle cx="{_num(row.start_x)}" cy="{_num(row.y)}" r="{MARKER_RADIUS}" class="event-circle"/>'
        )
    else:
        parts.append(
            f'<line x1="{_num(row.start_x)}" y1="{_num(row.y)}" x2="{_num(row.end_x)}" y2="{_num(row.y)}" '
            f'class="timeline-line"/>'
        )

    for d in row.dates:
        parts.append(_text(d, "timeline-date"))

    if row.label is not None:
        parts.append(_text(row.label, "timeline-label editing" if row.editing else "timeline-label"))

    parts.append(
        f'<g class="delete-button" data-index="{row.index}">'
        f'<circle cx="{_num(row.delete_x)}" cy="{_num(row.y)}" r="{MARKER_RADIUS}"/>'
        f'<text x="{_num(row.delete_x)}" y="{_num(row.y)}" text-anchor="middle" '
        f'dominant-baseline="central" class="delete-x">×</text></g>'
    )
    parts.append("</g>")
    return "".join(parts)


def build_svg(layout: TimelineLayout) -> str:
    head = (
        f'<svg id="{SVG_ID}" xmlns="http://www.w3.org/2000/svg" '
        f'width="{_attr(layout.width)}" height="{_attr(layout.height)}" '
        f'viewBox="0 0 {_attr(layout.width)} {_attr(layout.height)}">'
    )
    body = "\n".join(_row(r) for r in layout.rows)
    return head + ("\n" + body + "\n" if body else "") + "</svg>"


__all__ = ["SVG_ID", "build_svg"]
