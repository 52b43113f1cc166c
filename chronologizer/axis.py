# chronologizer/axis.py
from __future__ import annotations

from typing import Iterable, Tuple, Union

from .model import ConfigError, Entry, Instant, ScaleInfo
from .util.civil import YEAR_MS

Bounded = Union[Entry, Tuple[Instant, Instant]]

# Returned for an empty timeline; keeps callers clear of division by zero.
IDENTITY_SCALE = ScaleInfo(min=0, max=1, scale=1.0)


def _bounds(item: Bounded) -> Tuple[Instant, Instant]:
    if isinstance(item, Entry):
        return item.bounds()
    start, end = item
    return int(start), int(end)


def compute_scale(entries: Iterable[Bounded], available_width: float) -> ScaleInfo:
    """One global linear scale over every entry.

    `available_width` is the drawing width minus left/right margins. When all
    entries collapse to a single instant the range is widened by one year on
    each side so the point lands mid-axis.
    """
    lo = None
    hi = None
    for item in entries:
        start, end = _bounds(item)
        lo = start if lo is None else min(lo, start)
        hi = end if hi is None else max(hi, end)

    if lo is None or hi is None:
        return IDENTITY_SCALE

    if available_width <= 0:
        raise ConfigError(f"available width must be positive; got {available_width!r}")

    if hi - lo == 0:
        lo -= YEAR_MS
        hi += YEAR_MS

    return ScaleInfo(min=lo, max=hi, scale=float(available_width) / (hi - lo))


def project(instant: Instant, scale: ScaleInfo, left_margin: float = 0.0) -> float:
    return left_margin + (instant - scale.min) * scale.scale


class AxisMapper:
    def __init__(self, left_margin: float = 0.0) -> None:
        self.left_margin = float(left_margin)

    def compute_scale(self, entries: Iterable[Bounded], available_width: float) -> ScaleInfo:
        return compute_scale(entries, available_width)

    def project(self, instant: Instant, scale: ScaleInfo) -> float:
        return project(instant, scale, self.left_margin)


__all__ = ["IDENTITY_SCALE", "compute_scale", "project", "AxisMapper"]
