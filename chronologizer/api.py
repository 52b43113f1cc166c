"""chronologizer.api

Stable *library* entrypoint for Chronologizer.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from chronologizer.axis import AxisMapper, compute_scale, project
from chronologizer.config import TimelineConfig, config_from_env
from chronologizer.controller import MAX_LABEL_LENGTH, Chronologizer
from chronologizer.dateparse import DEFAULT_STRATEGIES, DateParser, format_instant, parse_date
from chronologizer.layout import TimelineLayout, build_layout
from chronologizer.model import (
    ConfigError,
    DateParseError,
    Entry,
    EntryIndexError,
    EntryValidationError,
    IndexFailure,
    Instant,
    ParseFailure,
    ScaleInfo,
    TimelineError,
    ValidationFailure,
    is_failure,
    require,
)
from chronologizer.render.inline import build_html
from chronologizer.render.svg import build_svg
from chronologizer.store import TimelineStore


__all__ = [
    # date text
    "parse_date",
    "format_instant",
    "DateParser",
    "DEFAULT_STRATEGIES",
    # axis
    "compute_scale",
    "project",
    "AxisMapper",
    # state
    "TimelineStore",
    "Chronologizer",
    "MAX_LABEL_LENGTH",
    "TimelineConfig",
    "config_from_env",
    # types + outcomes
    "Instant",
    "Entry",
    "ScaleInfo",
    "ParseFailure",
    "ValidationFailure",
    "IndexFailure",
    "is_failure",
    "require",
    "TimelineError",
    "DateParseError",
    "EntryValidationError",
    "EntryIndexError",
    "ConfigError",
    # presentation
    "TimelineLayout",
    "build_layout",
    "build_svg",
    "build_html",
]
