"""Free-form date text <-> Instant.

Parsing is an ordered list of strategies, each a pure function
`str -> Optional[Instant]`. The first strategy returning an Instant wins;
when none does, the caller gets a ParseFailure (never an exception).

Formatting is deliberately asymmetric: an Instant sitting exactly on
January 1 00:00 renders as a bare year ("1066", "428 BCE"), anything else as
a short en-US date ("Jan 15, 2024").
"""

from __future__ import annotations

import datetime as dt
import re
from typing import Callable, Optional, Sequence, Tuple

from dateutil import parser as dateparser

from .model import Instant, ParseFailure, ParseOutcome
from .util.civil import epoch_ms, is_valid_date, split_ms, year_start_ms

Strategy = Callable[[str], Optional[Instant]]

PARSE_HINT = (
    "Invalid date format. Use year (e.g., 1066, -500, 428 BC) "
    "or ISO format (e.g., 2024-01-15)"
)

_ERA_RE = re.compile(r"^(\d{1,5})\s*(BC|BCE|AD|CE)$", re.IGNORECASE)
_YEAR_RE = re.compile(r"^-?\d{1,5}$")
_ISO_RE = re.compile(
    r"^([+-]?\d{4,6})-(\d{2})-(\d{2})"
    r"(?:[T ](\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,3}))?)?)?"
    r"(Z)?$",
    re.IGNORECASE,
)
_ERA_DATE_RE = re.compile(
    r"^(?:([A-Za-z]+)\.?\s+(\d{1,2})|(\d{1,2})\s+([A-Za-z]+)\.?),?\s+(\d{1,5})\s*(BC|BCE|AD|CE)$",
    re.IGNORECASE,
)
_PADDED_YEAR_RE = re.compile(r"(?<![\d.:+-])0\d{2,3}(?![\d:])")

# Leap days and weekdays repeat every 400 Gregorian years.
GREGORIAN_CYCLE_YEARS = 400

_PARSER_INFO = dateparser.parserinfo()

# Fill-in for components missing from loose text ("March 2024" -> 1 March).
_LOOSE_DEFAULT = dt.datetime(1970, 1, 1)

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _apply_era(year: int, era: str) -> int:
    return -year if era.upper() in ("BC", "BCE") else year


def parse_era_year(text: str) -> Optional[Instant]:
    m = _ERA_RE.match(text)
    if not m:
        return None
    return year_start_ms(_apply_era(int(m.group(1)), m.group(2)))


def parse_bare_year(text: str) -> Optional[Instant]:
    if not _YEAR_RE.match(text):
        return None
    return year_start_ms(int(text))


def parse_iso_extended(text: str) -> Optional[Instant]:
    """ISO-8601 dates with years datetime cannot hold (<= 0, > 9999)."""
    m = _ISO_RE.match(text)
    if not m:
        return None
    year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
    if not is_valid_date(year, month, day):
        return None
    hh = int(m.group(4) or 0)
    mm = int(m.group(5) or 0)
    ss = int(m.group(6) or 0)
    if hh > 23 or mm > 59 or ss > 59:
        return None
    frac = m.group(7) or "0"
    ms = int(frac.ljust(3, "0"))
    return epoch_ms(year, month, day, hh, mm, ss, ms)


def parse_era_date(text: str) -> Optional[Instant]:
    """Full dates with an era suffix: "Mar 15, 44 BCE", "15 March 44 BC"."""
    m = _ERA_DATE_RE.match(text)
    if not m:
        return None
    if m.group(1):
        name, day = m.group(1), int(m.group(2))
    else:
        name, day = m.group(4), int(m.group(3))
    month = _PARSER_INFO.month(name)
    if month is None:
        return None
    year = _apply_era(int(m.group(5)), m.group(6))
    if not is_valid_date(year, month, day):
        return None
    return epoch_ms(year, month, day)


def _datetime_to_ms(value: dt.datetime, year_shift: int = 0) -> Instant:
    # Offset is applied in integer ms; datetime arithmetic overflows near years 1 and 9999.
    ms = epoch_ms(
        value.year - year_shift,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond // 1000,
    )
    offset = value.utcoffset()
    if offset:
        ms -= offset // dt.timedelta(milliseconds=1)
    return ms


def _unpad_low_year(text: str) -> Tuple[str, int]:
    """Lift a zero-padded year below 100 ("0044") by one Gregorian cycle.

    dateutil reads such tokens as two-digit years (0044 -> 2044). Adding 400
    years keeps leap days and weekdays, and the shift is undone afterwards.
    """
    hits = [m for m in _PADDED_YEAR_RE.finditer(text) if int(m.group(0)) < 100]
    if len(hits) != 1:
        return text, 0
    m = hits[0]
    lifted = str(int(m.group(0)) + GREGORIAN_CYCLE_YEARS)
    return text[: m.start()] + lifted + text[m.end():], GREGORIAN_CYCLE_YEARS


def parse_calendar_text(text: str) -> Optional[Instant]:
    """Loose calendar text via dateutil ("Jan 15, 2024", "15 March 1815")."""
    source, year_shift = _unpad_low_year(text)
    try:
        value = dateparser.parse(source, default=_LOOSE_DEFAULT)
        return _datetime_to_ms(value, year_shift)
    except (ValueError, OverflowError):
        return None


DEFAULT_STRATEGIES: Tuple[Strategy, ...] = (
    parse_era_year,
    parse_bare_year,
    parse_iso_extended,
    parse_era_date,
    parse_calendar_text,
)


def parse_date(text: str, strategies: Sequence[Strategy] = DEFAULT_STRATEGIES) -> ParseOutcome:
    raw = text if isinstance(text, str) else ""
    s = raw.strip()
    if not s:
        return ParseFailure(text=raw, message=PARSE_HINT)
    for strategy in strategies:
        instant = strategy(s)
        if instant is not None:
            return instant
    return ParseFailure(text=raw, message=PARSE_HINT)


def format_year(year: int) -> str:
    return f"{abs(year)} BCE" if year < 0 else str(year)


def format_instant(instant: Instant) -> str:
    year, month, day, ms_of_day = split_ms(instant)
    if month == 1 and day == 1 and ms_of_day == 0:
        return format_year(year)
    return f"{_MONTH_ABBR[month - 1]} {day}, {format_year(year)}"


class DateParser:
    """Strategy-ordered parser bound to the single display locale."""

    def __init__(self, strategies: Sequence[Strategy] = DEFAULT_STRATEGIES) -> None:
        self.strategies: Tuple[Strategy, ...] = tuple(strategies)

    def with_strategy(self, strategy: Strategy, *, first: bool = False) -> "DateParser":
        if first:
            return DateParser((strategy,) + self.strategies)
        return DateParser(self.strategies + (strategy,))

    def parse(self, text: str) -> ParseOutcome:
        return parse_date(text, self.strategies)

    def format(self, instant: Instant) -> str:
        return format_instant(instant)


__all__ = [
    "Strategy",
    "PARSE_HINT",
    "DEFAULT_STRATEGIES",
    "parse_era_year",
    "parse_bare_year",
    "parse_iso_extended",
    "parse_era_date",
    "parse_calendar_text",
    "parse_date",
    "format_year",
    "format_instant",
    "DateParser",
]
