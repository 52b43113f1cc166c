# chronologizer/util/civil.py
from __future__ import annotations

from typing import Tuple

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

# Fixed 365-day year; used for padding, not calendar math.
YEAR_MS = 365 * MS_PER_DAY

MIN_YEAR = -99999
MAX_YEAR = 99999

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    # Astronomical numbering: year 0 is a leap year.
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month!r}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        return False
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date.

    Works for any integer year (including 0 and negatives); the 400-year
    era arithmetic relies on Python's floor division.
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """Inverse of days_from_civil: (year, month, day)."""
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400
    if month <= 2:
        year += 1
    return year, month, day


def epoch_ms(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Epoch milliseconds (UTC) for a proleptic Gregorian date and time."""
    return (
        days_from_civil(year, month, day) * MS_PER_DAY
        + hour * MS_PER_HOUR
        + minute * MS_PER_MINUTE
        + second * MS_PER_SECOND
        + millisecond
    )


def year_start_ms(year: int) -> int:
    return epoch_ms(year, 1, 1)


def split_ms(ms: int) -> Tuple[int, int, int, int]:
    """Return (year, month, day, ms_of_day) for epoch milliseconds (UTC)."""
    days, ms_of_day = divmod(int(ms), MS_PER_DAY)
    y, m, d = civil_from_days(days)
    return y, m, d, ms_of_day


def is_year_start(ms: int) -> bool:
    _, m, d, ms_of_day = split_ms(ms)
    return m == 1 and d == 1 and ms_of_day == 0
