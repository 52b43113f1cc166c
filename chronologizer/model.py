# chronologizer/model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union

# Signed epoch milliseconds (UTC, proleptic Gregorian).
Instant = int


@dataclass(frozen=True)
class Entry:
    start: Instant
    end: Instant
    label: str

    @property
    def is_point(self) -> bool:
        return self.start == self.end

    def bounds(self) -> Tuple[Instant, Instant]:
        return self.start, self.end


@dataclass(frozen=True)
class ScaleInfo:
    min: Instant
    max: Instant
    scale: float  # pixels per millisecond

    @property
    def span(self) -> int:
        return self.max - self.min


# --- Discriminated failures ---------------------------------------------------
# Fallible core operations return either their plain result or one of these.


@dataclass(frozen=True)
class ParseFailure:
    text: str
    message: str

    ok = False
    kind = "parse"


@dataclass(frozen=True)
class ValidationFailure:
    field: str
    message: str

    ok = False
    kind = "validation"


@dataclass(frozen=True)
class IndexFailure:
    index: int
    size: int
    message: str

    ok = False
    kind = "index"


Failure = Union[ParseFailure, ValidationFailure, IndexFailure]
ParseOutcome = Union[Instant, ParseFailure]


def is_failure(outcome: Any) -> bool:
    return isinstance(outcome, (ParseFailure, ValidationFailure, IndexFailure))


# --- Raising counterparts -----------------------------------------------------


class TimelineError(ValueError):
    """Raised by require() when an outcome is a failure."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.message)
        self.failure = failure


class DateParseError(TimelineError):
    pass


class EntryValidationError(TimelineError):
    pass


class EntryIndexError(TimelineError):
    pass


class ConfigError(ValueError):
    """Invalid drawing configuration (non-positive widths, bad env values)."""


_ERRORS = {
    "parse": DateParseError,
    "validation": EntryValidationError,
    "index": EntryIndexError,
}


def require(outcome: Any) -> Any:
    """Return `outcome` unchanged, or raise the matching TimelineError."""
    if is_failure(outcome):
        raise _ERRORS[outcome.kind](outcome)
    return outcome


__all__ = [
    "Instant",
    "Entry",
    "ScaleInfo",
    "ParseFailure",
    "ValidationFailure",
    "IndexFailure",
    "Failure",
    "ParseOutcome",
    "is_failure",
    "TimelineError",
    "DateParseError",
    "EntryValidationError",
    "EntryIndexError",
    "ConfigError",
    "require",
]
