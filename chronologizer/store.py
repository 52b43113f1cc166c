# chronologizer/store.py
from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterator, List, Optional, Tuple, Union

from .dateparse import format_instant
from .model import Entry, IndexFailure, Instant, ValidationFailure

Formatter = Callable[[Instant], str]


def default_label(start: Instant, end: Instant, fmt: Formatter = format_instant) -> str:
    return f"{fmt(start)} - {fmt(end)}"


class TimelineStore:
    """Ordered, index-addressable entries.

    Indices are stable until the next mutation; removing shifts every later
    entry down by one. Failed operations leave the collection untouched.
    """

    def __init__(self, formatter: Formatter = format_instant) -> None:
        self._entries: List[Entry] = []
        self._format = formatter

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._entries))

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    def _index_failure(self, index: int) -> Optional[IndexFailure]:
        n = len(self._entries)
        if isinstance(index, bool) or not isinstance(index, int) or index < 0 or index >= n:
            return IndexFailure(index=index, size=n, message=f"No entry at index {index!r} (entries={n})")
        return None

    def add(self, start: Instant, end: Instant, label: Optional[str] = None) -> Union[Entry, ValidationFailure]:
        if start > end:
            return ValidationFailure(field="start", message="Start date cannot be after end date")
        entry = Entry(
            start=int(start),
            end=int(end),
            label=label or default_label(start, end, self._format),
        )
        self._entries.append(entry)
        return entry

    def remove(self, index: int) -> Union[Entry, IndexFailure]:
        fail = self._index_failure(index)
        if fail is not None:
            return fail
        return self._entries.pop(index)

    def set_label(self, index: int, label: str) -> Union[Entry, IndexFailure]:
        fail = self._index_failure(index)
        if fail is not None:
            return fail
        entry = replace(self._entries[index], label=label)
        self._entries[index] = entry
        return entry

    def clear(self) -> None:
        self._entries = []


__all__ = ["TimelineStore", "default_label"]
