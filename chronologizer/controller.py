"""Timeline controller.

Owns what a page would otherwise keep in globals: the entry store and the
"currently editing" row. Each instance is an independent timeline.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from .axis import AxisMapper
from .config import TimelineConfig
from .dateparse import DateParser
from .layout import TimelineLayout, build_layout
from .model import Entry, IndexFailure, ParseFailure, ScaleInfo, ValidationFailure, is_failure
from .store import TimelineStore

MAX_LABEL_LENGTH = 256


class Chronologizer:
    def __init__(self, config: Optional[TimelineConfig] = None, parser: Optional[DateParser] = None) -> None:
        self.config = config or TimelineConfig()
        self.parser = parser or DateParser()
        self.store = TimelineStore(formatter=self.parser.format)
        self.axis = AxisMapper(self.config.margin_left)
        self._editing: Optional[int] = None

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self.store.entries

    @property
    def editing_index(self) -> Optional[int]:
        return self._editing

    # --- entries ---------------------------------------------------------------

    def add_from_text(
        self,
        start_text: str,
        end_text: str,
        label: str = "",
    ) -> Union[Entry, ParseFailure, ValidationFailure]:
        if not (start_text or "").strip() or not (end_text or "").strip():
            field = "start" if not (start_text or "").strip() else "end"
            return ValidationFailure(field=field, message="Please enter both start and end dates")

        start = self.parser.parse(start_text)
        if is_failure(start):
            return start
        end = self.parser.parse(end_text)
        if is_failure(end):
            return end

        return self.store.add(start, end, (label or "").strip() or None)

    def delete(self, index: int) -> Union[Entry, IndexFailure]:
        removed = self.store.remove(index)
        if is_failure(removed):
            return removed
        if self._editing is not None:
            if self._editing == index:
                self._editing = None
            elif self._editing > index:
                self._editing -= 1
        return removed

    def clear(self) -> None:
        self.store.clear()
        self._editing = None

    # --- label editing ---------------------------------------------------------

    def begin_edit(self, index: int) -> Union[Entry, IndexFailure]:
        n = len(self.store)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < n:
            return IndexFailure(index=index, size=n, message=f"No entry at index {index!r} (entries={n})")
        self._editing = index
        return self.store[index]

    def commit_edit(self, text: str) -> Union[Entry, IndexFailure, ValidationFailure]:
        if self._editing is None:
            return ValidationFailure(field="label", message="No label edit in progress")
        label = (text or "").strip()
        if len(label) > MAX_LABEL_LENGTH:
            return ValidationFailure(
                field="label",
                message=f"Label too long ({len(label)} > {MAX_LABEL_LENGTH} characters)",
            )
        updated = self.store.set_label(self._editing, label)
        self._editing = None
        return updated

    def cancel_edit(self) -> None:
        self._editing = None

    # --- geometry --------------------------------------------------------------

    def scale(self) -> ScaleInfo:
        return self.axis.compute_scale(self.store.entries, self.config.available_width)

    def layout(self) -> TimelineLayout:
        return build_layout(self.store.entries, self.config, editing_index=self._editing)


__all__ = ["MAX_LABEL_LENGTH", "Chronologizer"]
