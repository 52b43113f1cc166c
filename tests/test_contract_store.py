from __future__ import annotations

import unittest

from chronologizer.model import (
    EntryIndexError,
    EntryValidationError,
    IndexFailure,
    ValidationFailure,
    is_failure,
    require,
)
from chronologizer.store import TimelineStore, default_label
from chronologizer.util.civil import epoch_ms, year_start_ms

Y1066 = year_start_ms(1066)
Y1087 = year_start_ms(1087)


class TestTimelineStoreContract(unittest.TestCase):
    def test_rejects_start_after_end(self) -> None:
        store = TimelineStore()
        out = store.add(Y1087, Y1066)
        self.assertIsInstance(out, ValidationFailure)
        self.assertEqual(out.message, "Start date cannot be after end date")
        self.assertEqual(len(store), 0)
        with self.assertRaises(EntryValidationError):
            require(out)

    def test_default_label_uses_formatted_dates(self) -> None:
        store = TimelineStore()
        e = store.add(Y1066, Y1087)
        self.assertEqual(e.label, "1066 - 1087")
        self.assertEqual(default_label(year_start_ms(-428), epoch_ms(2024, 1, 15)), "428 BCE - Jan 15, 2024")

        self.assertEqual(store.add(Y1066, Y1087, "").label, "1066 - 1087")
        self.assertEqual(store.add(Y1066, Y1087, "William I").label, "William I")
        self.assertEqual([x.label for x in store], ["1066 - 1087", "1066 - 1087", "William I"])

    def test_point_entries(self) -> None:
        store = TimelineStore()
        e = store.add(Y1066, Y1066, "Hastings")
        self.assertFalse(is_failure(e))
        self.assertTrue(e.is_point)
        self.assertFalse(store.add(Y1066, Y1087).is_point)

    def test_remove_shifts_later_entries(self) -> None:
        store = TimelineStore()
        for label in ("a", "b", "c"):
            store.add(Y1066, Y1087, label)

        removed = store.remove(1)
        self.assertEqual(removed.label, "b")
        self.assertEqual(store[1].label, "c")
        self.assertEqual(len(store), 2)

        self.assertEqual(store.remove(1).label, "c")
        again = store.remove(1)
        self.assertIsInstance(again, IndexFailure)
        self.assertEqual((again.index, again.size), (1, 1))
        with self.assertRaises(EntryIndexError):
            require(again)
        self.assertEqual([e.label for e in store.entries], ["a"])

    def test_negative_and_non_int_indices_fail(self) -> None:
        store = TimelineStore()
        store.add(Y1066, Y1087, "a")
        for idx in (-1, 5, True, "0"):
            with self.subTest(index=idx):
                self.assertIsInstance(store.remove(idx), IndexFailure)  # type: ignore[arg-type]
                self.assertIsInstance(store.set_label(idx, "x"), IndexFailure)  # type: ignore[arg-type]
        self.assertEqual(len(store), 1)
        self.assertEqual(store[0].label, "a")

    def test_set_label_replaces_only_the_label(self) -> None:
        store = TimelineStore()
        before = store.add(Y1066, Y1087, "old")
        after = store.set_label(0, "new")
        self.assertEqual(after.label, "new")
        self.assertEqual((after.start, after.end), (before.start, before.end))
        self.assertEqual(before.label, "old")
        self.assertEqual(store[0], after)

    def test_entries_is_a_snapshot_and_clear_empties(self) -> None:
        store = TimelineStore()
        store.add(Y1066, Y1087)
        snap = store.entries
        store.add(Y1066, Y1066)
        self.assertEqual(len(snap), 1)
        self.assertEqual(len(store.entries), 2)

        store.clear()
        self.assertEqual(store.entries, ())
        self.assertIsInstance(store.remove(0), IndexFailure)

    def test_custom_formatter(self) -> None:
        store = TimelineStore(formatter=lambda ms: f"<{ms}>")
        self.assertEqual(store.add(1, 2).label, "<1> - <2>")


if __name__ == "__main__":
    unittest.main(verbosity=2)
