from __future__ import annotations

import re
import unittest

from chronologizer.config import TimelineConfig
from chronologizer.controller import Chronologizer
from chronologizer.layout import build_layout
from chronologizer.render.inline import build_html
from chronologizer.render.svg import build_svg


def _timeline() -> Chronologizer:
    c = Chronologizer(config=TimelineConfig(width=1200))
    c.add_from_text("1066", "1087", "William <I> & sons")
    c.add_from_text("1815-06-18", "1815-06-18", "Waterloo")
    return c


class TestRenderHtmlContract(unittest.TestCase):
    def test_svg_has_one_group_per_entry(self) -> None:
        svg = build_svg(_timeline().layout())
        self.assertTrue(svg.startswith('<svg id="timeline-svg"'))
        self.assertIn('width="1200"', svg)
        self.assertIn('height="140"', svg)
        self.assertEqual(re.findall(r'<g class="timeline-group" data-index="(\d+)">', svg), ["0", "1"])
        self.assertEqual(svg.count('class="timeline-line"'), 1)
        self.assertEqual(svg.count('class="event-circle"'), 1)
        self.assertEqual(svg.count('class="delete-button"'), 2)

    def test_text_is_escaped(self) -> None:
        svg = build_svg(_timeline().layout())
        self.assertIn(">William &lt;I&gt; &amp; sons<", svg)
        self.assertNotIn("<I>", svg)
        self.assertIn(">Jun 18, 1815<", svg)

    def test_editing_label_is_marked(self) -> None:
        c = _timeline()
        c.begin_edit(1)
        svg = build_svg(c.layout())
        self.assertEqual(svg.count('class="timeline-label editing"'), 1)
        self.assertIn('class="timeline-label editing">Waterloo<', svg)

    def test_html_shell_invariants(self) -> None:
        html = build_html(_timeline().layout(), title="Norman <Conquest>")
        self.assertTrue(html.lower().startswith("<!doctype html>"))
        self.assertIn('<meta charset="utf-8"', html.lower())
        self.assertIn("<title>Norman &lt;Conquest&gt;</title>", html)
        self.assertIn('id="meta">2 entries<', html)
        for marker in ("__TITLE__", "__CSS_BLOCK__", "__BODY_MARKUP__"):
            self.assertNotIn(marker, html)
        self.assertEqual(html.count('id="timeline-svg"'), 1)

    def test_markers_in_user_text_are_not_expanded(self) -> None:
        html = build_html(_timeline().layout(), title="__CSS_BLOCK__")
        self.assertEqual(html.count(".timeline-line {"), 1)
        self.assertIn("<title>__CSS_BLOCK__</title>", html)

    def test_empty_timeline_page(self) -> None:
        html = build_html(build_layout([], TimelineConfig()))
        self.assertIn("<title>Chronologizer</title>", html)
        self.assertIn("No entries", html)
        self.assertIn('height="100"', html)

    def test_rejects_non_layout(self) -> None:
        with self.assertRaises(TypeError):
            build_html({"rows": []})  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main(verbosity=2)
