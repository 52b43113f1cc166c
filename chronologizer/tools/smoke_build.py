#!/usr/bin/env python3
"""
chronologizer smoke build

Goals:
  - Render a fixed sample timeline through the public controller + build_html()
    (ranges, a single point, BCE years, a full calendar date).
  - Run basic invariants so refactors fail fast (avoid blank page surprises).

Usage:
  PYTHONPATH=/path/to/repo python -m chronologizer.tools.smoke_build --out build/chronologizer_smoke.html
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from chronologizer.config import TimelineConfig
from chronologizer.controller import Chronologizer
from chronologizer.model import is_failure
from chronologizer.render.inline import build_html

SMOKE_TITLE = "Chronologizer Smoke"

SMOKE_ENTRIES: Tuple[Tuple[str, str, str], ...] = (
    ("428 BC", "348 BC", "SMOKE: Plato"),
    ("1066", "1087", "SMOKE: William I"),
    ("1815-06-18", "1815-06-18", "SMOKE: Waterloo"),
    ("1914", "1918", ""),
)


def _die(msg: str, rc: int = 2) -> int:
    print(f"[chronologizer-smoke-build] ERROR: {msg}", file=sys.stderr)
    return rc


def build_smoke_html(width: int = 1000) -> str:
    timeline = Chronologizer(config=TimelineConfig(width=width))
    for start, end, label in SMOKE_ENTRIES:
        outcome = timeline.add_from_text(start, end, label)
        if is_failure(outcome):
            raise RuntimeError(f"smoke entry {start!r}..{end!r} rejected: {outcome.message}")
    return build_html(timeline.layout(), title=SMOKE_TITLE)


def _basic_html_checks(html: str, *, strict: bool) -> None:
    if len(html) < 1000:
        raise RuntimeError(f"Smoke HTML too small ({len(html)} chars); likely blank/failed injection.")

    for marker in ("__TITLE__", "__CSS_BLOCK__", "__BODY_MARKUP__"):
        if marker in html:
            raise RuntimeError(f"Template marker {marker} still present in generated HTML.")

    if "SMOKE: William I" not in html:
        raise RuntimeError("Expected smoke label missing from HTML output.")

    if not strict:
        return

    if "<!doctype html>" not in html.lower():
        raise RuntimeError("Strict: missing <!doctype html>.")
    if f"<title>{SMOKE_TITLE}</title>" not in html:
        raise RuntimeError(f"Strict: missing expected <title>{SMOKE_TITLE}</title>.")
    if '<meta charset="utf-8"' not in html.lower():
        raise RuntimeError("Strict: missing meta charset utf-8.")

    for id_ in ("timeline-svg", "meta"):
        n = html.count(f'id="{id_}"')
        if n != 1:
            raise RuntimeError(f"Strict: expected id={id_!r} exactly once (found {n}).")

    groups = re.findall(r'<g class="timeline-group" data-index="(\d+)">', html)
    expected = [str(i) for i in range(len(SMOKE_ENTRIES))]
    if groups != expected:
        raise RuntimeError(f"Strict: timeline groups {groups} != {expected}")

    if html.count('class="event-circle"') != 1:
        raise RuntimeError("Strict: expected exactly one single-date marker.")
    if html.count('class="timeline-line"') != len(SMOKE_ENTRIES) - 1:
        raise RuntimeError("Strict: range line count mismatch.")

    for text in ("428 BCE", "348 BCE", "Jun 18, 1815", "1914 - 1918"):
        if f">{text}<" not in html:
            raise RuntimeError(f"Strict: expected text {text!r} missing.")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="chronologizer-smoke-build",
        description="Build a sample timeline HTML and check invariants.",
    )
    ap.add_argument("--out", required=True, help="Output HTML path")
    ap.add_argument("--width", type=int, default=1000, help="Drawing width in pixels (default: 1000)")
    ap.add_argument("--strict", action="store_true", help="Enable strict HTML invariants")
    args = ap.parse_args(argv)

    try:
        html = build_smoke_html(width=int(args.width))
        _basic_html_checks(html, strict=bool(args.strict))
    except (RuntimeError, ValueError) as e:
        return _die(str(e))

    out_html = Path(args.out)
    out_html.parent.mkdir(parents=True, exist_ok=True)
    out_html.write_text(html, encoding="utf-8")

    print(f"[chronologizer] smoke html: {out_html}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
