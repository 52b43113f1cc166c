#!/usr/bin/env python3
"""Probe the date parser from a shell.

Prints one JSON object per input:
  {"text": ..., "ok": true, "instant": <epoch ms>, "label": "428 BCE"}
  {"text": ..., "ok": false, "error": "..."}

Exit code 0 when every input parsed, 3 otherwise.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from chronologizer.dateparse import format_instant, parse_date
from chronologizer.model import is_failure


def probe(text: str) -> Dict[str, Any]:
    outcome = parse_date(text)
    if is_failure(outcome):
        return {"text": text, "ok": False, "error": outcome.message}
    return {"text": text, "ok": True, "instant": outcome, "label": format_instant(outcome)}


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="chronologizer-parse-date",
        description="Parse date/year text and print the normalized instant and display label.",
    )
    ap.add_argument("text", nargs="+", help="Date or year text, e.g. '428 BC', 1066, 2024-01-15")
    ns = ap.parse_args(argv)

    failed = 0
    for text in ns.text:
        row = probe(text)
        if not row["ok"]:
            failed += 1
        print(json.dumps(row, ensure_ascii=False, sort_keys=True))

    if failed:
        print(f"[chronologizer-parse] ERROR: {failed} of {len(ns.text)} input(s) did not parse", file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
