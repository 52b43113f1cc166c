from __future__ import annotations

import argparse
import os
import re
import sys
import webbrowser
from pathlib import Path

from .config import ENV_WIDTH, config_from_env
from .controller import Chronologizer
from .model import ConfigError, is_failure
from .render.inline import DEFAULT_TITLE, build_html
from .util.console import warn

# argparse only treats "-123"-style tokens as values; "-0044-03-15" looks like an option.
_NEGATIVE_DATE_RE = re.compile(r"^-\d{4,6}-\d{2}-\d{2}")


def _shield_negative_dates(argv: list[str]) -> list[str]:
    # A leading space keeps argparse from reading the token as a flag; parse_date strips it.
    return [" " + a if _NEGATIVE_DATE_RE.match(a) else a for a in argv]


def _parse_entry_args(raw: list[str], n: int) -> tuple[str, str, str]:
    if len(raw) not in (2, 3):
        raise SystemExit(f"Invalid --entry #{n}: expected START END [LABEL], got {len(raw)} value(s)")
    label = raw[2] if len(raw) == 3 else ""
    return raw[0], raw[1], label


def main(argv: list[str] | None = None) -> None:
    default_out = os.path.join("build", "chronologizer_timeline.html")
    ap = argparse.ArgumentParser(
        prog="chronologizer",
        description="Render date ranges and single dates as a scaled SVG timeline (standalone HTML).",
    )
    ap.add_argument(
        "--entry",
        nargs="+",
        action="append",
        default=[],
        metavar="TEXT",
        help="START END [LABEL]; years (1066, -500, 428 BC) or dates (2024-01-15, -0044-03-15, 'Jan 15, 2024'). Repeatable.",
    )
    ap.add_argument(
        "--width",
        type=int,
        default=None,
        help=f"Drawing width in pixels (default: env {ENV_WIDTH} or 1000)",
    )
    ap.add_argument("--title", default=DEFAULT_TITLE, help="Page title")
    ap.add_argument(
        "--out",
        default=default_out,
        help="Output HTML path (default: ./build/chronologizer_timeline.html)",
    )
    ap.add_argument("--no-open", action="store_true", help="Do not open the generated HTML in a browser")

    args = ap.parse_args(_shield_negative_dates(sys.argv[1:] if argv is None else list(argv)))

    try:
        cfg = config_from_env().with_overrides(width=args.width)
    except ConfigError as e:
        raise SystemExit(f"Invalid configuration: {e}")

    timeline = Chronologizer(config=cfg)
    for n, raw in enumerate(args.entry, start=1):
        start_text, end_text, label = _parse_entry_args(raw, n)
        outcome = timeline.add_from_text(start_text, end_text, label)
        if is_failure(outcome):
            raise SystemExit(f"Invalid --entry #{n} ({' '.join(r.strip() for r in raw)}): {outcome.message}")

    if not timeline.entries:
        warn("chronologizer", "no --entry given; rendering an empty timeline")

    html = build_html(timeline.layout(), title=args.title)

    out_path = os.path.abspath(args.out)
    try:
        Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        # Default relative path from an unwritable CWD: fall back to a
        # user-writable location.
        if args.out == default_out:
            fallback = Path.home() / ".chronologizer" / "build" / "chronologizer_timeline.html"
            fallback.parent.mkdir(parents=True, exist_ok=True)
            out_path = str(fallback)
            warn("chronologizer", f"default output directory is not writable; using {out_path}")
        else:
            raise SystemExit(f"Cannot create output directory '{Path(out_path).parent}': {e}")
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(html)

    print(out_path)

    if not args.no_open:
        try:
            webbrowser.open("file://" + out_path)
        except webbrowser.Error as e:
            warn("chronologizer", f"could not open a browser: {e}")


if __name__ == "__main__":
    main()
