# chronologizer/render/inline.py
from __future__ import annotations

import html
import re

from chronologizer.layout import TimelineLayout

from .html_shell import HTML_SHELL
from .inline_css import CSS_BLOCK
from .svg import build_svg

DEFAULT_TITLE = "Chronologizer"

_MARKERS = ("__TITLE__", "__CSS_BLOCK__", "__BODY_MARKUP__")
_MARKER_RE = re.compile("|".join(re.escape(m) for m in _MARKERS))
_MARKER_COUNTS = {m: HTML_SHELL.count(m) for m in _MARKERS}


def _body_markup(layout: TimelineLayout, title: str) -> str:
    n = len(layout.rows)
    if n:
        meta = f'<div class="meta" id="meta">{n} {"entry" if n == 1 else "entries"}</div>'
    else:
        meta = '<div class="meta empty" id="meta">No entries</div>'
    return (
        '<div class="container">\n'
        f"<h1>{html.escape(title, quote=False)}</h1>\n"
        f"{meta}\n"
        f"{build_svg(layout)}\n"
        "</div>"
    )


def build_html(layout: TimelineLayout, title: str = DEFAULT_TITLE) -> str:
    # Hardening:
    #   - Shell must contain every marker exactly once.
    #   - Substitution is single-pass, so user text is never rescanned for markers.
    if not isinstance(layout, TimelineLayout):
        raise TypeError(f"layout must be TimelineLayout, got {type(layout).__name__}")

    for marker, n in _MARKER_COUNTS.items():
        if n != 1:
            raise RuntimeError(f"HTML_SHELL must contain {marker} exactly once (found {n})")

    values = {
        "__TITLE__": html.escape(title, quote=False),
        "__CSS_BLOCK__": CSS_BLOCK,
        "__BODY_MARKUP__": _body_markup(layout, title),
    }
    return _MARKER_RE.sub(lambda m: values[m.group(0)], HTML_SHELL)


__all__ = ["DEFAULT_TITLE", "build_html"]
