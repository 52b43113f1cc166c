# chronologizer/render/inline_css.py
from __future__ import annotations

CSS_BLOCK = r'''  body {
    margin: 0;
    padding: 24px;
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    color: #1f2937;
    font: 14px/1.45 "IBM Plex Sans", "Avenir Next", "Segoe UI", sans-serif;
    min-height: 100vh;
  }

  .container {
    max-width: 1200px;
    margin: 0 auto;
    background: #fff;
    border-radius: 12px;
    padding: 24px;
    box-shadow: 0 20px 60px rgba(0, 0, 0, 0.3);
  }

  h1 {
    margin: 0 0 16px;
    font-size: 22px;
    color: #4c51bf;
  }

  .meta { color: #6b7280; font-size: 12px; margin-bottom: 12px; }
  .empty { color: #9ca3af; font-style: italic; }

  #timeline-svg { width: 100%; overflow: visible; }

  .timeline-line { stroke: #667eea; stroke-width: 4; stroke-linecap: round; }
  .event-circle { fill: #764ba2; stroke: #fff; stroke-width: 2; }
  .timeline-date { font-size: 11px; fill: #6b7280; }
  .timeline-label { font-size: 13px; font-weight: 600; fill: #1f2937; }
  .timeline-label.editing { fill: #667eea; text-decoration: underline; }

  .delete-button circle { fill: #ef4444; opacity: 0.75; }
  .delete-x { font-size: 12px; fill: #fff; }
'''
