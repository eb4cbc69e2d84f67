"""Report assembly (renderer-independent datasets) and HTML rendering."""

from .render_html import render_report, write_report
from .report import build_run_report, round_to

__all__ = ["build_run_report", "round_to", "render_report", "write_report"]
