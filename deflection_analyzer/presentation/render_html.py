"""Render a RunReport into one self-contained HTML page.

Each chart is drawn with Matplotlib's object-oriented API (no pyplot global
state, so no backend has to be selected) and embedded as a base64 PNG.
"""

from __future__ import annotations

import base64
import html
import io
import logging
from pathlib import Path

import numpy as np
from matplotlib.figure import Figure

from deflection_analyzer.errors import OutputWriteError
from deflection_analyzer.models.report import ChartDataset, RunReport

logger = logging.getLogger(__name__)

FIG_SIZE_IN = (10.0, 4.2)
DPI = 110
MAX_X_TICKS = 9

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; margin: 2em; background: #fafafa; }}
figure {{ margin: 0 0 2em 0; }}
img {{ max-width: 100%; border: 1px solid #ddd; background: #fff; }}
figcaption {{ color: #555; font-size: 0.9em; }}
</style>
</head>
<body>
<h1>{title}</h1>
{figures}
</body>
</html>
"""


def _apply_tick_labels(ax, chart: ChartDataset) -> None:
    """Show a thinned subset of the display labels on the shared x axis."""
    x = chart.series[0].x if chart.series else np.empty(0)
    labels = chart.x_tick_labels or ()
    n = min(len(x), len(labels))
    if n == 0:
        return
    idx = np.unique(np.linspace(0, n - 1, min(MAX_X_TICKS, n)).round().astype(int))
    ax.set_xticks([float(x[i]) for i in idx])
    ax.set_xticklabels([labels[i] for i in idx])


def draw_chart(chart: ChartDataset) -> Figure:
    fig = Figure(figsize=FIG_SIZE_IN)
    ax = fig.add_subplot(1, 1, 1)
    for s in chart.series:
        (line,) = ax.plot(s.x, s.y, label=s.label, linewidth=1.0)
        if chart.fill_alpha > 0 and len(s.x):
            ax.fill_between(s.x, s.y, alpha=chart.fill_alpha, color=line.get_color())
    ax.set_title(chart.title)
    if chart.x_label:
        ax.set_xlabel(chart.x_label)
    if chart.y_label:
        ax.set_ylabel(chart.y_label)
    if chart.x_tick_labels is not None:
        _apply_tick_labels(ax, chart)
    if chart.series:
        ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)
    return fig


def figure_to_png(fig: Figure) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", bbox_inches="tight", dpi=DPI, facecolor="white")
    return buf.getvalue()


def render_report(report: RunReport) -> str:
    """Return the HTML text of *report*."""
    parts = []
    for chart in report.charts:
        png = figure_to_png(draw_chart(chart))
        b64 = base64.b64encode(png).decode("ascii")
        title = html.escape(chart.title)
        parts.append(
            f'<figure>\n<img src="data:image/png;base64,{b64}" alt="{title}">\n'
            f"<figcaption>{title}</figcaption>\n</figure>"
        )
    return _PAGE.format(title=html.escape(report.title), figures="\n".join(parts))


def write_report(report: RunReport, output_dir: str | Path) -> Path:
    """Render *report* to '<output_dir>/<name>.html' and return the path."""
    path = Path(output_dir) / report.filename
    page = render_report(report)
    try:
        path.write_text(page, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(path, str(exc)) from exc
    logger.info("wrote %s", path)
    return path
