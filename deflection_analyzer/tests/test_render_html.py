from __future__ import annotations

import base64

import numpy as np

from deflection_analyzer.models.report import ChartDataset, LabeledSeries, RunReport
from deflection_analyzer.presentation.render_html import draw_chart, figure_to_png, render_report, write_report

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _report() -> RunReport:
    x = np.arange(20.0)
    raw = ChartDataset(
        title="Raw Data",
        series=(LabeledSeries("Deflected", x, np.sin(x)), LabeledSeries("Undeflected", x[:10], np.cos(x[:10]))),
        x_label="Time(ms)",
        y_label="Current(pA)",
    )
    xs = np.linspace(-4.0, 4.0, 11)
    fit = ChartDataset(
        title="Norm <fit>",
        series=(LabeledSeries("Deflected", xs, np.exp(-xs**2)),),
        x_tick_labels=tuple(f"{v:.3f}" for v in xs),
        fill_alpha=0.2,
    )
    empty = ChartDataset(title="Empty", series=(LabeledSeries("Deflected", np.empty(0), np.empty(0)),))
    return RunReport(name="cup_run_1", title="Cup Run 1", charts=(raw, fit, empty))


def test_figure_is_png() -> None:
    png = figure_to_png(draw_chart(_report().charts[0]))
    assert png.startswith(PNG_MAGIC)


def test_tick_labels_are_applied() -> None:
    fig = draw_chart(_report().charts[1])
    ax = fig.axes[0]
    labels = [t.get_text() for t in ax.get_xticklabels()]
    assert labels[0] == "-4.000"
    assert labels[-1] == "4.000"
    assert len(labels) <= 9


def test_page_is_self_contained() -> None:
    page = render_report(_report())
    assert "<title>Cup Run 1</title>" in page
    assert page.count('<img src="data:image/png;base64,') == 3
    # titles are escaped
    assert "Norm &lt;fit&gt;" in page
    start = page.index("base64,") + len("base64,")
    b64 = page[start:page.index('"', start)]
    assert base64.b64decode(b64).startswith(PNG_MAGIC)


def test_write_report(tmp_path) -> None:
    path = write_report(_report(), tmp_path)
    assert path == tmp_path / "cup_run_1.html"
    assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")
