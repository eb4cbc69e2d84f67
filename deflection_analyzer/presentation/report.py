"""Assembly of the three comparison charts of a run.

The output is a :class:`~deflection_analyzer.models.report.RunReport`, a plain
dataset of labeled series and axis metadata.  Nothing here depends on a
plotting library; see :mod:`deflection_analyzer.presentation.render_html`.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

import numpy as np

from deflection_analyzer.analysis.gaussian import density, fitted_domain, has_spread
from deflection_analyzer.models.report import ChartDataset, LabeledSeries, RunReport
from deflection_analyzer.models.sample import RunSample

DEFLECTED_LABEL = "Deflected"
UNDEFLECTED_LABEL = "Undeflected"

TIME_AXIS = "Time(ms)"
CURRENT_AXIS = "Current(pA)"

#: Decimal places of the fitted-domain axis labels.
TICK_PRECISION = 3
FIT_FILL_ALPHA = 0.2

logger = logging.getLogger(__name__)


def round_to(value: float, precision: int) -> float:
    """Round half away from zero to *precision* decimals (Python's round() is half-even)."""
    scale = 10.0 ** precision
    scaled = value * scale
    return float(int(scaled + math.copysign(0.5, scaled))) / scale


def raw_chart(sample: RunSample) -> ChartDataset:
    d = sample.deflected.raw
    u = sample.undeflected.raw
    return ChartDataset(
        title="Raw Data",
        series=(
            LabeledSeries(DEFLECTED_LABEL, d.x, d.y),
            LabeledSeries(UNDEFLECTED_LABEL, u.x, u.y),
        ),
        x_label=TIME_AXIS,
        y_label=CURRENT_AXIS,
    )


def averaged_chart(sample: RunSample) -> ChartDataset:
    """Time-averaged chart; both series are cut to the shorter one.

    Series are aligned by position, so the shared x axis stops where either
    series ends.
    """
    d = sample.deflected.averaged
    u = sample.undeflected.averaged
    shorter = d if d.n_groups <= u.n_groups else u
    m = shorter.n_groups
    x = shorter.x[:m]
    return ChartDataset(
        title=f"Time Averaged Data (n= {sample.n})",
        series=(
            LabeledSeries(DEFLECTED_LABEL, x, d.y[:m]),
            LabeledSeries(UNDEFLECTED_LABEL, x, u.y[:m]),
        ),
        x_label=TIME_AXIS,
        y_label=CURRENT_AXIS,
    )


def fitted_chart(sample: RunSample, sample_count: int) -> ChartDataset:
    """Both normal curves evaluated over one shared domain.

    A polarity with zero spread has no normal curve; it is left out of the
    chart and the remaining curve is still drawn.  The domain itself must have
    non-zero width, otherwise DegenerateStatisticsError propagates.
    """
    dp = sample.deflected.params
    up = sample.undeflected.params
    xs = fitted_domain(dp, up, sample_count)
    labels: Tuple[str, ...] = tuple(str(round_to(float(v), TICK_PRECISION)) for v in xs)
    series = []
    for label, params in ((DEFLECTED_LABEL, dp), (UNDEFLECTED_LABEL, up)):
        if not has_spread(params):
            logger.warning("%s: %s curve omitted, sigma=%r", sample.name, label.lower(), params.sigma)
            continue
        series.append(LabeledSeries(label, xs, np.asarray(density(xs, params.mean, params.sigma))))
    return ChartDataset(
        title="Norm Distribution of Deflected and Undeflected",
        series=tuple(series),
        x_label=CURRENT_AXIS,
        x_tick_labels=labels,
        fill_alpha=FIT_FILL_ALPHA,
    )


def build_run_report(sample: RunSample, fit_sample_count: int) -> RunReport:
    """Raw, time-averaged and fitted-normal charts of one run, in that order."""
    return RunReport(
        name=sample.name,
        title=sample.title,
        charts=(
            raw_chart(sample),
            averaged_chart(sample),
            fitted_chart(sample, fit_sample_count),
        ),
    )
