from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from deflection_analyzer.ingest.readers import load_series
from deflection_analyzer.models.catalog import DEFLECTED, UNDEFLECTED, check_category
from deflection_analyzer.models.sample import PolaritySample, RunSample
from deflection_analyzer.models.series import RawSeries

from .averaging import time_average
from .gaussian import estimate

logger = logging.getLogger(__name__)


def reduce_series(raw: RawSeries, n: int, label: str | None = None) -> PolaritySample:
    """Time-average and fit one raw series."""
    averaged = time_average(raw, n)
    params = estimate(raw, label=label)
    return PolaritySample(raw=raw, averaged=averaged, params=params)


def reduce_run(
    listing: Sequence[str],
    category: str,
    run_number: int,
    n: int,
    data_dir: str | Path,
) -> RunSample:
    """Load both polarities of one run and reduce them into a fresh RunSample.

    The undeflected series is loaded first, then the deflected one.  Any
    file, parse or statistics error propagates to the caller.
    """
    check_category(category)
    samples = {}
    for polarity in (UNDEFLECTED, DEFLECTED):
        label = f"{category}_{polarity}_{run_number}"
        raw = load_series(listing, run_number, category, polarity, data_dir)
        samples[polarity] = reduce_series(raw, n, label=label)
        for w in raw.warnings:
            logger.info("%s: %s", label, w)
        logger.debug(
            "%s: %d samples, %d groups (n=%d), mean=%.6g sigma=%.6g",
            label,
            raw.n_samples,
            samples[polarity].averaged.n_groups,
            n,
            samples[polarity].params.mean,
            samples[polarity].params.sigma,
        )
    return RunSample(
        category=category,
        run_number=int(run_number),
        n=int(n),
        deflected=samples[DEFLECTED],
        undeflected=samples[UNDEFLECTED],
    )
