"""Reduction package.

Design principle:
  - Ingest produces RawSeries objects indexed by sample position.
  - Reduction consumes RawSeries and produces block-averaged series and
    normal-distribution fits, collected into one RunSample per run.

No timestamps exist in the input; every x value is a sample index or a
group center index.
"""

from .averaging import group_centers, time_average
from .gaussian import density, domain_bounds, estimate, fitted_domain, has_spread
from .pipeline import reduce_run, reduce_series

__all__ = [
    "group_centers",
    "time_average",
    "density",
    "domain_bounds",
    "estimate",
    "fitted_domain",
    "has_spread",
    "reduce_run",
    "reduce_series",
]
