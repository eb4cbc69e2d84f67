"""Normal-distribution fit of raw current series.

Functions
---------
estimate
    Mean and population sigma (divisor N) of a RawSeries.
density
    Closed-form normal PDF, scalar or array.
has_spread
    Whether a fit has a finite, positive sigma.
domain_bounds
    Shared plotting domain covering mean +/- 4 sigma of both fits.
fitted_domain
    Sampled x values over that domain by floating accumulation.
"""

from __future__ import annotations

import math
from typing import List, Tuple, Union

import numpy as np

from deflection_analyzer.errors import DegenerateStatisticsError
from deflection_analyzer.models.series import GaussianParams, RawSeries

#: Half-width of the fitted domain in units of sigma.
DOMAIN_SIGMAS = 4.0

ArrayOrFloat = Union[float, np.ndarray]


def estimate(raw: RawSeries, label: str | None = None) -> GaussianParams:
    """Mean and population standard deviation of ``raw.y``.

    An empty series has no mean; this raises DegenerateStatisticsError
    instead of returning NaN.
    """
    y = np.asarray(raw.y, dtype=np.float64)
    if y.size == 0:
        raise DegenerateStatisticsError("cannot estimate mean/sigma of an empty series", label=label)
    mean = float(np.sum(y) / y.size)
    sigma = float(math.sqrt(np.sum((y - mean) ** 2) / y.size))
    return GaussianParams(mean=mean, sigma=sigma, n_samples=int(y.size))


def has_spread(params: GaussianParams) -> bool:
    """True when *params* describes a drawable normal curve (finite sigma > 0)."""
    return math.isfinite(params.sigma) and params.sigma > 0.0


def density(x: ArrayOrFloat, mean: float, sigma: float) -> ArrayOrFloat:
    """Normal PDF ``1/(sigma*sqrt(2*pi)) * exp(-0.5*((x-mean)/sigma)**2)``.

    Returns a float for scalar *x* and an ndarray for array-like *x*.
    """
    if not math.isfinite(sigma) or sigma <= 0.0:
        raise DegenerateStatisticsError(f"normal density undefined for sigma={sigma!r}")
    z = (np.asarray(x, dtype=np.float64) - mean) / sigma
    out = np.exp(-0.5 * z * z) / (sigma * math.sqrt(2.0 * math.pi))
    if np.ndim(out) == 0:
        return float(out)
    return out


def domain_bounds(deflected: GaussianParams, undeflected: GaussianParams) -> Tuple[float, float]:
    """Return (lower, upper) covering mean +/- 4 sigma of both fits."""
    d_lo, d_hi = deflected.bounds(DOMAIN_SIGMAS)
    u_lo, u_hi = undeflected.bounds(DOMAIN_SIGMAS)
    return min(d_lo, u_lo), max(d_hi, u_hi)


def fitted_domain(deflected: GaussianParams, undeflected: GaussianParams, sample_count: int) -> np.ndarray:
    """Sample the shared domain in steps of ``(upper - lower) / sample_count``.

    Points are produced by floating accumulation from *lower* while
    ``x <= upper``.  Accumulated rounding can drop the final point or leave it
    short of *upper*, so the range is only approximately inclusive.
    """
    if isinstance(sample_count, bool) or int(sample_count) != sample_count or sample_count < 1:
        raise ValueError(f"sample_count must be an integer >= 1, got {sample_count!r}")
    lower, upper = domain_bounds(deflected, undeflected)
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise DegenerateStatisticsError(f"non-finite fitted domain [{lower}, {upper}]")
    if upper <= lower:
        raise DegenerateStatisticsError(f"zero-width fitted domain [{lower}, {upper}] (both sigmas are zero)")

    delta = (upper - lower) / float(sample_count)
    # a step below one ulp would never advance x
    resolution = float(np.spacing(max(abs(lower), abs(upper))))
    if delta < resolution:
        raise DegenerateStatisticsError(
            f"fitted domain [{lower!r}, {upper!r}] is too narrow for {sample_count} samples"
        )
    xs: List[float] = []
    x = lower
    while x <= upper:
        xs.append(x)
        x += delta
    return np.asarray(xs, dtype=np.float64)
