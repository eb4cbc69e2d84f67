from __future__ import annotations

import numpy as np

from deflection_analyzer.models.series import AveragedSeries, RawSeries


def group_centers(n_groups: int, n: int) -> np.ndarray:
    """Center index (k+1)*n - n/2 - 1 of each group k = 0..n_groups-1."""
    k = np.arange(n_groups, dtype=np.float64)
    return (k + 1.0) * n - n / 2.0 - 1.0


def time_average(raw: RawSeries, n: int) -> AveragedSeries:
    """Reduce *raw* to block means of exactly *n* consecutive samples.

    Equivalent to a running sum that is emitted as ``sum / n`` and reset every
    time the 1-based position is a multiple of *n*.

    Parameters
    ----------
    raw : RawSeries
        Input samples.
    n : int
        Clustering value, must be >= 1.

    Returns
    -------
    AveragedSeries
        ``floor(len(raw) / n)`` groups.  The trailing remainder (< n samples)
        is dropped, never partially averaged.
    """
    if isinstance(n, bool) or int(n) != n:
        raise ValueError(f"n must be an integer, got {n!r}")
    n = int(n)
    if n < 1:
        raise ValueError("n must be >= 1")

    y = np.asarray(raw.y, dtype=np.float64)
    n_groups = y.size // n
    n_keep = n_groups * n
    means = y[:n_keep].reshape(n_groups, n).sum(axis=1) / float(n)
    return AveragedSeries(
        x=group_centers(n_groups, n),
        y=means,
        n=n,
        n_dropped=int(y.size - n_keep),
    )
