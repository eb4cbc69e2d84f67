from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class RawSeries:
    """
    Current samples parsed from one or more data files of a single run/polarity.

    Notes
    - 'x' is the synthetic sample index 0..L-1 assigned in parse order; when
      several files contribute, the counter continues across file boundaries.
    - 'y' holds field 1 of every data line; header lines are never included.
    - both arrays are always float64 and have the same length.
    """
    x: np.ndarray
    y: np.ndarray
    source_paths: Tuple[Path, ...] = ()
    warnings: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.x) != len(self.y):
            raise ValueError(f"RawSeries length mismatch: len(x)={len(self.x)}, len(y)={len(self.y)}")

    @classmethod
    def from_values(cls, values, source_paths: Tuple[Path, ...] = (), warnings: Tuple[str, ...] = ()) -> "RawSeries":
        y = np.asarray(values, dtype=np.float64).reshape(-1)
        x = np.arange(y.size, dtype=np.float64)
        return cls(x=x, y=y, source_paths=tuple(source_paths), warnings=tuple(warnings))

    @classmethod
    def empty(cls) -> "RawSeries":
        return cls.from_values([])

    @property
    def n_samples(self) -> int:
        return int(len(self.y))


@dataclass(frozen=True)
class AveragedSeries:
    """
    Block means of a RawSeries.

    Group k covers raw indices [k*n, k*n+n-1]; x holds its center index
    (k+1)*n - n/2 - 1.  len == floor(len(raw)/n); a trailing partial block is dropped.
    """
    x: np.ndarray
    y: np.ndarray
    n: int
    n_dropped: int = 0

    @property
    def n_groups(self) -> int:
        return int(len(self.y))


@dataclass(frozen=True)
class GaussianParams:
    """Normal-distribution fit of a RawSeries (population sigma, divisor N)."""
    mean: float
    sigma: float
    n_samples: int = 0

    def bounds(self, width: float = 4.0) -> Tuple[float, float]:
        """Return (mean - width*sigma, mean + width*sigma)."""
        return self.mean - width * self.sigma, self.mean + width * self.sigma
