from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class LabeledSeries:
    """One line of a chart, aligned by position with its x values."""
    label: str
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        if len(self.x) != len(self.y):
            raise ValueError(f"Series '{self.label}': len(x)={len(self.x)} != len(y)={len(self.y)}")


@dataclass(frozen=True)
class ChartDataset:
    """
    Renderer-independent description of one chart.

    x_tick_labels, when set, are the display labels of the shared x axis
    (e.g. rounded values); they are aligned by position with the series x values.
    """
    title: str
    series: Tuple[LabeledSeries, ...]
    x_label: str = ""
    y_label: str = ""
    x_tick_labels: Optional[Tuple[str, ...]] = None
    fill_alpha: float = 0.0

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(s.label for s in self.series)


@dataclass(frozen=True)
class RunReport:
    """The three comparison charts of one run, ready to be rendered."""
    name: str
    title: str
    charts: Tuple[ChartDataset, ...]

    @property
    def filename(self) -> str:
        return f"{self.name}.html"
