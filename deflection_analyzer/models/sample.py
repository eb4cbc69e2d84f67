from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .catalog import CATEGORIES
from .series import AveragedSeries, GaussianParams, RawSeries


@dataclass(frozen=True)
class PolaritySample:
    """Raw, averaged and fitted data of one polarity (deflected or undeflected)."""
    raw: RawSeries
    averaged: AveragedSeries
    params: GaussianParams

    @property
    def warnings(self) -> Tuple[str, ...]:
        return self.raw.warnings


@dataclass(frozen=True)
class RunSample:
    """
    Per-run context passed explicitly through every pipeline stage.

    A new RunSample is built for each run and discarded once its report is
    written; nothing is carried over to the next run.
    """
    category: str
    run_number: int
    n: int
    deflected: PolaritySample
    undeflected: PolaritySample

    def __post_init__(self) -> None:
        if self.category not in CATEGORIES:
            raise ValueError(f"Unknown category '{self.category}'")
        if int(self.run_number) < 1:
            raise ValueError(f"run_number must be >= 1, got {self.run_number}")

    @property
    def name(self) -> str:
        """Output artifact stem, e.g. 'cup_run_3'."""
        return f"{self.category}_run_{self.run_number}"

    @property
    def title(self) -> str:
        """Page title, e.g. 'Cup Run 3'."""
        return f"{self.category.capitalize()} Run {self.run_number}"
