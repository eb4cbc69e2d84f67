from .catalog import (
    CATEGORIES,
    CUP,
    DEFLECTED,
    FACEPLATE,
    POLARITIES,
    UNDEFLECTED,
    RunSet,
)
from .report import ChartDataset, LabeledSeries, RunReport
from .sample import PolaritySample, RunSample
from .series import AveragedSeries, GaussianParams, RawSeries

__all__ = [
    "CATEGORIES",
    "CUP",
    "DEFLECTED",
    "FACEPLATE",
    "POLARITIES",
    "UNDEFLECTED",
    "RunSet",
    "ChartDataset",
    "LabeledSeries",
    "RunReport",
    "PolaritySample",
    "RunSample",
    "AveragedSeries",
    "GaussianParams",
    "RawSeries",
]
