"""Analyzer configuration.

All parameters that affect the batch output or the server are bundled into one
frozen dataclass.  Only ``n`` is exposed on the command line; the rest are
fixed defaults that tests and callers may override with ``dataclasses.replace()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from deflection_analyzer.models.catalog import CATEGORIES

ERROR_POLICIES: Tuple[str, ...] = ("abort", "skip")

#: Points used for the fitted normal curves.  Faceplate curves are drawn with
#: far fewer points; this is a tunable per category, not a derived value.
DEFAULT_FIT_SAMPLE_COUNTS: Dict[str, int] = {
    "cup": 1000,
    "faceplate": 10,
}


@dataclass(frozen=True)
class AnalyzerConfig:
    """Frozen configuration for one batch + serve session.

    Attributes
    ----------
    data_dir : Path
        Directory holding the raw ``<category>_<polarity>_<run>...`` files.
    output_dir : Path
        Directory receiving the rendered pages.  Wiped at the start of a batch.
    n : int
        Clustering value for the time average (>= 1).
    host, port :
        Bind address of the static file server.
    fit_sample_counts : mapping
        Fitted-curve sample count per category.
    error_policy : str
        ``"abort"`` stops the batch on the first failing run, ``"skip"``
        records the failure and continues with the next run.
    """

    data_dir: Path = Path("data")
    output_dir: Path = Path("data/html")
    n: int = 10
    host: str = "localhost"
    port: int = 8089
    fit_sample_counts: Mapping[str, int] = field(
        default_factory=lambda: dict(DEFAULT_FIT_SAMPLE_COUNTS), hash=False
    )
    error_policy: str = "abort"

    def __post_init__(self) -> None:
        # Accept str paths from callers.
        object.__setattr__(self, "data_dir", Path(self.data_dir))
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        # read-only copy of the caller's mapping
        object.__setattr__(self, "fit_sample_counts", MappingProxyType(dict(self.fit_sample_counts)))
        self.validate()

    def validate(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n < 1:
            raise ValueError(f"n must be an integer >= 1, got {self.n!r}")
        if self.error_policy not in ERROR_POLICIES:
            raise ValueError(f"error_policy must be one of {ERROR_POLICIES}, got {self.error_policy!r}")
        if not (0 <= int(self.port) <= 65535):
            raise ValueError(f"port out of range: {self.port}")
        for category in CATEGORIES:
            count = self.fit_sample_counts.get(category)
            if count is None:
                raise ValueError(f"Missing fitted-curve sample count for category '{category}'")
            if int(count) < 1:
                raise ValueError(f"Fitted-curve sample count for '{category}' must be >= 1, got {count}")

    def fit_sample_count(self, category: str) -> int:
        """Fitted normal-curve sample count for *category*."""
        if category not in self.fit_sample_counts:
            raise ValueError(f"Unknown category '{category}'")
        return int(self.fit_sample_counts[category])

    @property
    def server_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def replace(self, **overrides: Any) -> "AnalyzerConfig":
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (paths become strings)."""
        d = {f.name: getattr(self, f.name) for f in fields(self)}
        d["data_dir"] = str(self.data_dir)
        d["output_dir"] = str(self.output_dir)
        d["fit_sample_counts"] = dict(self.fit_sample_counts)
        return d
