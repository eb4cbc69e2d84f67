"""Deflection Analyzer -- deflected vs undeflected current comparison per run.

This package provides tools for:
- Discovering runs of cup and faceplate samples from data filenames
- Reading tab-delimited current files (header line skipped)
- Time-averaging raw currents in blocks of n samples
- Fitting each raw signal with a normal distribution
- Rendering raw / time-averaged / fitted-normal charts into one HTML page per run
- Serving the generated pages over a local HTTP file server

Key principles:
- Fail fast: unreadable directories or files, malformed lines and degenerate
  statistics are typed errors, never silent NaNs
- No shared state between runs: each run is reduced into its own RunSample
- Renderer independence: reports are plain datasets until rendered

Main subpackages:
- ingest: run discovery and file readers
- analysis: time averaging, Gaussian estimation, per-run reduction
- models: data models (RawSeries, AveragedSeries, GaussianParams, RunSample, RunReport)
- presentation: report assembly and HTML rendering
"""

__all__ = []
