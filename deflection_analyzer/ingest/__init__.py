"""Ingest package - data file discovery and readers.

This package handles:
- Listing the data directory and finding which runs exist per category
- Reading tab-delimited current files into RawSeries

Filename convention:
    <category>_<polarity>_<run>[_suffix...]
with category in {cup, faceplate} and polarity in {deflected, undeflected}.
"""

from .discovery import discover_runs, has_run, list_data_files, matching_files, run_token
from .readers import load_series, read_data_file

__all__ = [
    "discover_runs",
    "has_run",
    "list_data_files",
    "matching_files",
    "run_token",
    "load_series",
    "read_data_file",
]
