"""Error taxonomy for the batch reduction.

Every error raised while ingesting or reducing a run derives from
:class:`AnalyzerError`, so the orchestration layer can turn it into a
per-run outcome and apply the configured error policy.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class AnalyzerError(Exception):
    """Base class for all categorized analyzer failures."""


class DirectoryAccessError(AnalyzerError):
    """The input data directory is missing or cannot be listed."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"Cannot read data directory '{self.path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class FileAccessError(AnalyzerError):
    """A matched data file cannot be opened or read."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"Cannot open data file '{self.path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class ParseError(AnalyzerError, ValueError):
    """A data line has a missing or non-numeric value field."""

    def __init__(self, path: str | Path, line_number: int, line: str, reason: str) -> None:
        self.path = Path(path)
        self.line_number = int(line_number)
        self.line = line
        super().__init__(f"{self.path.name}:{self.line_number}: {reason} (line={line!r})")


class DegenerateStatisticsError(AnalyzerError, ValueError):
    """Mean/sigma or the normal density is undefined for the given input."""

    def __init__(self, message: str, label: Optional[str] = None) -> None:
        self.label = label
        super().__init__(f"{label}: {message}" if label else message)


class OutputWriteError(AnalyzerError):
    """The output directory or a page in it cannot be created or written."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"Cannot write output '{self.path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
