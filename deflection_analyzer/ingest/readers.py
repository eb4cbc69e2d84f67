from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

import numpy as np

from deflection_analyzer.errors import FileAccessError, ParseError
from deflection_analyzer.models.catalog import UNDEFLECTED, check_category, check_polarity
from deflection_analyzer.models.series import RawSeries

from .discovery import run_token

logger = logging.getLogger(__name__)

#: Column holding the current value (0-based); other columns are ignored.
VALUE_FIELD = 1
DELIMITER = "\t"


def _parse_value(path: Path, line_number: int, line: str) -> float:
    fields = line.split(DELIMITER)
    if len(fields) <= VALUE_FIELD:
        raise ParseError(path, line_number, line, f"missing value field {VALUE_FIELD}")
    raw = fields[VALUE_FIELD]
    try:
        return float(raw)
    except ValueError as exc:
        raise ParseError(path, line_number, line, f"non-numeric value {raw!r}") from exc


def read_data_file(path: str | Path) -> np.ndarray:
    """
    Read one tab-delimited data file and return field 1 of every data line.

    Contract:
      - the first line is a header and is always skipped, whatever it contains.
      - any later line with a missing or non-numeric field 1 is fatal (ParseError).
      - no skip-line or recovery policy.
    """
    fp = Path(path)
    values: List[float] = []
    try:
        with fp.open("r", encoding="utf-8", errors="replace") as f:
            logger.debug("file open: %s", fp)
            f.readline()  # header
            for line_number, raw_line in enumerate(f, start=2):
                line = raw_line.rstrip("\r\n")
                values.append(_parse_value(fp, line_number, line))
    except OSError as exc:
        raise FileAccessError(fp, str(exc)) from exc
    return np.asarray(values, dtype=np.float64)


def load_series(
    listing: Sequence[str],
    run_number: int,
    category: str,
    polarity: str,
    data_dir: str | Path,
) -> RawSeries:
    """
    Load the raw series of one run/category/polarity.

    - undeflected: only the first matching file (listing order) is read; the scan
      stops there.
    - deflected: every matching file is read and the data lines are concatenated
      in listing order into one series.

    With no matching file an empty series is returned.
    """
    check_category(category)
    check_polarity(polarity)
    root = Path(data_dir)
    token = run_token(category, polarity, run_number)

    blocks: List[np.ndarray] = []
    paths: List[Path] = []
    for name in listing:
        logger.debug("Checking file: %s", name)
        if token not in name:
            continue
        p = root / name
        blocks.append(read_data_file(p))
        paths.append(p)
        if polarity == UNDEFLECTED:
            break

    warnings: List[str] = []
    if not paths:
        warnings.append(f"no file matched '{token}'")
    elif len(paths) > 1:
        sizes = ", ".join(f"{p.name}:{b.size}" for p, b in zip(paths, blocks))
        warnings.append(f"concatenated {len(paths)} files for '{token}' ({sizes})")

    y = np.concatenate(blocks) if blocks else np.empty(0, dtype=np.float64)
    return RawSeries.from_values(y, source_paths=tuple(paths), warnings=tuple(warnings))
