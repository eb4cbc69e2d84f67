from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Tuple

from deflection_analyzer.errors import DirectoryAccessError
from deflection_analyzer.models.catalog import DEFLECTED, RunSet, check_category, check_polarity

logger = logging.getLogger(__name__)


def list_data_files(data_dir: str | Path) -> Tuple[str, ...]:
    """
    Return the names of the regular files in *data_dir*, sorted by name.

    This sorted listing is the "file-listing order" used everywhere else
    (multi-file concatenation, first-match selection).
    """
    root = Path(data_dir).expanduser()
    if not root.is_dir():
        raise DirectoryAccessError(root, "not a directory")
    try:
        names = [p.name for p in root.iterdir() if p.is_file()]
    except OSError as exc:
        raise DirectoryAccessError(root, str(exc)) from exc
    return tuple(sorted(names))


def run_token(category: str, polarity: str, run_number: int) -> str:
    """Filename token identifying one run, e.g. 'cup_deflected_3'."""
    check_category(category)
    check_polarity(polarity)
    return f"{category}_{polarity}_{int(run_number)}"


def matching_files(listing: Sequence[str], category: str, polarity: str, run_number: int) -> Tuple[str, ...]:
    """
    All names in *listing* containing the run token, in listing order.

    Plain substring match: 'cup_deflected_1' also matches 'cup_deflected_10_x.txt'.
    """
    token = run_token(category, polarity, run_number)
    return tuple(name for name in listing if token in name)


def has_run(listing: Sequence[str], run_number: int, category: str) -> bool:
    """A run exists for *category* iff some file contains '<category>_deflected_<run>'."""
    token = run_token(category, DEFLECTED, run_number)
    return any(token in name for name in listing)


def discover_runs(listing: Sequence[str], category: str) -> RunSet:
    """
    Scan run numbers 1, 2, 3, ... for *category* and stop at the first gap.

    Runs after a missing number are never visited.
    """
    check_category(category)
    runs = []
    run_number = 1
    while has_run(listing, run_number, category):
        runs.append(run_number)
        run_number += 1
    logger.info("Discovered %d %s run(s)", len(runs), category)
    return RunSet(category=category, runs=tuple(runs))
