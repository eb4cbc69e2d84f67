from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

CUP = "cup"
FACEPLATE = "faceplate"

DEFLECTED = "deflected"
UNDEFLECTED = "undeflected"

#: Categories in processing order.  Each one has independent run numbering.
CATEGORIES: Tuple[str, ...] = (CUP, FACEPLATE)
POLARITIES: Tuple[str, ...] = (DEFLECTED, UNDEFLECTED)


def check_category(category: str) -> str:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category '{category}' (expected one of {CATEGORIES})")
    return category


def check_polarity(polarity: str) -> str:
    if polarity not in POLARITIES:
        raise ValueError(f"Unknown polarity '{polarity}' (expected one of {POLARITIES})")
    return polarity


@dataclass(frozen=True)
class RunSet:
    """
    Run numbers discovered for one category.

    runs are dense and start at 1: discovery stops at the first missing number,
    so a gap hides every later run.
    """
    category: str
    runs: Tuple[int, ...] = ()

    def __iter__(self) -> Iterator[int]:
        return iter(self.runs)

    def __len__(self) -> int:
        return len(self.runs)

    def __contains__(self, run_number: object) -> bool:
        return run_number in self.runs

    @property
    def last(self) -> int:
        """Highest discovered run number, 0 when no run exists."""
        return self.runs[-1] if self.runs else 0
