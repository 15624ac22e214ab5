"""Challenge verdicts and reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Verdict(Enum):
    """How the current run compares with the baseline."""

    INSUFFICIENT_DATA = "insufficient_data"
    COMPLETED = "completed"
    ALMOST_THERE = "almost_there"
    TIED = "tied"
    REGRESSED = "regressed"


@dataclass(frozen=True, slots=True)
class ScoreReport:
    """Classified comparison plus the lines to show the player.

    Attributes:
        verdict: Classification of the comparison.
        lines: Human-readable text, advisory lines first.
        delta: Baseline minus current, in seconds. None without enough data.
    """

    verdict: Verdict
    lines: tuple[str, ...]
    delta: float | None = None
