"""Averaging rules for windows of solve times."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta

from kubia_timer.core.models import SolveTime


def _mean(times: Sequence[SolveTime]) -> SolveTime:
    total = timedelta(0)
    for time in times:
        recorded = time.recorded_time()
        if recorded is None:
            return SolveTime.dnf()
        total += recorded
    return SolveTime(total / len(times))


def mean_of(times: Sequence[SolveTime]) -> SolveTime:
    """Untrimmed mean. Any DNF in ``times`` makes the mean a DNF."""
    if not times:
        raise ValueError("Cannot take the mean of an empty window.")
    return _mean(times)


def average_of(times: Sequence[SolveTime]) -> SolveTime:
    """Trimmed mean dropping one best and one worst time.

    The first occurrence of the minimum and the first occurrence of the
    maximum (at a different index) are excluded. A DNF among the remaining
    times makes the average a DNF, so a window tolerates at most one DNF.
    """
    if len(times) < 3:
        raise ValueError(f"Average needs at least 3 times, got {len(times)}.")

    indices = range(len(times))
    best = min(indices, key=lambda i: times[i])
    worst = max((i for i in indices if i != best), key=lambda i: times[i])
    kept = [time for i, time in enumerate(times) if i not in (best, worst)]
    return _mean(kept)
