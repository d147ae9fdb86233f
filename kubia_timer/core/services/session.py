"""Service holding the solves of the current practice session."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
import logging

from kubia_timer.constants.timer_constants import AO5_WINDOW, AO12_WINDOW, MO3_WINDOW
from kubia_timer.core.models import Penalty, SessionEntry, Solve, SolveTime
from kubia_timer.core.statistics import average_of, mean_of

logger = logging.getLogger(__name__)

_StatFn = Callable[[Sequence[SolveTime]], SolveTime]


class Session:
    """Append-only list of solves with per-entry rolling statistics.

    Every entry stores the mo3/ao5/ao12 of the trailing window ending at its
    own index, so point queries never need index arithmetic.
    """

    def __init__(self) -> None:
        self._entries: list[SessionEntry] = []

    # --- Mutation ---

    def add_solve(self, solve: Solve) -> None:
        self._entries.append(SessionEntry(solve=solve))
        self.update_statistics_last()

    def update_statistics_last(self) -> None:
        """Recompute the statistics of the last entry after its solve changed."""
        if not self._entries:
            return
        self._update_entry(len(self._entries) - 1)

    def update_statistics(self, index: int) -> None:
        """Recompute every statistic whose window contains ``index``."""
        count = len(self._entries)
        for i in range(index, min(count, index + AO12_WINDOW)):
            self._update_entry(i)

    def set_last_penalty(self, penalty: Penalty) -> bool:
        """Change the penalty of the most recent solve. Returns False if empty."""
        solve = self.last_solve()
        if solve is None:
            return False
        solve.time = solve.time.with_penalty(penalty)
        self.update_statistics_last()
        logger.info("Last solve changed to %s", solve.time)
        return True

    # --- Queries ---

    def get_n_solves(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SessionEntry]:
        return iter(self._entries)

    def iter(self) -> Iterator[SessionEntry]:
        return iter(self._entries)

    def get_entry(self, index: int) -> SessionEntry | None:
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def get_solve(self, index: int) -> Solve | None:
        entry = self.get_entry(index)
        return entry.solve if entry else None

    def get_mo3(self, index: int) -> SolveTime | None:
        return self._get_stat(index, "mo3", MO3_WINDOW)

    def get_ao5(self, index: int) -> SolveTime | None:
        return self._get_stat(index, "ao5", AO5_WINDOW)

    def get_ao12(self, index: int) -> SolveTime | None:
        return self._get_stat(index, "ao12", AO12_WINDOW)

    def best_mo3(self) -> SolveTime | None:
        return self._best("mo3")

    def best_ao5(self) -> SolveTime | None:
        return self._best("ao5")

    def best_ao12(self) -> SolveTime | None:
        return self._best("ao12")

    def last_solve(self) -> Solve | None:
        return self._entries[-1].solve if self._entries else None

    def last_mo3(self) -> SolveTime | None:
        return self._entries[-1].mo3 if self._entries else None

    def last_ao5(self) -> SolveTime | None:
        return self._entries[-1].ao5 if self._entries else None

    def last_ao12(self) -> SolveTime | None:
        return self._entries[-1].ao12 if self._entries else None

    # --- Internals ---

    def _get_stat(self, index: int, name: str, window: int) -> SolveTime | None:
        if len(self._entries) < window:
            return None
        entry = self.get_entry(index)
        return getattr(entry, name) if entry else None

    def _best(self, name: str) -> SolveTime | None:
        present = [value for value in (getattr(e, name) for e in self._entries) if value is not None]
        return min(present, default=None)

    def _update_entry(self, index: int) -> None:
        entry = self._entries[index]
        entry.mo3 = self._compute(index, MO3_WINDOW, mean_of)
        entry.ao5 = self._compute(index, AO5_WINDOW, average_of)
        entry.ao12 = self._compute(index, AO12_WINDOW, average_of)

    def _compute(self, index: int, window: int, stat: _StatFn) -> SolveTime | None:
        start = index - window + 1
        if start < 0:
            return None
        return stat([e.solve.time for e in self._entries[start:index + 1]])
