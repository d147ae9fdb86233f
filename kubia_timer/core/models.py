"""Domain models for the timer application."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from enum import Enum

from kubia_timer.constants.timer_constants import PLUS_TWO_SECONDS

_CENTISECOND = timedelta(milliseconds=10)
_PLUS_TWO = timedelta(seconds=PLUS_TWO_SECONDS)


class Penalty(Enum):
    """Penalty annotation attached to a solve."""

    NONE = "ok"
    PLUS_TWO = "+2"
    DNF = "dnf"


@dataclass(frozen=True, slots=True)
class SolveTime:
    """Elapsed duration of one attempt plus its penalty.

    Ordering follows competition ranking: a DNF is worse than any finished
    time, finished times compare by their recorded time (elapsed plus the
    +2 penalty), and DNFs tie with each other. ``==`` keeps plain value
    semantics; use :func:`compare` for ranking ties.
    """

    elapsed: timedelta = timedelta(0)
    penalty: Penalty = Penalty.NONE

    def __post_init__(self) -> None:
        if self.elapsed < timedelta(0):
            raise ValueError(f"Solve time cannot be negative: {self.elapsed!r}")

    @classmethod
    def dnf(cls) -> SolveTime:
        return cls(timedelta(0), Penalty.DNF)

    def is_dnf(self) -> bool:
        return self.penalty is Penalty.DNF

    def is_plus_two(self) -> bool:
        return self.penalty is Penalty.PLUS_TWO

    def recorded_time(self) -> timedelta | None:
        """Return the ranked time, or None for a DNF."""
        if self.penalty is Penalty.DNF:
            return None
        if self.penalty is Penalty.PLUS_TWO:
            return self.elapsed + _PLUS_TWO
        return self.elapsed

    def with_penalty(self, penalty: Penalty) -> SolveTime:
        return replace(self, penalty=penalty)

    def sort_key(self) -> tuple[bool, timedelta]:
        recorded = self.recorded_time()
        return (recorded is None, recorded if recorded is not None else timedelta(0))

    def __lt__(self, other: SolveTime) -> bool:
        if not isinstance(other, SolveTime):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: SolveTime) -> bool:
        if not isinstance(other, SolveTime):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: SolveTime) -> bool:
        if not isinstance(other, SolveTime):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: SolveTime) -> bool:
        if not isinstance(other, SolveTime):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def display(self) -> str:
        """Format as ``m:ss.cc`` / ``s.cc``, truncating to centiseconds."""
        recorded = self.recorded_time()
        if recorded is None:
            return "DNF"
        centiseconds = recorded // _CENTISECOND
        minutes, rest = divmod(centiseconds, 6000)
        seconds, hundredths = divmod(rest, 100)
        if minutes:
            text = f"{minutes}:{seconds:02d}.{hundredths:02d}"
        else:
            text = f"{seconds}.{hundredths:02d}"
        if self.penalty is Penalty.PLUS_TWO:
            text += "+"
        return text

    def __str__(self) -> str:
        return self.display()


def compare(a: SolveTime, b: SolveTime) -> int:
    """Three-way comparison under ranking order: -1, 0 or 1."""
    key_a, key_b = a.sort_key(), b.sort_key()
    return (key_a > key_b) - (key_a < key_b)


@dataclass(slots=True)
class Solve:
    """A recorded attempt with the time it was taken and its scramble."""

    time: SolveTime
    timestamp: datetime = field(default_factory=datetime.now)
    scramble: str = ""


@dataclass(slots=True)
class SessionEntry:
    """One row of session history with the rolling statistics ending at it."""

    solve: Solve
    mo3: SolveTime | None = None
    ao5: SolveTime | None = None
    ao12: SolveTime | None = None
