from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta

import pytest

from kubia_timer.core.models import Penalty, Solve, SolveTime
from kubia_timer.core.scramble import ScrambleGenerator
from kubia_timer.core.services.session import Session
from kubia_timer.core.timer_manager import TimerManager


class FakeClock:
    """Monotonic clock in seconds, advanced by hand."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


class FakeTimeout:
    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Runs scheduled callbacks when the shared clock is advanced past them."""

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.timeouts: list[FakeTimeout] = []

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> FakeTimeout:
        timeout = FakeTimeout(self.clock.now + delay_ms / 1000, callback)
        self.timeouts.append(timeout)
        return timeout

    def advance(self, ms: float) -> None:
        self.clock.now += ms / 1000
        for timeout in list(self.timeouts):
            if timeout.cancelled or timeout.fired or timeout.due > self.clock.now:
                continue
            timeout.fired = True
            timeout.callback()

    def pending(self) -> list[FakeTimeout]:
        return [t for t in self.timeouts if not t.cancelled and not t.fired]


def make_time(seconds: float, penalty: Penalty = Penalty.NONE) -> SolveTime:
    return SolveTime(timedelta(seconds=seconds), penalty)


def make_session(*times: SolveTime | float) -> Session:
    session = Session()
    for value in times:
        time = value if isinstance(value, SolveTime) else make_time(value)
        session.add_solve(Solve(time=time))
    return session


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def scheduler(clock: FakeClock) -> FakeScheduler:
    return FakeScheduler(clock)


@pytest.fixture()
def manager(clock: FakeClock, scheduler: FakeScheduler) -> TimerManager:
    return TimerManager(
        scheduler=scheduler,
        clock=clock,
        scramble_generator=ScrambleGenerator(seed=1234),
    )
