"""Solve-timing state machine shared between the UI and the session."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
import logging
import time
from typing import Protocol

from kubia_timer.constants.timer_constants import PRESS_START_INTERVAL_MS
from kubia_timer.core.models import Penalty, Solve, SolveTime
from kubia_timer.core.scramble import ScrambleGenerator
from kubia_timer.core.services.session import Session

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Idle:
    """Waiting for an attempt; ``pressed`` while the trigger is held down."""

    pressed: bool = False


@dataclass(frozen=True, slots=True)
class Ready:
    """Trigger held long enough; releasing it starts the timer."""


@dataclass(frozen=True, slots=True)
class Timing:
    """Timer running; ``last_tick`` is the clock reading of the latest tick."""

    last_tick: float


@dataclass(frozen=True, slots=True)
class Finished:
    """Solve recorded; waiting for the trigger to be released."""


TimerState = Idle | Ready | Timing | Finished


class Cancellable(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[int, Callable[[], None]], Cancellable]
Clock = Callable[[], float]


class TimerManager:
    """Turns press/release/tick events into timed solves.

    The host supplies a monotonic ``clock`` (seconds) and a ``scheduler``
    able to run a callback once after a delay in milliseconds and cancel it.
    Events that have no transition in the current state are ignored.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        clock: Clock = time.monotonic,
        session: Session | None = None,
        scramble_generator: ScrambleGenerator | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._clock = clock
        self._session = session if session is not None else Session()
        self._scrambles = scramble_generator or ScrambleGenerator()

        self._state: TimerState = Idle(pressed=False)
        self._solve_time = SolveTime()
        self._link_to_last_solve: bool = False
        self._last_pressed: float = clock()
        self._press_generation: int = 0
        self._pending_timeout: Cancellable | None = None
        self._scramble: str = self._scrambles.next_scramble()
        self._state_listeners: list[Callable[[TimerState], None]] = []

    # --- Introspection ---

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def solve_time(self) -> SolveTime:
        return self._solve_time

    @property
    def session(self) -> Session:
        return self._session

    @property
    def scramble(self) -> str:
        return self._scramble

    @property
    def link_to_last_solve(self) -> bool:
        return self._link_to_last_solve

    @property
    def last_pressed(self) -> float:
        return self._last_pressed

    def hides_history(self) -> bool:
        """True while an attempt is armed or running."""
        return isinstance(self._state, (Ready, Timing))

    def add_state_listener(self, listener: Callable[[TimerState], None]) -> None:
        """Register a callback invoked after every state transition."""
        self._state_listeners.append(listener)

    def set_scramble_seed(self, seed: int | None) -> None:
        self._scrambles.set_seed(seed)
        self._scramble = self._scrambles.next_scramble()

    # --- Event intake ---

    def on_press(self) -> None:
        state = self._state
        if isinstance(state, Idle) and not state.pressed:
            self._last_pressed = self._clock()
            self._press_generation += 1
            generation = self._press_generation
            self._pending_timeout = self._scheduler(
                PRESS_START_INTERVAL_MS, lambda: self._on_press_timeout(generation)
            )
            self._set_state(Idle(pressed=True))
        elif isinstance(state, Timing):
            self._finish_solve()

    def on_release(self) -> None:
        state = self._state
        if isinstance(state, Idle):
            if state.pressed:
                self._cancel_pending_timeout()
                self._set_state(Idle(pressed=False))
        elif isinstance(state, Ready):
            self._set_state(Timing(last_tick=self._clock()))
        elif isinstance(state, Finished):
            self._set_state(Idle(pressed=False))

    def on_tick(self, now: float) -> None:
        state = self._state
        if isinstance(state, Timing):
            self._solve_time = SolveTime(
                self._solve_time.elapsed + timedelta(seconds=now - state.last_tick),
                self._solve_time.penalty,
            )
            self._state = Timing(last_tick=now)

    def on_penalty_selected(self, penalty: Penalty | None) -> None:
        penalty = penalty or Penalty.NONE
        self._solve_time = self._solve_time.with_penalty(penalty)
        if self._link_to_last_solve:
            self._session.set_last_penalty(penalty)

    # --- Internals ---

    def _on_press_timeout(self, generation: int) -> None:
        self._pending_timeout = None
        if generation != self._press_generation or self._state != Idle(pressed=True):
            logger.debug("Ignoring stale press timeout (generation %d)", generation)
            return
        self._solve_time = SolveTime()
        self._link_to_last_solve = False
        self._set_state(Ready())

    def _cancel_pending_timeout(self) -> None:
        if self._pending_timeout is not None:
            self._pending_timeout.cancel()
            self._pending_timeout = None

    def _finish_solve(self) -> None:
        self._solve_time = SolveTime(self._solve_time.elapsed)
        logger.info("Solve: %s", self._solve_time)
        self._session.add_solve(
            Solve(time=self._solve_time, timestamp=datetime.now(), scramble=self._scramble)
        )
        self._link_to_last_solve = True
        self._scramble = self._scrambles.next_scramble()
        self._set_state(Finished())

    def _set_state(self, state: TimerState) -> None:
        logger.debug("Timer state %s -> %s", self._state, state)
        self._state = state
        for listener in self._state_listeners:
            listener(state)
