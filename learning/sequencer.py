# learning/sequencer.py
"""
Number-line move sequencer.

Walks a runner from 0 through a list of signed steps, one step at a time,
clamping every landing spot to [MIN_POSITION, MAX_POSITION]. Each step goes
through the same phases:

    Moving (wind-up: facing published) -> Moving (position + move committed)
    -> Paused (only between steps) -> next step ... -> Idle

All waits are timers on an injected clock, so a VirtualClock can fast-forward
a run and an AsyncioClock can play it live.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from learning.clock import Callback, Clock, TimerHandle, VirtualClock

logger = logging.getLogger(__name__)

MIN_POSITION = -10
MAX_POSITION = 10


class Phase(str, Enum):
    IDLE = "idle"
    MOVING = "moving"
    PAUSED = "paused"


@dataclass(frozen=True)
class Timing:
    wind_up: float = 0.1  # facing flips before the runner leaves
    transition: float = 1.2  # position tween
    settle: float = 1.5  # Moving is held this long after the move is committed
    pause: float = 4.0  # gap between two moves

    def run_length(self, n_steps: int) -> float:
        if n_steps <= 0:
            return 0.0
        return n_steps * (self.wind_up + self.settle) + (n_steps - 1) * self.pause


@dataclass(frozen=True)
class Move:
    start: int
    end: int
    applied_value: int
    sequence_id: int


@dataclass(frozen=True)
class Snapshot:
    position: int
    phase: Phase
    moves: Tuple[Move, ...] = ()
    applied_steps: Tuple[int, ...] = ()
    run_id: int = 0
    time: float = 0.0

    @property
    def direction(self) -> int:
        # runner faces right until a negative step is queued
        if self.applied_steps and self.applied_steps[-1] < 0:
            return -1
        return 1


Listener = Callable[[Snapshot], None]


def clamp(value: int, low: int = MIN_POSITION, high: int = MAX_POSITION) -> int:
    return max(low, min(high, value))


def plan_moves(steps: Sequence[int], start: int = 0) -> List[Move]:
    """The moves a full run of ``steps`` produces, without any timing."""
    moves: List[Move] = []
    pos = clamp(start)
    for i, step in enumerate(steps):
        nxt = clamp(pos + int(step))
        moves.append(Move(start=pos, end=nxt, applied_value=nxt - pos, sequence_id=i))
        pos = nxt
    return moves


class MoveSequencer:
    """
    Owns position, move history and phase for one number line.

    Only ``execute`` and ``reset`` mutate state. Observers get immutable
    Snapshots through ``subscribe``; a new ``execute`` while a run is in
    flight cancels that run and starts over from 0.
    """

    def __init__(self, clock: Clock, timing: Optional[Timing] = None) -> None:
        self._clock = clock
        self.timing = timing or Timing()
        self._listeners: List[Listener] = []
        self._timer: Optional[TimerHandle] = None
        self._run_id = 0
        self._steps: Tuple[int, ...] = ()
        self._index = 0
        self._position = 0
        self._phase = Phase.IDLE
        self._moves: List[Move] = []
        self._applied: List[int] = []

    # --- read side ----------------------------------------------------------------

    @property
    def position(self) -> int:
        return self._position

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def busy(self) -> bool:
        return self._phase is not Phase.IDLE

    def snapshot(self) -> Snapshot:
        return Snapshot(
            position=self._position,
            phase=self._phase,
            moves=tuple(self._moves),
            applied_steps=tuple(self._applied),
            run_id=self._run_id,
            time=self._clock.now(),
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- commands -----------------------------------------------------------------

    def execute(self, steps: Sequence[int]) -> bool:
        """
        Start a run over ``steps``. Returns False (and changes nothing) when
        there is nothing to walk.
        """
        steps = tuple(int(s) for s in steps)
        if not steps:
            logger.debug("execute called with no steps; ignoring")
            return False

        if self.busy:
            logger.info("run %s superseded by a new run", self._run_id)
        self._cancel_timer()
        self._run_id += 1
        self._steps = steps
        self._index = 0
        self._position = 0
        self._moves = []
        self._applied = []
        logger.debug("run %s started with %d steps", self._run_id, len(steps))
        self._begin_step()
        return True

    def reset(self) -> None:
        if self.busy:
            logger.info("run %s cancelled by reset", self._run_id)
            self._cancel_timer()
            self._run_id += 1
        self._steps = ()
        self._index = 0
        self._position = 0
        self._moves = []
        self._applied = []
        self._phase = Phase.IDLE
        self._publish()

    async def play(self, steps: Sequence[int]) -> Snapshot:
        """
        Execute and wait until the run goes back to Idle or is superseded.
        Needs a clock that fires on the running asyncio loop.
        """
        done: asyncio.Future = asyncio.get_running_loop().create_future()
        watching: List[int] = []

        def _watch(snap: Snapshot) -> None:
            if not watching or done.done():
                return
            if snap.run_id != watching[0] or snap.phase is Phase.IDLE:
                done.set_result(snap)

        unsubscribe = self.subscribe(_watch)
        try:
            if not self.execute(steps):
                return self.snapshot()
            watching.append(self._run_id)
            return await done
        finally:
            unsubscribe()

    # --- phase transitions --------------------------------------------------------

    def _begin_step(self) -> None:
        step = self._steps[self._index]
        target = clamp(self._position + step)
        self._applied.append(target - self._position)
        self._phase = Phase.MOVING
        # schedule before publishing: a listener that restarts or resets cancels this timer
        self._schedule(self.timing.wind_up, self._commit_move)
        self._publish()

    def _commit_move(self) -> None:
        applied = self._applied[-1]
        start = self._position
        move = Move(
            start=start,
            end=start + applied,
            applied_value=applied,
            sequence_id=len(self._moves),
        )
        self._moves.append(move)
        self._position = move.end
        self._schedule(self.timing.settle, self._after_settle)
        self._publish()

    def _after_settle(self) -> None:
        self._index += 1
        if self._index < len(self._steps):
            self._phase = Phase.PAUSED
            self._schedule(self.timing.pause, self._begin_step)
            self._publish()
            return

        self._phase = Phase.IDLE
        logger.debug("run %s finished at %d", self._run_id, self._position)
        self._publish()

    # --- plumbing -----------------------------------------------------------------

    def _schedule(self, delay: float, fn: Callback) -> None:
        run_id = self._run_id

        def fire() -> None:
            # a timer that outlived its run must not touch the new run's state
            if run_id != self._run_id:
                return
            self._timer = None
            fn()

        self._timer = self._clock.call_later(delay, fire)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _publish(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)


@dataclass
class WalkRecording:
    steps: List[int]
    frames: List[Snapshot] = field(default_factory=list)

    @property
    def final(self) -> Optional[Snapshot]:
        return self.frames[-1] if self.frames else None

    @property
    def duration(self) -> float:
        return self.frames[-1].time if self.frames else 0.0


def record_walk(steps: Sequence[int], timing: Optional[Timing] = None) -> WalkRecording:
    """Play a whole run on a virtual clock and keep every published snapshot."""
    clock = VirtualClock()
    seq = MoveSequencer(clock, timing)
    rec = WalkRecording(steps=[int(s) for s in steps])
    seq.subscribe(rec.frames.append)
    seq.execute(rec.steps)
    clock.run()
    return rec
