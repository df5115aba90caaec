from learning.clock import AsyncioClock, VirtualClock
from learning.parser import parse
from learning.sequencer import Move, MoveSequencer, Phase, Snapshot, Timing

__all__ = [
    "AsyncioClock",
    "Move",
    "MoveSequencer",
    "Phase",
    "Snapshot",
    "Timing",
    "VirtualClock",
    "parse",
]
