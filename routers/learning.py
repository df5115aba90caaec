# routers/learning.py
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from learning import parse
from learning.sequencer import Timing, record_walk
from schemas.learning import WalkRequest, WalkResponse

router = APIRouter(prefix="/api/learning", tags=["learning"])

TIMING = Timing()


@router.post("/walk", response_model=WalkResponse)
def walk(req: WalkRequest):
    """
    Parse the learner's expression and return the whole number-line run as
    timestamped frames, ready for the front-end to replay.
    """
    steps = parse(req.expression)
    rec = record_walk(steps, TIMING)
    final = rec.final

    return {
        "steps": steps,
        "final_position": final.position if final else 0,
        "moves": [asdict(m) for m in final.moves] if final else [],
        "frames": [
            {
                "time": f.time,
                "position": f.position,
                "phase": f.phase.value,
                "direction": f.direction,
                "moves": len(f.moves),
                "applied_steps": list(f.applied_steps),
            }
            for f in rec.frames
        ],
        "duration": TIMING.run_length(len(steps)),
        "transition": TIMING.transition,
    }
