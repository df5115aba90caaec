# schemas/learning.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class WalkRequest(BaseModel):
    expression: str = Field(default="", max_length=200)


class MoveOut(BaseModel):
    # "from"/"to" on the wire, like the front-end's move records
    start: int = Field(serialization_alias="from")
    end: int = Field(serialization_alias="to")
    applied_value: int
    sequence_id: int


class FrameOut(BaseModel):
    time: float
    position: int
    phase: str
    direction: int
    moves: int
    applied_steps: List[int]


class WalkResponse(BaseModel):
    steps: List[int]
    final_position: int
    moves: List[MoveOut]
    frames: List[FrameOut]
    duration: float
    transition: float
