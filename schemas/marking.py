# schemas/marking.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class MarkRequest(BaseModel):
    question_id: int
    answer: str


class MarkResponse(BaseModel):
    ok: bool
    correct: bool
    score: int
    feedback: str
    expected: Optional[int] = None
