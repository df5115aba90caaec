from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

from fastapi import APIRouter
from sympy import Integer
from sympy.parsing.sympy_parser import parse_expr, standard_transformations

from db import SessionLocal
from models import Question
from schemas.marking import MarkRequest, MarkResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["marking"])

# --- Parsing / validation helpers ------------------------------------------------
LEN_LIMIT = 40
_INVALID_CHARS_MSG = "Only whole numbers, spaces, + - and parentheses are allowed."
_NOT_INTEGER_MSG = "The answer should be a whole number."
_ALLOWED_RE = re.compile(r"^[0-9+\-()\s]{1,40}$")
# "07" is 7 for a learner, but a Python syntax error for parse_expr
_LEADING_ZEROS_RE = re.compile(r"\b0+(?=\d)")

# Arena answers are small integers; anything past this is a typo, not an answer
_MAX_INT_DIGITS = 12


def _validate_answer_text(s: Optional[str]) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return "Answer required."
    if len(s) > LEN_LIMIT:
        return f"Answer too long (> {LEN_LIMIT})."
    if _ALLOWED_RE.fullmatch(s) is None:
        return _INVALID_CHARS_MSG
    if any(len(run) > _MAX_INT_DIGITS for run in re.findall(r"[0-9]+", s)):
        return "Number too large."
    return None


def _eval_integer(expr: str) -> int:
    """
    Evaluate an answer such as "-7", "(-7)" or "-10 + 3" exactly.
    Raises ValueError for anything that does not reduce to an integer.
    """
    expr = _LEADING_ZEROS_RE.sub("", expr)
    sym = parse_expr(expr, transformations=standard_transformations, evaluate=True)
    if not isinstance(sym, Integer):
        raise ValueError(_NOT_INTEGER_MSG)
    return int(sym)


def mark_answer(expected: int, answer: str) -> Dict[str, Any]:
    msg = _validate_answer_text(answer)
    if msg:
        return {"ok": False, "correct": False, "score": 0, "feedback": msg, "expected": expected}

    try:
        value = _eval_integer(answer.strip())
    except ValueError as e:
        return {"ok": False, "correct": False, "score": 0, "feedback": str(e), "expected": expected}
    except Exception:
        return {
            "ok": False,
            "correct": False,
            "score": 0,
            "feedback": _INVALID_CHARS_MSG,
            "expected": expected,
        }

    correct = value == expected
    feedback = ""
    if correct and answer.strip() != str(expected):
        feedback = f"Correct; simplest form is {expected}."
    return {
        "ok": True,
        "correct": correct,
        "score": 1 if correct else 0,
        "feedback": feedback,
        "expected": expected,
    }


# --- Endpoints --------------------------------------------------------------------


@router.post("/mark", response_model=MarkResponse)
def mark(req: MarkRequest):
    with SessionLocal() as db:
        q = db.get(Question, req.question_id)
        expected = q.answer if q else None
    if expected is None:
        logger.info("mark request for unknown question id=%s", req.question_id)
        return {"ok": False, "correct": False, "score": 0, "feedback": "unknown question id"}
    return mark_answer(expected, req.answer)
