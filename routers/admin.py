from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select

from db import SessionLocal
from deps.auth import require_admin
from models import Player, Question
from schemas.players import PlayerOut
from schemas.questions import QuestionIn, QuestionOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/players", response_model=List[PlayerOut])
def list_players():
    with SessionLocal() as db:
        rows = db.scalars(select(Player).order_by(Player.id)).all()
        return [PlayerOut.model_validate(p) for p in rows]


@router.delete("/players/{player_id}")
def delete_player(player_id: int):
    with SessionLocal() as db:
        p = db.get(Player, player_id)
        if p is not None:
            # scores go with the player (relationship cascade)
            db.delete(p)
            db.commit()
            logger.info("deleted player id=%s", player_id)
    return {"success": True}


@router.get("/questions", response_model=List[QuestionOut])
def list_all_questions():
    with SessionLocal() as db:
        rows = db.scalars(select(Question).order_by(Question.level, Question.id)).all()
        return [QuestionOut.model_validate(q) for q in rows]


@router.post("/questions")
def create_question(req: QuestionIn):
    with SessionLocal() as db:
        q = Question(level=req.level, question=req.question, answer=req.answer)
        db.add(q)
        db.commit()
        db.refresh(q)
        qid = q.id
    logger.info("added level %s question id=%s", req.level, qid)
    return {"success": True, "id": qid}


@router.delete("/questions/{question_id}")
def delete_question(question_id: int):
    with SessionLocal() as db:
        q = db.get(Question, question_id)
        if q is not None:
            db.delete(q)
            db.commit()
            logger.info("deleted question id=%s", question_id)
    return {"success": True}
