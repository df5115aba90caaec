# routers/arena.py
from __future__ import annotations

import logging
import random as _rnd
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from sqlalchemy import func, select

from db import SessionLocal
from models import Player, Question, Score
from schemas.players import LoginRequest, PlayerOut
from schemas.questions import QuestionOut
from schemas.scores import LeaderboardEntry, ScoreIn, ScoreSubmitted

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["arena"])

# a level counts as cleared with at least this many correct answers
PASS_SCORE = 4
LEADERBOARD_SIZE = 10


@router.post("/login", response_model=PlayerOut)
def login(req: LoginRequest):
    # no passwords: the username alone picks (or creates) the player
    with SessionLocal() as db:
        player = db.scalar(select(Player).where(Player.username == req.username))
        if player is None:
            player = Player(username=req.username, name=req.name, avatar=req.avatar)
            db.add(player)
            db.commit()
            db.refresh(player)
            logger.info("created player %s (id=%s)", player.username, player.id)
        return PlayerOut.model_validate(player)


@router.get("/questions/{level}", response_model=List[QuestionOut])
def questions_for_level(
    level: int,
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    random: bool = Query(default=False, description="If true, shuffle before limiting"),
):
    with SessionLocal() as db:
        rows = db.scalars(
            select(Question).where(Question.level == level).order_by(Question.id)
        ).all()
        qs = [QuestionOut.model_validate(q) for q in rows]

    if random:
        _rnd.shuffle(qs)

    if limit is not None:
        qs = qs[:limit]

    return qs


@router.post("/scores", response_model=ScoreSubmitted)
def submit_score(req: ScoreIn):
    with SessionLocal() as db:
        if db.get(Player, req.player_id) is None:
            raise HTTPException(status_code=404, detail="Player not found")
        entry = Score(player_id=req.player_id, level=req.level, score=req.score)
        db.add(entry)
        db.commit()
        db.refresh(entry)
        score_id = entry.id

    return {"success": True, "passed": req.score >= PASS_SCORE, "id": score_id}


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
def leaderboard():
    total = func.sum(Score.score).label("total_score")
    stmt = (
        select(Player.name, Player.avatar, total)
        .join(Score, Score.player_id == Player.id)
        .group_by(Player.id, Player.name, Player.avatar)
        .order_by(total.desc(), Player.id)
        .limit(LEADERBOARD_SIZE)
    )
    with SessionLocal() as db:
        rows = db.execute(stmt).all()

    return [{"name": r.name, "avatar": r.avatar, "total_score": int(r.total_score or 0)} for r in rows]
