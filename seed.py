# Starter content for a fresh database: levelled addition questions and the admin account.
from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from sqlalchemy import func, select

from db import SessionLocal
from models import ROLE_ADMIN, Player, Question

logger = logging.getLogger(__name__)

LEVELS = (1, 2, 3)
QUESTIONS_PER_LEVEL = 10

ADMIN_PLAYER = {
    "username": "admin",
    "name": "Administrator",
    "avatar": "👨‍🏫",
    "role": ROLE_ADMIN,
}


def generate_questions(rng: Optional[random.Random] = None) -> List[Dict]:
    """
    Level L draws both operands from [-10*L, 10*L), so later levels reach
    further along the number line.
    """
    rng = rng or random.Random()
    out: List[Dict] = []
    for level in LEVELS:
        span = level * 10
        for _ in range(QUESTIONS_PER_LEVEL):
            a = rng.randrange(-span, span)
            b = rng.randrange(-span, span)
            out.append({"level": level, "question": f"{a} + ({b})", "answer": a + b})
    return out


def seed_defaults(rng: Optional[random.Random] = None) -> Dict[str, int]:
    added = {"questions": 0, "admin": 0}
    with SessionLocal() as db:
        count = db.scalar(select(func.count()).select_from(Question)) or 0
        if count == 0:
            rows = [Question(**q) for q in generate_questions(rng)]
            db.add_all(rows)
            added["questions"] = len(rows)

        admin = db.scalar(select(Player).where(Player.username == ADMIN_PLAYER["username"]))
        if admin is None:
            db.add(Player(**ADMIN_PLAYER))
            added["admin"] = 1

        db.commit()

    if added["questions"] or added["admin"]:
        logger.info(
            "seeded %d questions, %d admin account(s)", added["questions"], added["admin"]
        )
    return added
