from pydantic import BaseModel


class ScoreIn(BaseModel):
    player_id: int
    level: int
    score: int


class ScoreSubmitted(BaseModel):
    success: bool
    passed: bool
    id: int | None = None


class LeaderboardEntry(BaseModel):
    name: str | None
    avatar: str | None
    total_score: int
