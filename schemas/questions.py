# schemas/questions.py
from pydantic import BaseModel, ConfigDict


class QuestionIn(BaseModel):
    level: int
    question: str
    answer: int


class QuestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    level: int
    question: str
    answer: int
