# services/arithmetic/schemas/game.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from generator import GameLevel, Operator, Question

# ---------- Question display ----------


class QuestionOut(BaseModel):
    operand1: int
    operand2: int
    operator: Operator
    prompt: str

    @classmethod
    def from_question(cls, q: Question) -> "QuestionOut":
        return cls(operand1=q.operand1, operand2=q.operand2, operator=q.operator, prompt=q.text)


class ScoreOut(BaseModel):
    correct: int
    incorrect: int


class GameStateOut(BaseModel):
    operator: Operator
    level: GameLevel
    question: QuestionOut
    score: ScoreOut


# ---------- Settings ----------


class SettingsRequest(BaseModel):
    operator: Optional[Operator] = None
    level: Optional[GameLevel] = None


# ---------- Answer ----------


class AnswerRequest(BaseModel):
    # {"answer": 4} is read as "4"
    model_config = ConfigDict(coerce_numbers_to_str=True)

    answer: str


class AnswerResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str
    # unset when the input could not be read as a number
    expected: Optional[int] = None
    score: ScoreOut
    question: QuestionOut
