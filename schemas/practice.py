from typing import Optional

from pydantic import BaseModel, ConfigDict

from generator import GameLevel, Operator


class LevelOut(BaseModel):
    id: GameLevel
    min: int
    max: int
    label: str


class OperatorOut(BaseModel):
    id: Operator
    label: str


class GeneratedQuestionOut(BaseModel):
    level: GameLevel
    operand1: int
    operand2: int
    operator: Operator
    correct_answer: int
    prompt: str


class CheckRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    answer: str
    correct_answer: int


class CheckResponse(BaseModel):
    ok: bool
    accepted: bool
    parsed_value: Optional[int] = None
    feedback: str = ""
