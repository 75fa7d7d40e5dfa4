from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query

from generator import GameLevel, Operator, generate_question
from schemas.practice import (
    CheckRequest,
    CheckResponse,
    GeneratedQuestionOut,
    LevelOut,
    OperatorOut,
)
from session import INVALID_INPUT_MSG
from validator import InvalidNumericInput, validate_answer

router = APIRouter(tags=["practice"])


@router.get("/levels", response_model=List[LevelOut])
def list_levels():
    return [LevelOut(id=lv, min=lv.min, max=lv.max, label=lv.label) for lv in GameLevel]


@router.get("/operators", response_model=List[OperatorOut])
def list_operators():
    return [OperatorOut(id=op, label=op.label) for op in Operator]


@router.get("/generate", response_model=GeneratedQuestionOut)
def generate(
    operator: Operator = Query(default=Operator.ADD),
    level: GameLevel = Query(default=GameLevel.LEVEL1),
):
    q = generate_question(operator, level)
    return GeneratedQuestionOut(level=level, prompt=q.text, **q.model_dump())


@router.post("/check", response_model=CheckResponse)
def check(req: CheckRequest):
    try:
        res = validate_answer(req.answer, req.correct_answer)
    except InvalidNumericInput:
        return {"ok": False, "accepted": False, "parsed_value": None, "feedback": INVALID_INPUT_MSG}
    return {"ok": True, "accepted": res.accepted, "parsed_value": res.parsed_value}
