# arithmetic/routers/game.py
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from schemas.game import (
    AnswerRequest,
    AnswerResponse,
    GameStateOut,
    QuestionOut,
    ScoreOut,
    SettingsRequest,
)
from session import GameSession, GameState, ScoreState, get_session

router = APIRouter(prefix="/game", tags=["game"])

Session = Annotated[GameSession, Depends(get_session)]


def _score(score: ScoreState) -> ScoreOut:
    return ScoreOut(correct=score.correct, incorrect=score.incorrect)


def _state_out(st: GameState) -> GameStateOut:
    return GameStateOut(
        operator=st.operator,
        level=st.level,
        question=QuestionOut.from_question(st.question),
        score=_score(st.score),
    )


@router.get("", response_model=GameStateOut)
def game_state(session: Session):
    return _state_out(session.state())


@router.put("/settings", response_model=GameStateOut)
def change_settings(req: SettingsRequest, session: Session):
    # any settings change deals a new question, even if nothing changed
    return _state_out(session.change_settings(operator=req.operator, level=req.level))


@router.post("/skip", response_model=QuestionOut)
def skip_question(session: Session):
    return QuestionOut.from_question(session.next_question())


@router.post("/answer", response_model=AnswerResponse)
def submit_answer(req: AnswerRequest, session: Session):
    res = session.submit(req.answer)
    return {
        "ok": res.ok,
        "correct": res.correct,
        "feedback": res.feedback,
        "expected": res.expected,
        "score": _score(res.score),
        "question": QuestionOut.from_question(res.question),
    }


@router.get("/score", response_model=ScoreOut)
def get_score(session: Session):
    return _score(session.state().score)
