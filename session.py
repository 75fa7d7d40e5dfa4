# services/arithmetic/session.py

from __future__ import annotations

import logging
import random as _random
import threading
from typing import Optional, Union

from pydantic import BaseModel

import config
from generator import GameLevel, Operator, Question, generate_question
from validator import InvalidNumericInput, validate_answer

logger = logging.getLogger(__name__)

CORRECT_MSG = "Correct! Well done!"
INVALID_INPUT_MSG = "Please enter a valid whole number."


def incorrect_msg(expected: int) -> str:
    return f"Incorrect. The correct answer is {expected}."


class ScoreState(BaseModel):
    correct: int = 0
    incorrect: int = 0


class GameState(BaseModel):
    operator: Operator
    level: GameLevel
    question: Question
    score: ScoreState


class SubmitResult(BaseModel):
    # False when the input was not a number; nothing else changed then
    ok: bool = True
    correct: bool
    expected: Optional[int] = None
    feedback: str
    score: ScoreState
    # the question to answer next (unchanged when ok is False)
    question: Question


def _coerce_operator(value: Union[Operator, str]) -> Operator:
    try:
        return Operator(value)
    except ValueError:
        logger.warning("unknown operator %r, using %s", value, Operator.ADD.value)
        return Operator.ADD


def _coerce_level(value: Union[GameLevel, str]) -> GameLevel:
    try:
        return GameLevel(value)
    except ValueError:
        logger.warning("unknown level %r, using %s", value, GameLevel.LEVEL1.value)
        return GameLevel.LEVEL1


class GameSession:
    """
    One player's game: the selected operator and level, the question on
    screen and the running score. Every action runs under a single lock and
    hands back a copy of the state it left behind.
    """

    def __init__(
        self,
        operator: Union[Operator, str] = Operator.ADD,
        level: Union[GameLevel, str] = GameLevel.LEVEL1,
        rng: Optional[_random.Random] = None,
    ):
        self._lock = threading.Lock()
        self._rng = rng or _random.Random()
        self.operator = _coerce_operator(operator)
        self.level = _coerce_level(level)
        self.score = ScoreState()
        self.question = self._generate()

    def _generate(self) -> Question:
        q = generate_question(self.operator, self.level, self._rng)
        # the generator reports the operator it actually used
        self.operator = q.operator
        return q

    def _snapshot(self) -> GameState:
        return GameState(
            operator=self.operator,
            level=self.level,
            question=self.question,
            score=self.score.model_copy(),
        )

    def state(self) -> GameState:
        with self._lock:
            return self._snapshot()

    def next_question(self) -> Question:
        with self._lock:
            self.question = self._generate()
            return self.question

    def change_settings(
        self,
        operator: Optional[Union[Operator, str]] = None,
        level: Optional[Union[GameLevel, str]] = None,
    ) -> GameState:
        with self._lock:
            if operator is not None:
                self.operator = _coerce_operator(operator)
            if level is not None:
                self.level = _coerce_level(level)
            logger.info(
                "settings changed: operator=%s level=%s", self.operator.value, self.level.value
            )
            self.question = self._generate()
            return self._snapshot()

    def submit(self, raw: str) -> SubmitResult:
        """
        Mark `raw` against the current question and move on to a new one.

        Input that is not a whole number leaves score and question as they are
        and comes back with ok=False so the player can answer again.
        """
        with self._lock:
            expected = self.question.correct_answer
            try:
                check = validate_answer(raw, expected)
            except InvalidNumericInput:
                logger.warning("invalid answer input: %r", raw)
                return SubmitResult(
                    ok=False,
                    correct=False,
                    feedback=INVALID_INPUT_MSG,
                    score=self.score.model_copy(),
                    question=self.question,
                )

            if check.accepted:
                self.score.correct += 1
                feedback = CORRECT_MSG
            else:
                self.score.incorrect += 1
                feedback = incorrect_msg(expected)
            logger.info(
                "answer %r for %s: %s",
                raw,
                self.question.text,
                "correct" if check.accepted else "incorrect",
            )

            self.question = self._generate()
            return SubmitResult(
                correct=check.accepted,
                expected=expected,
                feedback=feedback,
                score=self.score.model_copy(),
                question=self.question,
            )


_session: Optional[GameSession] = None
_session_lock = threading.Lock()


def get_session() -> GameSession:
    global _session
    with _session_lock:
        if _session is None:
            rng = _random.Random(config.RANDOM_SEED) if config.RANDOM_SEED is not None else None
            _session = GameSession(config.DEFAULT_OPERATOR, config.DEFAULT_LEVEL, rng)
        return _session
