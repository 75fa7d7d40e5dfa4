# services/arithmetic/generator.py

from __future__ import annotations

import logging
import random as _random
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class Operator(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"

    @property
    def label(self) -> str:
        return _OPERATOR_LABELS[self]


_OPERATOR_LABELS: Dict[Operator, str] = {
    Operator.ADD: "ADDITION (+)",
    Operator.SUBTRACT: "SUBTRACTION (-)",
    Operator.MULTIPLY: "MULTIPLICATION (*)",
    Operator.DIVIDE: "DIVISION (/)",
    Operator.MODULO: "MODULO (%)",
}


class GameLevel(str, Enum):
    LEVEL1 = "level1"
    LEVEL2 = "level2"
    LEVEL3 = "level3"

    @property
    def bounds(self) -> Tuple[int, int]:
        return _LEVEL_BOUNDS[self]

    @property
    def min(self) -> int:
        return self.bounds[0]

    @property
    def max(self) -> int:
        return self.bounds[1]

    @property
    def display(self) -> str:
        return f"{self.min}-{self.max}"

    @property
    def label(self) -> str:
        return f"LEVEL {self.value[len('level'):]} ({self.display})"


# Inclusive operand ranges per band
_LEVEL_BOUNDS: Dict[GameLevel, Tuple[int, int]] = {
    GameLevel.LEVEL1: (1, 100),
    GameLevel.LEVEL2: (101, 500),
    GameLevel.LEVEL3: (501, 1000),
}


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    operand1: int
    operand2: int
    operator: Operator
    correct_answer: int

    @property
    def text(self) -> str:
        return f"{self.operand1} {self.operator.value} {self.operand2}"


def _rand(rng, lo: int, hi: int) -> int:
    return rng.randint(lo, hi)


def _resolve_operator(operator: Union[Operator, str]) -> Operator:
    try:
        return Operator(operator)
    except ValueError:
        logger.debug("unknown operator %r, falling back to addition", operator)
        return Operator.ADD


def generate_question(
    operator: Union[Operator, str],
    level: GameLevel,
    rng: Optional[_random.Random] = None,
) -> Question:
    """
    Build a fresh question for `operator` with operands bounded by `level`.

    Division is constructed from divisor and quotient so it never leaves a
    remainder; modulo never divides by zero. Anything outside the operator set
    is generated as an addition and reported as "+".
    """
    rng = rng or _random
    op = _resolve_operator(operator)
    lo, hi = GameLevel(level).bounds

    if op is Operator.SUBTRACT:
        a = _rand(rng, lo, hi)
        b = _rand(rng, lo, hi)
        if b > a:
            a, b = b, a
        answer = a - b
    elif op is Operator.MULTIPLY:
        a = _rand(rng, lo, hi)
        b = _rand(rng, lo, hi)
        answer = a * b
    elif op is Operator.DIVIDE:
        b = _rand(rng, max(1, lo), max(1, hi))
        quotient = _rand(rng, lo, max(lo, hi // max(1, b)))
        if quotient < 1:
            quotient = 1
        a = b * quotient
        answer = quotient
    elif op is Operator.MODULO:
        b = _rand(rng, 1, max(1, hi))
        a = _rand(rng, lo, hi)
        answer = a % b
    else:
        a = _rand(rng, lo, hi)
        b = _rand(rng, lo, hi)
        answer = a + b

    return Question(operand1=a, operand2=b, operator=op, correct_answer=answer)
