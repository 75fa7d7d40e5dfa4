from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel

# Answers are compared as 32-bit signed integers
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ZERO_FRACTION_RE = re.compile(r"-?[0-9]+\.0+")
_INT_LITERAL_RE = re.compile(r"[+-]?[0-9]+")

# Only ASCII control characters and space are trimmed; NBSP and friends stay
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))


class InvalidNumericInput(ValueError):
    def __init__(self, raw: str):
        super().__init__(f"not a valid whole number: {raw!r}")
        self.raw = raw


class AnswerCheck(BaseModel):
    accepted: bool
    parsed_value: Optional[int] = None


def _parse_int(s: str) -> int:
    if _INT_LITERAL_RE.fullmatch(s) is None:
        raise InvalidNumericInput(s)
    value = int(s)
    if value < INT_MIN or value > INT_MAX:
        raise InvalidNumericInput(s)
    return value


def validate_answer(raw: str, correct_answer: int) -> AnswerCheck:
    """
    Compare a typed answer with the expected integer.

    "2.0" / "2.00" count as 2; any other decimal ("2.5", "2.", ".0") is simply
    wrong. Text that is not an integer at all raises InvalidNumericInput so the
    caller can ask again.
    """
    s = (raw or "").strip(_TRIM_CHARS)

    if "." in s:
        if _ZERO_FRACTION_RE.fullmatch(s) is None:
            return AnswerCheck(accepted=False)
        s = s[: s.index(".")]

    value = _parse_int(s)
    return AnswerCheck(accepted=value == correct_answer, parsed_value=value)
