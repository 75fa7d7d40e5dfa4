from __future__ import annotations

import os
from typing import List, Optional

DEFAULT_OPERATOR = os.getenv("ARITH_DEFAULT_OPERATOR", "+")
DEFAULT_LEVEL = os.getenv("ARITH_DEFAULT_LEVEL", "level1")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def _parse_seed(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        # Unparseable seed -> unseeded
        return None


RANDOM_SEED = _parse_seed(os.getenv("ARITH_RANDOM_SEED"))


def _parse_origins(value: str) -> List[str]:
    return [o.strip() for o in value.split(",") if o.strip()]


# Next.js dev server by default
CORS_ORIGINS = _parse_origins(
    os.getenv("ARITH_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
)
