# learning/parser.py
from __future__ import annotations

import re
from typing import List

# A minus sign only binds to the digit run right after it; "+", "(" and spaces
# are separators for the reader, not operators.
_STEP_RE = re.compile(r"-?[0-9]+")


def parse(text: str) -> List[int]:
    """
    Extract the signed integer steps typed by the learner, left to right.

    "(-2) + 3" -> [-2, 3], "12-3" -> [12, -3], "abc" -> [].
    """
    if not text:
        return []
    return [int(tok) for tok in _STEP_RE.findall(text)]
