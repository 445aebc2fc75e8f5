from __future__ import annotations

import math
import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def coerce_count(value: Any) -> int:
    """Turn a raw form value into a non-negative headcount.

    Blank or non-numeric input becomes 0 instead of being rejected. Like
    ``parseInt``, only the leading integer part is read ("3.7" -> 3,
    "12abc" -> 12). Negative values clamp to 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return max(int(value), 0)

    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    try:
        parsed = int(match.group(1))
    except ValueError:
        # digit strings beyond the interpreter's int conversion limit
        return 0
    return max(parsed, 0)
