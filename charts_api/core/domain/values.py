"""Numeric coercion rules shared by the classifier and the charts."""

from __future__ import annotations

import math
import re

from ..errors import ValueCoercionError

_INTEGER_LABEL = re.compile(r"[+-]?[0-9]+")


def coerce_int(value: object) -> int:
    """Truncate a JSON number toward zero.

    Booleans are not numbers here, even though Python treats them as ints.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueCoercionError(f"not a number: {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueCoercionError(f"not a finite number: {value!r}")
    return int(value)


def numeric_label(label: str) -> int:
    """Sort key for a label: its integer value, or 0 when it is not an integer."""
    if _INTEGER_LABEL.fullmatch(label) is None:
        return 0
    return int(label)
