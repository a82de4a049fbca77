"""RecordClassifier - routes decoded lines to the right chart.

Evaluation order:
1. `title` missing or not a string -> SchemaMismatch
2. Reserved tick outcome title -> TickOutcome (needs a numeric `count`)
3. Anything else -> GeneralMetric (needs a `pointSet` object)
"""

from __future__ import annotations

from typing import Any, Mapping

from ..domain.record import GeneralMetric, Record, TickOutcome, TickOutcomeKind
from ..domain.values import coerce_int
from ..errors import SchemaMismatch, ValueCoercionError


def classify(record: Mapping[str, Any]) -> Record:
    """Turn a decoded JSON object into a GeneralMetric or a TickOutcome.

    Raises:
        SchemaMismatch: required field missing or of the wrong type
        ValueCoercionError: `count` is present but not a number
    """
    title = record.get("title")
    if not isinstance(title, str):
        raise SchemaMismatch("line has no string 'title'")

    kind = TickOutcomeKind.from_title(title)
    if kind is not None:
        if "count" not in record:
            raise SchemaMismatch(f"{title} line has no 'count'")
        try:
            count = coerce_int(record["count"])
        except ValueCoercionError as e:
            raise ValueCoercionError(f"{title} count: {e}") from e
        return TickOutcome(kind=kind, count=count)

    points = record.get("pointSet")
    if not isinstance(points, dict):
        raise SchemaMismatch(f"line for {title!r} has no 'pointSet' object")
    return GeneralMetric(title=title, points=dict(points))
