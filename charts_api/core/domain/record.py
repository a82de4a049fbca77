"""Record variants produced by the classifier.

A decoded line is either a general metric (a label -> value map merged
into the chart with the same title) or one of the three tick outcomes,
which feed fixed slots of the tick classification summary chart.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union


class TickOutcomeKind(Enum):
    """Reserved titles and their fixed slot in the summary chart."""

    ON_TIME = "tickOnTime"
    OVERRUN = "tickIntervalOverrun"
    UNDERRUN = "tickIntervalUnderrun"

    @property
    def slot(self) -> int:
        return _SLOTS[self]

    @classmethod
    def from_title(cls, title: str) -> "TickOutcomeKind | None":
        try:
            return cls(title)
        except ValueError:
            return None


_SLOTS = {
    TickOutcomeKind.ON_TIME: 0,
    TickOutcomeKind.OVERRUN: 1,
    TickOutcomeKind.UNDERRUN: 2,
}

SUMMARY_SLOTS = len(_SLOTS)


@dataclass(frozen=True)
class GeneralMetric:
    """A `{"title", "pointSet"}` line.

    `points` keeps the raw pointSet values; each one is coerced when merged
    so that a single bad value only drops that label.
    """

    title: str
    points: Dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class TickOutcome:
    """A `{"title": <reserved>, "count"}` line."""

    kind: TickOutcomeKind
    count: int

    @property
    def title(self) -> str:
        return self.kind.value

    @property
    def slot(self) -> int:
        return self.kind.slot


Record = Union[GeneralMetric, TickOutcome]
