from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .chart import Chart


@dataclass
class AggregationResult:
    """Output of one aggregation run."""

    source: str
    charts: List[Chart] = field(default_factory=list)
    error: str = ""
    total: int = 0

    @property
    def ok(self) -> bool:
        return not self.error

    @classmethod
    def unavailable(cls, source: str, error: str) -> "AggregationResult":
        return cls(source=source, charts=[], error=error, total=0)
