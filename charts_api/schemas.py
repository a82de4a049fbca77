from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .core.domain.chart import Chart
from .core.domain.result import AggregationResult


class ChartOut(BaseModel):
    id: int
    title: str
    labels: List[str] = Field(default_factory=list)
    data: List[int] = Field(default_factory=list)

    @classmethod
    def from_chart(cls, chart: Chart) -> "ChartOut":
        return cls(id=chart.id, title=chart.title, labels=list(chart.labels), data=list(chart.data))


class AggregationOut(BaseModel):
    charts: List[ChartOut] = Field(default_factory=list)
    error: str = ""
    file: str
    total: int = 0

    @classmethod
    def from_result(cls, result: AggregationResult) -> "AggregationOut":
        return cls(
            charts=[ChartOut.from_chart(c) for c in result.charts],
            error=result.error,
            file=result.source,
            total=result.total,
        )


class HealthOut(BaseModel):
    status: str = "ok"
