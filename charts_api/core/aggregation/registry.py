"""Chart registry and merger for a single aggregation run."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from ..domain.chart import SUMMARY_CHART_ID, SUMMARY_CHART_TITLE, Chart
from ..domain.record import GeneralMetric, Record, TickOutcome


class ChartRegistry:
    """One Chart per general title plus the preallocated summary chart.

    General charts get identities 1, 2, 3, ... in first-seen order and are
    iterated in that same order.
    """

    def __init__(self, on_create: Optional[Callable[[Chart], None]] = None):
        self.summary = Chart(id=SUMMARY_CHART_ID, title=SUMMARY_CHART_TITLE)
        self.summary_used = False
        self._charts: Dict[str, Chart] = {}
        self._next_id = SUMMARY_CHART_ID + 1
        self._on_create = on_create

    def __len__(self) -> int:
        return len(self._charts)

    def __contains__(self, title: str) -> bool:
        return title in self._charts

    def get(self, title: str) -> Optional[Chart]:
        return self._charts.get(title)

    def chart_for(self, title: str) -> Chart:
        chart = self._charts.get(title)
        if chart is None:
            chart = Chart(id=self._next_id, title=title)
            self._next_id += 1
            self._charts[title] = chart
            if self._on_create is not None:
                self._on_create(chart)
        return chart

    def general_charts(self) -> List[Chart]:
        return list(self._charts.values())

    def merge(self, record: Record) -> List[str]:
        """Merge one classified record. Returns labels dropped as non-numeric."""
        if isinstance(record, TickOutcome):
            self.summary.add_point(record.slot, record.title, record.count)
            self.summary_used = True
            return []
        if isinstance(record, GeneralMetric):
            return self.chart_for(record.title).add_line(record)
        raise TypeError(f"unsupported record type: {type(record).__name__}")
