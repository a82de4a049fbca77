from __future__ import annotations

from typing import List, Tuple

from ..domain.chart import Chart
from ..domain.record import SUMMARY_SLOTS
from .registry import ChartRegistry


def finalize(registry: ChartRegistry) -> Tuple[List[Chart], int]:
    """Sort every general chart's labels and compute the grand total.

    The summary chart keeps its fixed slot order; it is padded to all
    three slots and listed first, but only if a tick outcome was merged.
    It never counts toward the total.
    """
    charts: List[Chart] = []
    if registry.summary_used:
        registry.summary.pad_to(SUMMARY_SLOTS)
        charts.append(registry.summary)

    total = 0
    for chart in registry.general_charts():
        chart.sort_labels()
        total += chart.total()
        charts.append(chart)

    return charts, total
