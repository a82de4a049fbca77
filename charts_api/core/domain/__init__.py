"""Domain types for tick log aggregation."""

from .chart import SUMMARY_CHART_ID, SUMMARY_CHART_TITLE, Chart
from .record import SUMMARY_SLOTS, GeneralMetric, Record, TickOutcome, TickOutcomeKind
from .result import AggregationResult
from .values import coerce_int, numeric_label

__all__ = [
    "SUMMARY_CHART_ID",
    "SUMMARY_CHART_TITLE",
    "SUMMARY_SLOTS",
    "Chart",
    "GeneralMetric",
    "Record",
    "TickOutcome",
    "TickOutcomeKind",
    "AggregationResult",
    "coerce_int",
    "numeric_label",
]
