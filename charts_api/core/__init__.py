"""Tick log aggregation core.

Pure functions and classes over explicit inputs: no I/O, no logging
side effects outside the injected observer.
"""

from .aggregation import ChartAggregator, ChartRegistry, finalize
from .classification import classify
from .domain import AggregationResult, Chart, GeneralMetric, TickOutcome, TickOutcomeKind
from .errors import (
    ChartsError,
    InternalConsistencyError,
    LineDecodeError,
    RecordRejected,
    SchemaMismatch,
    SourceUnavailable,
    ValueCoercionError,
)
from .observer import AggregationObserver, AggregationStats, LoggingObserver, NullObserver
from .parsing import ParsedLine, iter_lines

__all__ = [
    "ChartAggregator",
    "ChartRegistry",
    "finalize",
    "classify",
    "AggregationResult",
    "Chart",
    "GeneralMetric",
    "TickOutcome",
    "TickOutcomeKind",
    "ChartsError",
    "InternalConsistencyError",
    "LineDecodeError",
    "RecordRejected",
    "SchemaMismatch",
    "SourceUnavailable",
    "ValueCoercionError",
    "AggregationObserver",
    "AggregationStats",
    "LoggingObserver",
    "NullObserver",
    "ParsedLine",
    "iter_lines",
]
