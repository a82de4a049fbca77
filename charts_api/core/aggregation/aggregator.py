"""ChartAggregator - runs one aggregation pass over a tick log.

Pipeline: parse lines -> classify records -> merge into the registry ->
finalize. Bad lines, records and values are reported to the observer and
skipped; only an unreadable source ends the run early.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..classification.record_classifier import classify
from ..domain.result import AggregationResult
from ..errors import RecordRejected, SourceUnavailable
from ..observer import AggregationObserver, NullObserver
from ..parsing.record_parser import iter_lines
from .finalizer import finalize
from .registry import ChartRegistry

SourceReader = Callable[[str], bytes]


class ChartAggregator:
    """Aggregates newline-delimited JSON tick records into charts.

    Each call builds its own ChartRegistry, so one aggregator can serve
    many requests without sharing state between them.
    """

    def __init__(self, observer: Optional[AggregationObserver] = None):
        self.observer = observer or NullObserver()

    def aggregate(self, content: bytes, source: str = "") -> AggregationResult:
        observer = self.observer
        registry = ChartRegistry(on_create=lambda c: observer.chart_created(c.id, c.title))

        for line in iter_lines(content):
            if line.error is not None:
                observer.line_skipped(line.line_number, line.error)
                continue

            try:
                record = classify(line.record)
            except RecordRejected as e:
                observer.record_rejected(line.line_number, e)
                continue

            for label in registry.merge(record):
                observer.value_dropped(line.line_number, record.title, label)
            observer.record_merged(line.line_number, record.title)

        charts, total = finalize(registry)
        observer.run_finished(source, len(charts), total)
        return AggregationResult(source=source, charts=charts, error="", total=total)

    def aggregate_source(self, source: str, reader: SourceReader) -> AggregationResult:
        """Read `source` with `reader` and aggregate it.

        A SourceUnavailable from the reader becomes an error result with no
        charts that still echoes the requested source.
        """
        try:
            content = reader(source)
        except SourceUnavailable as e:
            return AggregationResult.unavailable(source, e.reason)
        return self.aggregate(content, source)
