"""Diagnostics for aggregation runs.

The aggregation core reports what it skipped or created through an
AggregationObserver instead of logging directly. LoggingObserver is the
default used by the HTTP and CLI layers.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Protocol

from .errors import RecordRejected

logger = logging.getLogger(__name__)


class AggregationObserver(Protocol):
    def line_skipped(self, line_number: int, error: RecordRejected) -> None: ...

    def record_rejected(self, line_number: int, error: RecordRejected) -> None: ...

    def record_merged(self, line_number: int, title: str) -> None: ...

    def value_dropped(self, line_number: int, title: str, label: str) -> None: ...

    def chart_created(self, chart_id: int, title: str) -> None: ...

    def run_finished(self, source: str, charts: int, total: int) -> None: ...


class NullObserver:
    """Discards every event."""

    def line_skipped(self, line_number: int, error: RecordRejected) -> None:
        pass

    def record_rejected(self, line_number: int, error: RecordRejected) -> None:
        pass

    def record_merged(self, line_number: int, title: str) -> None:
        pass

    def value_dropped(self, line_number: int, title: str, label: str) -> None:
        pass

    def chart_created(self, chart_id: int, title: str) -> None:
        pass

    def run_finished(self, source: str, charts: int, total: int) -> None:
        pass


@dataclass
class AggregationStats:
    """Counters for a single run."""

    lines: int = 0
    merged_records: int = 0
    skipped_lines: int = 0
    rejected_records: int = 0
    dropped_values: int = 0
    charts_created: int = 0


class LoggingObserver:
    """Logs each event and tallies AggregationStats for the run summary."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger
        self.stats = AggregationStats()

    def line_skipped(self, line_number: int, error: RecordRejected) -> None:
        self.stats.lines += 1
        self.stats.skipped_lines += 1
        self._log.debug("[Aggregator] LINE_SKIPPED line=%d error=%s", line_number, error)

    def record_rejected(self, line_number: int, error: RecordRejected) -> None:
        self.stats.lines += 1
        self.stats.rejected_records += 1
        self._log.debug(
            "[Aggregator] RECORD_REJECTED line=%d kind=%s error=%s",
            line_number, type(error).__name__, error,
        )

    def record_merged(self, line_number: int, title: str) -> None:
        self.stats.lines += 1
        self.stats.merged_records += 1

    def value_dropped(self, line_number: int, title: str, label: str) -> None:
        self.stats.dropped_values += 1
        self._log.debug(
            "[Aggregator] VALUE_DROPPED line=%d title=%s label=%s",
            line_number, title, label,
        )

    def chart_created(self, chart_id: int, title: str) -> None:
        self.stats.charts_created += 1
        self._log.debug("[Aggregator] CHART_CREATED id=%d title=%s", chart_id, title)

    def run_finished(self, source: str, charts: int, total: int) -> None:
        self._log.info(
            "[Aggregator] RUN_FINISHED source=%s charts=%d total=%d stats=%s",
            source, charts, total, asdict(self.stats),
        )
