"""Error taxonomy for chart aggregation.

Only SourceUnavailable is reported to callers. Every RecordRejected
subclass is absorbed by the aggregator at line or label granularity.
"""

from __future__ import annotations


class ChartsError(Exception):
    """Base class for aggregation errors."""


class SourceUnavailable(ChartsError):
    """The input source could not be read at all."""

    def __init__(self, source: str, reason: str):
        super().__init__(reason)
        self.source = source
        self.reason = reason


class RecordRejected(ChartsError):
    """A line or a single contribution was dropped."""


class LineDecodeError(RecordRejected):
    """The line is not a JSON object."""


class SchemaMismatch(RecordRejected):
    """Required field missing or of the wrong type."""


class ValueCoercionError(RecordRejected):
    """A value that should be numeric is not."""


class InternalConsistencyError(AssertionError):
    """Chart state broke one of its invariants. Never expected at runtime."""
