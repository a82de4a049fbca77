"""Request-scoped dependencies.

Every request gets a fresh aggregator; overriding these in
app.dependency_overrides swaps the reader or observer in tests.
"""

from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates

from ..core.aggregation.aggregator import ChartAggregator, SourceReader
from ..core.observer import LoggingObserver
from ..sources import FileSourceReader

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_aggregator() -> ChartAggregator:
    return ChartAggregator(observer=LoggingObserver())


def get_source_reader() -> SourceReader:
    return FileSourceReader()
