from .aggregator import ChartAggregator, SourceReader
from .finalizer import finalize
from .registry import ChartRegistry

__all__ = ["ChartAggregator", "SourceReader", "ChartRegistry", "finalize"]
