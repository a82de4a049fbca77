"""HTTP endpoints for the chart service."""

from .charts import router as charts_router
from .health import router as health_router

__all__ = [
    "charts_router",
    "health_router",
]
