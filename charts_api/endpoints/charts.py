"""Chart page and JSON endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from ..core.aggregation.aggregator import ChartAggregator, SourceReader
from ..schemas import AggregationOut
from .deps import get_aggregator, get_source_reader, templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["charts"])


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    file: str = Query(default="", description="Path of the tick log to chart"),
    aggregator: ChartAggregator = Depends(get_aggregator),
    reader: SourceReader = Depends(get_source_reader),
):
    """Render the chart page. Without `file` only the form is shown."""
    if not file:
        return templates.TemplateResponse(request, "index.html", {"page": None})

    result = aggregator.aggregate_source(file, reader)
    if result.error:
        logger.warning("[Charts] SOURCE_UNAVAILABLE file=%s error=%s", file, result.error)

    page = AggregationOut.from_result(result)
    return templates.TemplateResponse(request, "index.html", {"page": page})


@router.get("/api/charts", response_model=AggregationOut)
def charts(
    file: str = Query(..., min_length=1, description="Path of the tick log to chart"),
    aggregator: ChartAggregator = Depends(get_aggregator),
    reader: SourceReader = Depends(get_source_reader),
) -> AggregationOut:
    """Aggregate `file` and return the charts as JSON.

    An unreadable file is not an HTTP error: the body carries the error
    message and the requested file, with no charts.
    """
    result = aggregator.aggregate_source(file, reader)
    if result.error:
        logger.warning("[Charts] SOURCE_UNAVAILABLE file=%s error=%s", file, result.error)
    return AggregationOut.from_result(result)
