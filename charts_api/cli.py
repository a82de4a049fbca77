"""CLI entry point for the chart service."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from common.config import get_settings
from common.logging_setup import configure_logging

from .core.aggregation.aggregator import ChartAggregator
from .core.observer import LoggingObserver
from .schemas import AggregationOut
from .sources import FileSourceReader

logger = logging.getLogger(__name__)


def _summarize(args: argparse.Namespace) -> int:
    settings = get_settings()
    aggregator = ChartAggregator(observer=LoggingObserver())
    result = aggregator.aggregate_source(args.file, FileSourceReader(settings))

    if args.json:
        print(json.dumps(AggregationOut.from_result(result).model_dump(), indent=2))
        return 1 if result.error else 0

    if result.error:
        print(f"error: {result.error} (file: {result.source})", file=sys.stderr)
        return 1

    for chart in result.charts:
        print(f"[{chart.id}] {chart.title}")
        for label, value in chart.pairs():
            print(f"    {label or '-':>24} {value}")
    print(f"total: {result.total}")
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("[CLI] Starting chart server on %s:%d", host, port)
    uvicorn.run(
        "charts_api.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tick-charts", description="Chart newline-delimited JSON tick logs")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("summarize", help="aggregate a tick log and print the charts")
    s.add_argument("file")
    s.add_argument("--json", action="store_true", help="print the same JSON body as /api/charts")
    s.set_defaults(func=_summarize)

    v = sub.add_parser("serve", help="run the HTTP server")
    v.add_argument("--host", default=None)
    v.add_argument("--port", type=int, default=None)
    v.add_argument("--reload", action="store_true")
    v.set_defaults(func=_serve)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
