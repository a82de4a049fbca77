from __future__ import annotations

from fastapi import FastAPI

from . import __version__
from .endpoints import charts_router, health_router


def create_app() -> FastAPI:
    app = FastAPI(title="Tick Charts", version=__version__)
    app.include_router(health_router)
    app.include_router(charts_router)
    return app


app = create_app()
