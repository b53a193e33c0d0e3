"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from configurator.api.routes import router
from configurator.api.settings import AppSettings
from configurator.logging_setup import setup_json_logging


def create_app(settings: AppSettings | None = None) -> FastAPI:
    if settings is None:
        settings = AppSettings()

    setup_json_logging(settings.log_level)

    app = FastAPI(
        title="EZ Ladder Configurator",
        description="Fixed ladder build plan, BOM and pricing engine",
        version="0.1.0",
    )

    # CORS for the configurator front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
