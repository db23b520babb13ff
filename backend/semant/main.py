"""FastAPI entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from semant.core.config import get_settings
from semant.routers import analysis, health


def create_app() -> FastAPI:
    app = FastAPI(title=get_settings().app_name, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173", "*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(analysis.router, prefix="/api/analysis", tags=["analysis"])
    return app


app = create_app()
