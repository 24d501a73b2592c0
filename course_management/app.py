"""FastAPI application exposing the course management API."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from course_management import __version__
from course_management.config import API_PREFIX, CORS_ALLOW_ORIGINS, LOG_LEVEL, SEED_DEV_DATA
from course_management.db import get_session, init_db
from course_management.db.fixtures import seed_dev_data
from course_management.error_handlers import register_exception_handlers
from course_management.routers import ROUTERS

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=LOG_LEVEL)


def create_app() -> FastAPI:
    app = FastAPI(title="Course Management Service", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in ROUTERS:
        app.include_router(router, prefix=API_PREFIX)

    @app.on_event("startup")
    def startup_event() -> None:  # pragma: no cover - exercised indirectly
        init_db()
        if SEED_DEV_DATA:
            with get_session() as session:
                seed_dev_data(session)
            LOGGER.info("Seeded development data")

    @app.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()

__all__ = ["app", "create_app"]
