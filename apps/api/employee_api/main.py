"""
FastAPI application for the employee records API.

Run with::

    uvicorn employee_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api.core.config import Settings, settings as default_settings
from employee_api.core.database import build_engine, build_session_factory, init_db
from employee_api.core.errors import register_exception_handlers
from employee_api.core.logging_config import setup_logging
from employee_api.routers.employees import router as employees_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    engine = build_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Database URL: %s", engine.url.render_as_string(hide_password=True))
        if settings.auto_create_tables:
            init_db(engine)
        yield
        engine.dispose()

    app = FastAPI(title=settings.project_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(employees_router, prefix="/api/employees", tags=["employees"])

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
