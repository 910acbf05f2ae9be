"""FastAPI entrypoint for online ordering and sales reporting."""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from eelhouse import __version__
from eelhouse.api.router import api_router
from eelhouse.core.config import settings, setup_logging
from eelhouse.db import session as db_session
from eelhouse.db.base import Base
from eelhouse.db.seed import ensure_menu_seeded
from eelhouse.db.session import get_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logging()
    logger.info("Starting %s %s (env=%s)", settings.app_name, __version__, settings.app_env)
    Base.metadata.create_all(bind=db_session.engine)
    if settings.seed_menu:
        with db_session.SessionLocal() as session:
            ensure_menu_seeded(session)
    yield
    logger.info("Shutting down %s", settings.app_name)


app = FastAPI(title=settings.app_name, version=__version__, lifespan=lifespan)
app.include_router(api_router, prefix="/api")


@app.middleware("http")
async def log_api_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    if request.url.path.startswith("/api"):
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s %s in %.0fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


def _field_name(location: tuple) -> str:
    parts = [str(part) for part in location if part not in {"body", "path", "query"}]
    return ".".join(parts) or "body"


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"field": _field_name(tuple(error.get("loc", ()))), "message": error.get("msg", "")} for error in exc.errors()]
    logger.info("Validation failed for %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation error", "errors": errors},
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "A record with this information already exists"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


@app.get("/health", tags=["health"])
def health_check(db: Session = Depends(get_db)) -> dict[str, str]:
    """Report whether the database answers."""
    database = "healthy"
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Database health check failed: %s", exc)
        database = "unhealthy"
    return {"status": "ok" if database == "healthy" else "degraded", "database": database}
