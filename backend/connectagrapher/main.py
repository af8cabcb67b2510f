# backend/connectagrapher/main.py

import logging
import os
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as SA_TimeoutError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.gzip import GZipMiddleware

from . import models  # noqa: F401  registers tables on Base.metadata
from .api import (
    api_admin,
    api_booking,
    api_catalogue,
    api_contact,
    api_gallery,
    api_payment,
    api_pricing,
    api_review,
    api_site,
)
from .core.config import settings
from .core.observability import setup_logging
from .database import Base, engine

setup_logging()
logger = logging.getLogger(__name__)

_BOOT_TS = time.time()

app = FastAPI(title="ConnectAGrapher Studio API", default_response_class=ORJSONResponse)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info("CORS origins set to: %s", settings.CORS_ORIGINS)
app.add_middleware(GZipMiddleware, minimum_size=1024)


@app.middleware("http")
async def catch_exceptions(request: Request, call_next):
    """Return JSON responses for errors that escape the routers and log them."""
    try:
        response = await call_next(request)
    except StarletteHTTPException as exc:
        logger.error("HTTP error %s at %s: %s", exc.status_code, request.url.path, exc.detail)
        response = ORJSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    except SA_TimeoutError as exc:
        logger.error("DB timeout at %s: %s", request.url.path, str(exc))
        response = ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Database busy, please retry"},
        )
    except Exception as exc:
        logger.exception("Unhandled error: %s", exc)
        response = ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Flatten request validation errors into the ``message``/``field_errors`` shape."""
    errors = exc.errors()
    logger.warning("Validation error at %s: %s", request.url.path, errors)
    field_errors = {}
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field_errors[".".join(loc) or "body"] = err.get("msg", "invalid")
    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": {"message": "Invalid request.", "field_errors": field_errors}},
    )


@app.get("/healthz/live", tags=["health"])
async def health_live():
    """Liveness probe: process can respond; does not touch the DB."""
    return {"status": "ok", "kind": "live", "uptime_s": round(time.time() - _BOOT_TS, 1), "pid": os.getpid()}


@app.get("/healthz/ready", tags=["health"])
def health_ready():
    """Readiness probe: a trivial query against the configured database."""
    started = time.perf_counter()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Readiness DB ping failed: %s", exc)
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "kind": "ready", "ready": False, "reason": "db"},
            headers={"Cache-Control": "no-store"},
        )
    return ORJSONResponse(
        content={
            "status": "ok",
            "kind": "ready",
            "ready": True,
            "db_ping_ms": round((time.perf_counter() - started) * 1000, 1),
        },
        headers={"Cache-Control": "no-store"},
    )


@app.get("/healthz", tags=["health"])
def healthz():
    return health_ready()


@app.on_event("startup")
def bootstrap_db() -> None:
    # Alembic owns the schema in deployed environments
    if os.getenv("SKIP_DB_BOOTSTRAP", "0") == "1":
        logger.info("startup.bootstrap skipped")
        return
    Base.metadata.create_all(bind=engine)
    logger.info("startup.bootstrap tables ensured dialect=%s", engine.dialect.name)


api_prefix = settings.API_V1_STR

app.include_router(api_pricing.router, prefix=api_prefix)
app.include_router(api_booking.router, prefix=api_prefix)
app.include_router(api_payment.router, prefix=api_prefix)
app.include_router(api_gallery.router, prefix=api_prefix)
app.include_router(api_catalogue.router, prefix=api_prefix)
app.include_router(api_review.router, prefix=api_prefix)
app.include_router(api_contact.router, prefix=api_prefix)
app.include_router(api_site.router, prefix=api_prefix)
app.include_router(api_admin.router, prefix=api_prefix)
