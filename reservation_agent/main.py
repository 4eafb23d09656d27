"""
Reservation Agent — FastAPI application entry point.
Lifespan: create DB tables → verify connectivity.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from reservation_agent.config import settings
from reservation_agent.database import check_db_connectivity, engine
from reservation_agent.errors import ReservationAgentError
from reservation_agent.http import jerror
from reservation_agent.models import Base
from reservation_agent.routers import (
    agent,
    customers,
    health,
    reservations,
    restaurants,
    special_requests,
    tables,
)

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.
    1. Create all tables (idempotent — IF NOT EXISTS).
    2. Verify DB connectivity.
    """
    logger.info("Starting Reservation Agent (env=%s)", settings.app_env)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created/verified.")

    if not await check_db_connectivity():
        logger.error("Database connectivity check FAILED at startup.")
    else:
        logger.info("Database connectivity verified.")

    yield

    logger.info("Shutting down Reservation Agent.")
    await engine.dispose()


app = FastAPI(
    title="Reservation Agent",
    description="Table availability, booking, and a natural-language booking assistant.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ─────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# ── Routers ──────────────────────────────────────────────────────────────────

app.include_router(health.router)
app.include_router(customers.router)
app.include_router(restaurants.router)
app.include_router(tables.router)
app.include_router(reservations.router)
app.include_router(special_requests.router)
app.include_router(agent.router)


# ── Exception handlers ───────────────────────────────────────────────────────

def _describe_validation_error(exc: RequestValidationError) -> str:
    """Name the first offending field, e.g. 'Missing required field: party_size'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Malformed JSON body"
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc) or "body"
    if first.get("type") == "missing":
        return f"Missing required field: {field}"
    return f"Invalid field {field}: {first.get('msg', 'invalid value')}"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return jerror(400, "Validation error", message)


@app.exception_handler(ReservationAgentError)
async def reservation_agent_exception_handler(
    request: Request, exc: ReservationAgentError
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Upstream failure on %s %s: %s", request.method, request.url.path, exc)
    return jerror(exc.status_code, exc.error, exc.message)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return the generic internal-error envelope for any unhandled exception."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url)
    return jerror(500, "Internal server error", str(exc))
