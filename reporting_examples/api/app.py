"""
FastAPI application for the Reporting Examples API.

This module sets up the FastAPI application with CORS, lifecycle management,
error handling, and includes the users, calculator and data routers.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from reporting_examples.config import settings
from reporting_examples.core.errors import ReportingError
from reporting_examples.api.routes import (
    calculator_router,
    data_router,
    get_service_container,
    users_router,
)
from reporting_examples.api.models import ErrorResponse, HealthStatus

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ============================================================================
# Lifespan Context Manager
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Lifespan context manager for startup and shutdown events.

    Startup:
    - Build a fresh user store and calculator
    - Log system status

    Shutdown:
    - Drop in-memory state
    - Log shutdown message
    """
    # Startup
    logger.info("=" * 70)
    logger.info(f"  {settings.app_name} Starting")
    logger.info("=" * 70)

    services = get_service_container()
    services.initialize()

    logger.info("✓ Services initialized successfully")
    logger.info(f"  - User store latency: {services.user_service.latency_ms}ms")
    logger.info(f"  - Flaky failure rate: {services.user_service.failure_rate:.0%}")
    logger.info("Documentation: /docs")
    logger.info("Health Check:  /health")
    logger.info("=" * 70)

    yield

    # Shutdown
    logger.info("=" * 70)
    logger.info(f"  {settings.app_name} Shutting Down")
    logger.info("=" * 70)

    services.cleanup()
    logger.info("✓ Resources cleaned up successfully")


# ============================================================================
# FastAPI Application
# ============================================================================

app = FastAPI(
    title=settings.app_name,
    description="""
# JUnit Reporting Examples API

In-memory demo API used to exercise test-reporting tooling.

## Features

- **Users**: CRUD and search over an in-memory user store
- **Calculator**: arithmetic with validated inputs
- **Data**: statistics, filtering, transforming, sorting, grouping and schema validation

All state lives in memory and is reset when the process restarts.
    """,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)


# ============================================================================
# CORS Middleware
# ============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Error Handlers
# ============================================================================

def _error_response(status_code: int, error: str, code: str, detail: str = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, detail=detail, code=code).model_dump(exclude_none=True)
    )


@app.exception_handler(ReportingError)
async def reporting_error_handler(request: Request, exc: ReportingError):
    """Map domain errors to their status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")

    return _error_response(exc.status_code, exc.message, exc.code)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions."""
    logger.warning(f"HTTP {exc.status_code}: {exc.detail}")

    error = str(exc.detail)
    if exc.status_code == status.HTTP_404_NOT_FOUND and error == "Not Found":
        error = "Endpoint not found"

    return _error_response(exc.status_code, error, f"HTTP_{exc.status_code}")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and path parameters."""
    logger.warning(f"Validation error: {exc.errors()}")

    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation Error",
        "VALIDATION_ERROR",
        detail=str(exc.errors())
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "INTERNAL_ERROR",
        detail=str(exc)
    )


# ============================================================================
# Include Routers
# ============================================================================

app.include_router(users_router)
app.include_router(calculator_router)
app.include_router(data_router)


# ============================================================================
# Root and Health Endpoints
# ============================================================================

@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": "JUnit Reporting Examples API",
        "version": settings.app_version,
        "endpoints": {
            "health": "/health",
            "users": "/api/users",
            "calculator": "/api/calculator",
            "data": "/api/data"
        }
    }


@app.get("/health", response_model=HealthStatus, tags=["System"])
async def health_check() -> HealthStatus:
    """Report liveness, current time and process uptime."""
    return HealthStatus(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        uptime=get_service_container().uptime()
    )


# ============================================================================
# Development Server
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "reporting_examples.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level="info"
    )
