"""
NutriSnap Backend - FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (`uvicorn nutrisnap.main:app`) or the `nutrisnap`
       console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  Rate Limit  │→│ Req ID   │→│  Logging        │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ meal log     │ │ calorie DB   │ │ GET /health │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │  Static UI mounted at "/" (lowest precedence)       │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError→400 │ RecordStoreError→500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Build (create_app):
    1. Create missing collection files with empty contents
    2. Register middleware, handlers, routes, static mount

    Startup (lifespan):
    1. Initialize logging
    2. Log the local and network URLs
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from nutrisnap import __version__
from nutrisnap.config import Settings, settings as default_settings
from nutrisnap.exceptions import NutriSnapError, RecordStoreError, ValidationError
from nutrisnap.middleware.logging import RequestLoggingMiddleware
from nutrisnap.middleware.rate_limit import RateLimitMiddleware
from nutrisnap.middleware.request_id import RequestIDMiddleware, request_id_var
from nutrisnap.network import get_local_ip
from nutrisnap.routes import calories, health, meals
from nutrisnap.services import build_services

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log the startup banner; nothing to release on shutdown."""
    config: Settings = app.state.settings
    setup_logging(config.log_level)

    logger.info("=" * 60)
    logger.info("NutriSnap running")
    logger.info("Meals file:    %s", config.meals_path.resolve())
    logger.info("Calories file: %s", config.calories_path.resolve())
    logger.info("Local:   http://localhost:%d", config.backend_port)
    logger.info("Network: http://%s:%d", get_local_ip(), config.backend_port)
    logger.info("Use the Network URL on a phone on the same Wi-Fi")
    logger.info("=" * 60)

    yield

    logger.info("NutriSnap shut down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to `{"error": message}` JSON responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        HTTPException           → its own status (unknown path, wrong method)
        RequestValidationError  → 400 Bad Request (body is not valid JSON)
        RecordStoreError        → 500 Internal Server Error
        NutriSnapError (base)   → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Context dicts (paths, OS errors) are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Malformed request: %s", rid, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        rid = request_id_var.get("")
        logger.info("[%s] HTTP %d on %s: %s", rid, exc.status_code, request.url.path, exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RecordStoreError)
    async def handle_record_store_error(request: Request, exc: RecordStoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Record store error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(NutriSnapError)
    async def handle_app_error(request: Request, exc: NutriSnapError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def mount_static_ui(app: FastAPI, config: Settings) -> None:
    """
    Serve the public directory at "/" with index.html as the entry document.

    Mounted after the API routers, so API paths always win.
    """
    public = config.public_path
    if not public.is_dir():
        logger.warning("Public directory %s not found; static UI disabled", public)
        return
    app.mount("/", StaticFiles(directory=str(public), html=True), name="public")


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to build with; defaults to the environment-loaded
                singleton. Tests pass their own with a temporary data_dir.
    """
    config = config or default_settings

    app = FastAPI(
        title="NutriSnap API",
        description="Meal log and calorie lookup backed by two JSON files.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = config
    app.state.meal_service, app.state.calorie_service = build_services(config)

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition: RateLimit runs first, CORS last
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    if config.rate_limit_enabled:
        app.add_middleware(
            RateLimitMiddleware,
            max_requests=config.rate_limit_requests,
            window=config.rate_limit_window,
        )

    register_exception_handlers(app)

    app.include_router(meals.router)
    app.include_router(calories.router)
    app.include_router(health.router)

    mount_static_ui(app, config)

    return app


def run() -> None:
    """Console entry point: serve the module-level app on the configured address."""
    import uvicorn

    uvicorn.run(
        "nutrisnap.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )


# uvicorn expects `nutrisnap.main:app` to be importable
app = create_app()
