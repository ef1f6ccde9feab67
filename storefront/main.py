"""Storefront API: FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.core.config import settings
from storefront.core.exceptions import register_exception_handlers
from storefront.db import base as db
from storefront.middleware.request_log import RequestLoggingMiddleware
from storefront.schemas.common import HealthResponse

# v1 routers
from storefront.routers.v1.orders import router as orders_v1_router
from storefront.routers.v1.products import router as products_v1_router
from storefront.routers.v1.users import router as users_v1_router

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    if settings.log_level:
        level = getattr(logging, settings.log_level.upper(), logging.INFO)
    else:
        level = logging.DEBUG if settings.is_development else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_schema:
        logger.info("Creating database schema (auto_create_schema=on)")
        await db.init_models()
    yield
    await db.engine.dispose()


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLoggingMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(users_v1_router, prefix="/api/v1")
    app.include_router(products_v1_router, prefix="/api/v1")
    app.include_router(orders_v1_router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        db_ok = await db.check_database()
        return HealthResponse(
            status="ok" if db_ok else "degraded",
            app=settings.app_name,
            env=settings.app_env,
            database="ok" if db_ok else "unavailable",
        )

    return app


app = create_app()
