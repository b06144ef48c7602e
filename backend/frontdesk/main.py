"""Front Desk - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from frontdesk.core.config import Settings, get_settings
from frontdesk.core.database import create_all, dispose_engine, init_engine
from frontdesk.core.env_validation import validate_environment
from frontdesk.routers import (
    rooms_router,
    stays_router,
    maintenance_router,
    cashier_router,
    staff_router,
    catalog_router,
    reports_router,
    assistant_router,
)
from frontdesk.services.errors import FrontDeskError
from frontdesk.services.front_desk import FrontDesk, WakeCallMonitor

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Validation hard-fails (exit 1) on bad configuration."""
    settings = validate_environment(settings)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        init_engine(settings.database_url, echo=settings.debug)
        await create_all()

        desk = FrontDesk.from_settings(settings)
        monitor = WakeCallMonitor(desk.lifecycle, settings.wake_call_poll_seconds)
        app.state.front_desk = desk
        app.state.wake_monitor = monitor
        monitor.start()
        logger.info(f"[STARTUP] {settings.hotel_name}: {len(desk.registry.list())} rooms on the board")

        yield

        # Shutdown
        await monitor.stop()
        await dispose_engine()

    app = FastAPI(
        title=settings.app_name,
        description="Hotel front desk: room board, stays and billing, maintenance tickets, cashier shifts and reports.",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # CORS - configured from ALLOWED_ORIGINS
    # In production, wildcard (*) is blocked by env_validation.py
    allowed_origins = [origin.strip() for origin in settings.allowed_origins.split(",")]
    logger.info(f"CORS configured with origins: {allowed_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FrontDeskError)
    async def front_desk_error_handler(request: Request, exc: FrontDeskError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    # API v1 routers
    app.include_router(rooms_router, prefix=settings.api_v1_prefix)
    app.include_router(stays_router, prefix=settings.api_v1_prefix)
    app.include_router(maintenance_router, prefix=settings.api_v1_prefix)
    app.include_router(cashier_router, prefix=settings.api_v1_prefix)
    app.include_router(staff_router, prefix=settings.api_v1_prefix)
    app.include_router(catalog_router, prefix=settings.api_v1_prefix)
    app.include_router(reports_router, prefix=settings.api_v1_prefix)
    app.include_router(assistant_router, prefix=settings.api_v1_prefix)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": settings.app_name}

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": settings.app_name,
            "hotel": settings.hotel_name,
            "version": "1.0.0",
            "docs": "/docs" if settings.debug else "Disabled in production",
        }

    return app


app = create_app(get_settings())
