"""
Production FastAPI Application

Run with: uvicorn src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engines
from src.platform.logging.loguru_io import Logger
import src.service.booking.driven_adapter.model  # noqa: F401  register tables on Base.metadata


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Class Booking] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Class Booking] Dependency injection wired')

    # Tables for local runs; deployed databases are migrated with alembic
    await create_db_and_tables()
    Logger.base.info('🗄️  [Class Booking] Database schema ready')

    Logger.base.info('✅ [Class Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Class Booking] Shutting down...')

    await dispose_engines()
    Logger.base.info('🗄️  [Class Booking] Database engine disposed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Class Booking] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='Class Booking System - user accounts, class catalog, seat reservations and payments',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
