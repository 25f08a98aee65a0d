"""
Test-specific FastAPI Application

Uses shared app factory for common setup. Every test gets a freshly created
schema on the temporary SQLite database configured in conftest.py.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engines,
    drop_db_and_tables,
)
from src.platform.logging.loguru_io import Logger
import src.service.booking.driven_adapter.model  # noqa: F401  register tables on Base.metadata


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """
    Minimal lifespan for testing.

    Only initializes essential resources:
    - Dependency injection
    - Database schema (dropped and recreated)
    """
    Logger.base.info('🧪 [Test App] Starting up...')

    await drop_db_and_tables()
    await create_db_and_tables()
    Logger.base.info('🗄️  [Test App] Database tables created')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Test App] Dependency injection wired')

    yield

    container.unwire()
    await dispose_engines()
    Logger.base.info('🧪 [Test App] Shutdown complete')


app = create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')
