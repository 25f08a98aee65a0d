"""
Test Configuration and Fixtures

This module provides:
- Environment setup (temporary SQLite database, cheap bcrypt rounds)
- HTTP client running the app in-process through httpx.ASGITransport
- Signed-up and logged-in users for integration tests

Architecture:
- Unit tests (`@pytest.mark.unit`): mocks only, no database
- Integration tests: fresh schema per test, see test/test_main.py
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read once at import time (src.platform.config.core_setting)
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_dir = Path(__file__).parent

    # One database file per xdist worker
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_dir = test_dir / 'test_db'
    db_dir.mkdir(exist_ok=True)
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_dir / f"class_booking_{worker_id}.db"}'

    # Create test log directory
    test_log_dir = test_dir / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # bcrypt minimum cost keeps signup/login fast
    os.environ['BCRYPT_ROUNDS'] = '4'
    os.environ.setdefault('SECRET_KEY', 'test_secret_key_for_pytest_only_0123456789abcdef')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator  # noqa: E402
from typing import Any  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from test.constants import (  # noqa: E402
    ANOTHER_STUDENT_EMAIL,
    ANOTHER_STUDENT_NAME,
    TEST_ADMIN_EMAIL,
    TEST_ADMIN_NAME,
    TEST_STUDENT_EMAIL,
    TEST_STUDENT_NAME,
    TEST_TEACHER_EMAIL,
    TEST_TEACHER_NAME,
)
from test.shared.utils import promote_to_admin, sign_up_and_login  # noqa: E402


# =============================================================================
# HTTP client
# =============================================================================
@pytest.fixture
async def client() -> AsyncGenerator[httpx.AsyncClient, None]:
    from test.test_main import app

    # ASGITransport does not run lifespan events; run them around the client
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url='http://test') as test_client:
            yield test_client


# =============================================================================
# Users
# =============================================================================
@pytest.fixture
async def teacher_user(client: httpx.AsyncClient) -> dict[str, Any]:
    return await sign_up_and_login(client, TEST_TEACHER_EMAIL, TEST_TEACHER_NAME)


@pytest.fixture
async def student_user(client: httpx.AsyncClient) -> dict[str, Any]:
    return await sign_up_and_login(client, TEST_STUDENT_EMAIL, TEST_STUDENT_NAME)


@pytest.fixture
async def another_student_user(client: httpx.AsyncClient) -> dict[str, Any]:
    return await sign_up_and_login(client, ANOTHER_STUDENT_EMAIL, ANOTHER_STUDENT_NAME)


@pytest.fixture
async def admin_user(client: httpx.AsyncClient) -> dict[str, Any]:
    created = await sign_up_and_login(client, TEST_ADMIN_EMAIL, TEST_ADMIN_NAME)
    await promote_to_admin(created['id'])
    # Role is a token claim, so log in again after the promotion
    return await sign_up_and_login(client, TEST_ADMIN_EMAIL, TEST_ADMIN_NAME, sign_up=False)
