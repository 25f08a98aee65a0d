"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.constant.route_constant import (
    AUTH_BASE,
    CLASS_BASE,
    HEALTH,
    METRICS,
    PAYMENT_BASE,
    RESERVATION_BASE,
    TEACHER_BASE,
    USER_BASE,
)
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.booking.driving_adapter.http_controller.auth.auth_gateway import (
    AuthGatewayMiddleware,
)
from src.service.booking.driving_adapter.http_controller.auth_controller import (
    router as auth_router,
)
from src.service.booking.driving_adapter.http_controller.class_controller import (
    router as class_router,
)
from src.service.booking.driving_adapter.http_controller.payment_controller import (
    router as payment_router,
)
from src.service.booking.driving_adapter.http_controller.reservation_controller import (
    router as reservation_router,
)
from src.service.booking.driving_adapter.http_controller.teacher_controller import (
    router as teacher_router,
)
from src.service.booking.driving_adapter.http_controller.user_controller import (
    router as user_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Class Booking System',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Added first so it runs innermost, after CORS preflight handling
    app.add_middleware(
        AuthGatewayMiddleware,  # type: ignore
        token_provider=container.jwt_auth,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(auth_router, prefix=AUTH_BASE, tags=['auth'])
    app.include_router(user_router, prefix=USER_BASE, tags=['user'])
    app.include_router(class_router, prefix=CLASS_BASE, tags=['class'])
    app.include_router(reservation_router, prefix=RESERVATION_BASE, tags=['reservation'])
    app.include_router(teacher_router, prefix=TEACHER_BASE, tags=['teacher'])
    app.include_router(payment_router, prefix=PAYMENT_BASE, tags=['payment'])

    # Register common endpoints
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get(METRICS)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
