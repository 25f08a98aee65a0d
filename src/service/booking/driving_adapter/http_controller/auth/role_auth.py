from fastapi import Depends, Request
from opentelemetry import trace

from src.platform.exception.exceptions import (
    CustomBaseError,
    ForbiddenError,
    UnauthorizedError,
)
from src.service.booking.domain.value_object.identity import Identity, is_admin


tracer = trace.get_tracer(__name__)


async def get_current_user(request: Request) -> Identity:
    """Identity set by AuthGatewayMiddleware; fails closed for protected routes."""
    identity = getattr(request.state, 'identity', None)
    if identity is not None:
        return identity

    auth_error = getattr(request.state, 'auth_error', None)
    if isinstance(auth_error, CustomBaseError):
        raise type(auth_error)(auth_error.message)
    raise UnauthorizedError()


async def require_admin(current_user: Identity = Depends(get_current_user)) -> Identity:
    with tracer.start_as_current_span(
        'auth.require_admin',
        attributes={
            'user.id': current_user.id,
            'user.role': current_user.role.value,
        },
    ):
        if not is_admin(current_user):
            raise ForbiddenError('Only administrators can perform this action')
        return current_user
