"""
Auth gateway: runs once per request before routing.

- no / non-Bearer Authorization header -> request continues unauthenticated
- valid token   -> request.state.identity = Identity(id, email, role); log lines carry `user:<id>`
- invalid token -> request.state.identity = None, request.state.auth_error = the failure

Routes decide what to do with that: protected routes depend on
`get_current_user`, which fails closed (401) whenever identity is missing.
"""

from typing import Callable

from starlette.types import ASGIApp, Receive, Scope, Send

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import ANONYMOUS_CALLER, caller_var
from src.service.booking.app.interface.i_token_provider import ITokenProvider


BEARER_PREFIX = 'bearer '


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


class AuthGatewayMiddleware:
    def __init__(self, app: ASGIApp, *, token_provider: Callable[[], ITokenProvider]) -> None:
        self.app = app
        self.token_provider = token_provider

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope['type'] != 'http':
            await self.app(scope, receive, send)
            return

        state = scope.setdefault('state', {})
        state['identity'] = None
        state['auth_error'] = None

        authorization = None
        for key, value in scope.get('headers', []):
            if key == b'authorization':
                authorization = value.decode('latin-1')
                break

        token = extract_bearer_token(authorization)
        if token:
            try:
                state['identity'] = self.token_provider().validate(token)
            except CustomBaseError as e:
                state['auth_error'] = e
                Logger.base.debug(f'[AUTH] {scope.get("path")}: {type(e).__name__}')

        identity = state['identity']
        caller_token = caller_var.set(f'user:{identity.id}' if identity else ANONYMOUS_CALLER)
        try:
            await self.app(scope, receive, send)
        finally:
            caller_var.reset(caller_token)
