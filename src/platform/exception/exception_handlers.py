from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError, ErrorCode
from src.platform.logging.loguru_io import Logger
from src.platform.response.api_response import ApiResponse

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

_HTTP_STATUS_TO_ERROR_CODE = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.INVALID_INPUT,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: ErrorCode.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.METHOD_NOT_ALLOWED,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
}


def _envelope(status_code: int, error_code: ErrorCode, message: str | None = None) -> JSONResponse:
    body = ApiResponse.from_error_code(error_code, message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc))
    body = ApiResponse.fail(code=error.code, message=error.message)
    return JSONResponse(status_code=error.status_code, content=body.model_dump())


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return _envelope(status.HTTP_400_BAD_REQUEST, ErrorCode.INVALID_INPUT, str(exc))


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    messages = []
    for err in error.errors():
        # loc is ('body', 'email') / ('path', 'reservation_id') / ('body',)
        field = '.'.join(str(part) for part in err.get('loc', ())[1:])
        messages.append(f'{field}: {err.get("msg")}' if field else str(err.get('msg')))
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        ErrorCode.INVALID_INPUT,
        ', '.join(messages) or ErrorCode.INVALID_INPUT.default_message,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, StarletteHTTPException) else StarletteHTTPException(500)
    error_code = _HTTP_STATUS_TO_ERROR_CODE.get(error.status_code, ErrorCode.INTERNAL_SERVER_ERROR)
    message = error.detail if isinstance(error.detail, str) else None
    return _envelope(error.status_code, error_code, message)


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'Unhandled {type(exc).__name__} on {request.method} {request.url.path}'
    )
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorCode.INTERNAL_SERVER_ERROR)


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
