from enum import Enum


class ErrorCode(Enum):
    """(http status, error code, default message) returned in the error envelope"""

    # Common
    INVALID_INPUT = (400, 'COMMON001', 'Invalid input')
    UNAUTHORIZED = (401, 'COMMON002', 'Authentication required')
    FORBIDDEN = (403, 'COMMON003', 'Access denied')
    NOT_FOUND = (404, 'COMMON004', 'Resource not found')
    METHOD_NOT_ALLOWED = (405, 'COMMON005', 'Method not allowed')
    CONFLICT = (409, 'COMMON006', 'Resource conflict')
    INTERNAL_SERVER_ERROR = (500, 'COMMON999', 'Internal server error')

    # Auth
    DUPLICATE_EMAIL = (409, 'AUTH001', 'Email already registered')
    INVALID_CREDENTIALS = (401, 'AUTH002', 'Invalid email or password')
    INVALID_TOKEN = (401, 'AUTH003', 'Invalid token')
    EXPIRED_TOKEN = (401, 'AUTH004', 'Token has expired')
    USER_NOT_FOUND = (404, 'AUTH005', 'User not found')
    INVALID_REFRESH_TOKEN = (401, 'AUTH006', 'Invalid refresh token')

    # Reservation
    ALREADY_RESERVED = (400, 'RESV001', 'Time slot already reserved by this user')
    CAPACITY_EXCEEDED = (400, 'RESV002', 'Time slot is fully booked')
    ALREADY_CANCELLED = (400, 'RESV003', 'Reservation is already cancelled')
    NOT_CONFIRMED = (400, 'RESV004', 'Only confirmed reservations can be cancelled')

    def __init__(self, status: int, code: str, message: str) -> None:
        self.status = status
        self.code = code
        self.default_message = message


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    error_code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR
    log_level: str = 'ERROR'

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        self.message = message or self.error_code.default_message
        self.status_code = status_code or self.error_code.status
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.error_code.code


class DomainError(CustomBaseError):
    error_code = ErrorCode.INVALID_INPUT


class UnauthorizedError(CustomBaseError):
    error_code = ErrorCode.UNAUTHORIZED


class ForbiddenError(CustomBaseError):
    error_code = ErrorCode.FORBIDDEN


class NotFoundError(CustomBaseError):
    error_code = ErrorCode.NOT_FOUND


class ConflictError(CustomBaseError):
    error_code = ErrorCode.CONFLICT


# ---- Auth ----


class DuplicateEmailError(ConflictError):
    error_code = ErrorCode.DUPLICATE_EMAIL


class InvalidPasswordError(UnauthorizedError):
    error_code = ErrorCode.INVALID_CREDENTIALS


class InvalidTokenError(UnauthorizedError):
    error_code = ErrorCode.INVALID_TOKEN


class ExpiredTokenError(UnauthorizedError):
    error_code = ErrorCode.EXPIRED_TOKEN


class InvalidRefreshTokenError(UnauthorizedError):
    error_code = ErrorCode.INVALID_REFRESH_TOKEN


class UserNotFoundError(NotFoundError):
    error_code = ErrorCode.USER_NOT_FOUND


# ---- Reservation ----


class AlreadyReservedError(DomainError):
    error_code = ErrorCode.ALREADY_RESERVED


class CapacityExceededError(DomainError):
    error_code = ErrorCode.CAPACITY_EXCEEDED


class AlreadyCancelledError(DomainError):
    error_code = ErrorCode.ALREADY_CANCELLED


class NotConfirmedError(DomainError):
    error_code = ErrorCode.NOT_CONFIRMED


class SeatConflictError(ConflictError):
    """A concurrent write took the same seat, student slot or order id; the caller retries."""

    log_level = 'DEBUG'
