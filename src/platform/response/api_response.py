"""
Response envelope shared by every endpoint:

    {"success": true,  "data": {...}, "error": null}
    {"success": false, "data": null,  "error": {"code": "...", "message": "..."}}
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from src.platform.exception.exceptions import ErrorCode


T = TypeVar('T')


class ErrorBody(BaseModel):
    code: str
    message: str


class ApiResponse(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[ErrorBody] = None

    @classmethod
    def ok(cls, data: Any = None) -> 'ApiResponse[Any]':
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, *, code: str, message: str) -> 'ApiResponse[Any]':
        return cls(success=False, error=ErrorBody(code=code, message=message))

    @classmethod
    def from_error_code(cls, error_code: ErrorCode, message: str | None = None) -> 'ApiResponse[Any]':
        return cls.fail(code=error_code.code, message=message or error_code.default_message)
