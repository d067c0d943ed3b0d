from typing import Any, Dict, Optional

from fastapi import HTTPException, status

from nurse_connect.core.config import settings


class AppException(HTTPException):
    """HTTP error rendered as ``{"error": detail, **extra}``."""

    def __init__(self, status_code: int, detail: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status_code, detail=detail)
        self.extra = extra or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.detail, **self.extra}

class BadRequestError(AppException):
    def __init__(self, detail: str = "Bad request", **extra):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail, extra=extra)

class AuthenticationError(AppException):
    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)

class NotFoundError(AppException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class ServerError(AppException):
    def __init__(self, detail: str = "Server error", details: Optional[str] = None):
        extra = {"details": details} if details else None
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail, extra=extra)

    @classmethod
    def from_exception(cls, exc: Exception, detail: str = "Server error") -> "ServerError":
        """Diagnostic text is attached only where the settings allow it"""
        return cls(detail=detail, details=str(exc) if settings.show_error_details else None)
