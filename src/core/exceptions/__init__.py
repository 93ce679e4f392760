from src.core.exceptions.base import (
    AppException,
    ValidationError,
    AuthenticationError,
    ReportGenerationError,
)

__all__ = [
    "AppException",
    "ValidationError",
    "AuthenticationError",
    "ReportGenerationError",
]
