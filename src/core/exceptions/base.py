class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        details: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Invalid request input."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message=message, status_code=400)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message=message, status_code=401)


class ReportGenerationError(AppException):
    """A report query failed; details carry the underlying error text."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message=message, status_code=500, details=details)
