from fastapi import Request
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse

from src.core.exceptions import AppException
from src.shared.schemas import ErrorResponse


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application exceptions."""
    response = ErrorResponse(error=exc.message, details=exc.details)
    return JSONResponse(
        status_code=exc.status_code,
        content=response.model_dump(exclude_none=True),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle generic HTTP exceptions."""
    response = ErrorResponse(error=str(exc.detail) if exc.detail else "HTTP error")
    return JSONResponse(
        status_code=exc.status_code,
        content=response.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )
