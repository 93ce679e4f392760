from src.shared.schemas.base import (
    BaseSchema,
    CamelSchema,
    ErrorResponse,
    Pagination,
)

__all__ = [
    "BaseSchema",
    "CamelSchema",
    "ErrorResponse",
    "Pagination",
]
