from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base Pydantic schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class CamelSchema(BaseSchema):
    """Schema serialized with camelCase keys, as the back-office UI expects."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class ErrorResponse(BaseSchema):
    """Standard error body: a human-readable message and optional diagnostics."""

    error: str
    details: str | None = None


class Pagination(CamelSchema):
    """Page metadata for paginated reports."""

    page: int
    rows_per_page: int
    total: int
    total_pages: int

    @classmethod
    def create(cls, page: int, rows_per_page: int, total: int) -> "Pagination":
        total_pages = (total + rows_per_page - 1) // rows_per_page if rows_per_page > 0 else 0
        return cls(page=page, rows_per_page=rows_per_page, total=total, total_pages=total_pages)
