"""Schemas for billing reports API."""

from src.shared.schemas import CamelSchema, Pagination


class OutstandingBalanceRow(CamelSchema):
    """Totals for one responsible client over the requested window."""

    client_id: str
    client_legal_first_name: str
    client_legal_last_name: str
    total_service_amount: float
    total_paid_amount: float
    total_outstanding_balance: float


class OutstandingBalanceResponse(CamelSchema):
    """Paginated outstanding-balance report."""

    data: list[OutstandingBalanceRow]
    pagination: Pagination
