"""API for billing reports."""

import logging

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.auth.dependencies import ClinicianSession
from src.core.database.session import get_db
from src.core.exceptions import ReportGenerationError, ValidationError
from src.modules.billing.export import (
    CSV_MEDIA_TYPE,
    XLSX_MEDIA_TYPE,
    build_outstanding_balance_csv,
    build_outstanding_balance_xlsx,
    export_filename,
)
from src.modules.billing.schemas import OutstandingBalanceResponse
from src.modules.billing.service import OutstandingBalanceService
from src.modules.billing.validation import parse_date_window, parse_page_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/billing", tags=["Billing"])

EXPORT_FORMATS = ("csv", "excel")


@router.get(
    "/outstanding-balance",
    response_model=OutstandingBalanceResponse,
)
async def get_outstanding_balance(
    start_date: str | None = Query(None, alias="startDate", description="YYYY-MM-DD (inclusive)."),
    end_date: str | None = Query(None, alias="endDate", description="YYYY-MM-DD (inclusive)."),
    page: str | None = Query(None, description="Page number, 1 or greater (default 1)."),
    rows_per_page: str | None = Query(
        None, alias="rowsPerPage", description="Rows per page, 1-100 (default 20)."
    ),
    db: AsyncSession = Depends(get_db),
):
    """
    Outstanding balance per responsible client for completed appointments in the window.

    Rows are ordered by client last name, then first name.
    """
    logger.info("GET /api/billing/outstanding-balance called")
    window = parse_date_window(start_date, end_date)
    page_request = parse_page_request(page, rows_per_page)
    logger.info(
        "Processing outstanding balance report. startDate=%s endDate=%s page=%s rowsPerPage=%s",
        window.start_date,
        window.end_date,
        page_request.page,
        page_request.rows_per_page,
    )

    service = OutstandingBalanceService(db)
    try:
        data = await service.outstanding_balance_report(window, page_request)
    except SQLAlchemyError as e:
        logger.error("Failed to process GET /api/billing/outstanding-balance: %s", e)
        raise ReportGenerationError("Failed to fetch outstanding balances", details=str(e))
    return OutstandingBalanceResponse(**data)


@router.get("/outstanding-balance/export")
async def export_outstanding_balance(
    clinician: ClinicianSession,
    start_date: str | None = Query(None, alias="startDate", description="YYYY-MM-DD (inclusive)."),
    end_date: str | None = Query(None, alias="endDate", description="YYYY-MM-DD (inclusive)."),
    format: str = Query("csv", description="Format: csv or excel"),
    db: AsyncSession = Depends(get_db),
):
    """Download the full outstanding balance report (all clients plus totals) as CSV or Excel."""
    window = parse_date_window(start_date, end_date)
    export_format = format.lower()
    if export_format not in EXPORT_FORMATS:
        raise ValidationError("Format must be either 'csv' or 'excel'", field="format")

    logger.info(
        "Clinician %s exporting outstanding balance report as %s (%s to %s)",
        clinician.id,
        export_format,
        window.start_date,
        window.end_date,
    )

    service = OutstandingBalanceService(db)
    try:
        rows = await service.outstanding_balance_rows(window)
    except SQLAlchemyError as e:
        logger.error("Error exporting outstanding balances: %s", e)
        raise ReportGenerationError("Failed to export outstanding balances", details=str(e))
    totals = service.summarize(rows)

    if export_format == "csv":
        content = build_outstanding_balance_csv(rows, totals)
        filename = export_filename(window, "csv")
        media_type = CSV_MEDIA_TYPE
    else:
        content = build_outstanding_balance_xlsx(rows, totals, window)
        filename = export_filename(window, "xlsx")
        media_type = XLSX_MEDIA_TYPE

    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
