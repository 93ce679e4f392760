"""Export the outstanding-balance report to CSV or Excel (XLSX)."""

import csv
from decimal import Decimal
from io import BytesIO, StringIO
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill

from src.modules.billing.validation import DateWindow
from src.shared.utils.money import format_currency

CSV_MEDIA_TYPE = "text/csv"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CURRENCY_FORMAT = '"$"#,##0.00'

HEADERS = ["Client", "Service Amount", "Paid Amount", "Outstanding Balance"]
MONEY_KEYS = ("total_service_amount", "total_paid_amount", "total_outstanding_balance")


def _client_name(row: dict) -> str:
    return f"{row['client_legal_last_name']}, {row['client_legal_first_name']}"


def export_filename(window: DateWindow, extension: str) -> str:
    return f"outstanding-balance-{window.start_date}-to-{window.end_date}.{extension}"


def build_outstanding_balance_csv(rows: list[dict], totals: dict) -> str:
    """Header, totals row, blank line, then one row per client."""
    out = StringIO()
    writer = csv.writer(out)
    writer.writerow(HEADERS)
    writer.writerow(["Totals", *(format_currency(totals[k]) for k in MONEY_KEYS)])
    writer.writerow([])
    for r in rows:
        writer.writerow([_client_name(r), *(format_currency(r[k]) for k in MONEY_KEYS)])
    return out.getvalue()


def _cell_value(v: Any) -> Any:
    """Convert value for Excel (Decimal -> float)."""
    if isinstance(v, Decimal):
        return float(v)
    return v


def build_outstanding_balance_xlsx(rows: list[dict], totals: dict, window: DateWindow) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Outstanding Balance"
    ws.cell(1, 1, "Outstanding Balance Report")
    ws.cell(1, 1).font = Font(bold=True, size=12)
    ws.cell(2, 1, f"Period: {window.start_date} to {window.end_date}")

    for j, h in enumerate(HEADERS, start=1):
        ws.cell(4, j, h).font = Font(bold=True)

    totals_fill = PatternFill(start_color="F0F0F0", end_color="F0F0F0", fill_type="solid")
    ws.cell(5, 1, "Totals")
    for j, k in enumerate(MONEY_KEYS, start=2):
        ws.cell(5, j, _cell_value(totals[k]))
    for c in range(1, len(HEADERS) + 1):
        ws.cell(5, c).font = Font(bold=True)
        ws.cell(5, c).fill = totals_fill

    row = 7
    for r in rows:
        ws.cell(row, 1, _client_name(r))
        for j, k in enumerate(MONEY_KEYS, start=2):
            ws.cell(row, j, _cell_value(r[k]))
        row += 1

    for line in ws.iter_rows(min_row=5, min_col=2, max_col=len(HEADERS)):
        for cell in line:
            if isinstance(cell.value, (int, float)):
                cell.number_format = CURRENCY_FORMAT

    ws.column_dimensions["A"].width = 30
    for col in ("B", "C", "D"):
        ws.column_dimensions[col].width = 20

    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()
