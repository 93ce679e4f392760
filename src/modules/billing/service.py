"""Service for billing reports: outstanding balance per responsible client."""

import logging
import time
from decimal import Decimal

from sqlalchemy import Select, and_, distinct, false, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.modules.appointments.models import Appointment, AppointmentStatus
from src.modules.billing.validation import DateWindow, PageRequest
from src.modules.clients.models import Client, ClientGroupMembership
from src.shared.schemas import Pagination
from src.shared.utils.money import round_money, to_float

logger = logging.getLogger(__name__)


class OutstandingBalanceService:
    """
    Build the outstanding-balance report.

    Each client group's completed appointments are attributed to exactly one
    responsible client: the active member flagged responsible for billing,
    else the oldest client record. Per client we report:

    - total service amount: sum of fees
    - total paid amount: sum of (fee - write-off - adjustable amount)
    - total outstanding balance: sum of adjustable amounts

    NULL money columns count as zero in every sum.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _responsible_clients():
        """Rank members per group; rn = 1 is the group's responsible client."""
        rank = (
            func.row_number()
            .over(
                partition_by=ClientGroupMembership.client_group_id,
                order_by=(
                    # NULL flag sorts as false on every backend
                    func.coalesce(ClientGroupMembership.is_responsible_for_billing, false()).desc(),
                    Client.created_at.asc(),
                    Client.id.asc(),
                ),
            )
            .label("rn")
        )
        return (
            select(
                ClientGroupMembership.client_group_id.label("client_group_id"),
                Client.id.label("client_id"),
                Client.legal_first_name.label("legal_first_name"),
                Client.legal_last_name.label("legal_last_name"),
                rank,
            )
            .join(Client, ClientGroupMembership.client_id == Client.id)
            .where(Client.is_active.is_(True))
            .cte("responsible_client")
        )

    @staticmethod
    def _appointment_filters(window: DateWindow) -> list:
        return [
            Appointment.status == AppointmentStatus.COMPLETED.value,
            Appointment.start_date >= window.starts_at,
            Appointment.start_date <= window.ends_at,
        ]

    def _balances_query(self, window: DateWindow) -> Select:
        rc = self._responsible_clients()
        fee = func.coalesce(Appointment.appointment_fee, 0)
        write_off = func.coalesce(Appointment.write_off, 0)
        adjustable = func.coalesce(Appointment.adjustable_amount, 0)
        return (
            select(
                rc.c.client_id,
                rc.c.legal_first_name,
                rc.c.legal_last_name,
                func.sum(fee).label("total_service_amount"),
                func.sum(fee - write_off - adjustable).label("total_paid_amount"),
                func.sum(adjustable).label("total_outstanding_balance"),
            )
            .select_from(Appointment)
            .join(rc, and_(Appointment.client_group_id == rc.c.client_group_id, rc.c.rn == 1))
            .where(*self._appointment_filters(window))
            .group_by(rc.c.client_id, rc.c.legal_first_name, rc.c.legal_last_name)
            .order_by(rc.c.legal_last_name, rc.c.legal_first_name, rc.c.client_id)
        )

    def _count_query(self, window: DateWindow) -> Select:
        rc = self._responsible_clients()
        return (
            select(func.count(distinct(rc.c.client_id)))
            .select_from(Appointment)
            .join(rc, and_(Appointment.client_group_id == rc.c.client_group_id, rc.c.rn == 1))
            .where(*self._appointment_filters(window))
        )

    async def _execute(self, label: str, stmt: Select, window: DateWindow):
        started = time.perf_counter()
        result = await self.db.execute(stmt)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug("Outstanding balance %s query executed in %.1fms", label, elapsed_ms)
        if elapsed_ms > settings.report_slow_query_ms:
            logger.warning(
                "Outstanding balance %s query took %.0fms (startDate=%s, endDate=%s)",
                label,
                elapsed_ms,
                window.start_date,
                window.end_date,
            )
        return result

    @staticmethod
    def _row_to_dict(row) -> dict:
        return {
            "client_id": str(row.client_id),
            "client_legal_first_name": row.legal_first_name,
            "client_legal_last_name": row.legal_last_name,
            "total_service_amount": to_float(row.total_service_amount),
            "total_paid_amount": to_float(row.total_paid_amount),
            "total_outstanding_balance": to_float(row.total_outstanding_balance),
        }

    async def count_responsible_clients(self, window: DateWindow) -> int:
        """Number of responsible clients with at least one qualifying appointment."""
        result = await self._execute("count", self._count_query(window), window)
        return int(result.scalar_one() or 0)

    async def outstanding_balance_report(self, window: DateWindow, page: PageRequest) -> dict:
        """One page of the report plus pagination metadata."""
        stmt = self._balances_query(window).offset(page.offset).limit(page.rows_per_page)
        result = await self._execute("page", stmt, window)
        rows = [self._row_to_dict(r) for r in result.all()]

        total = await self.count_responsible_clients(window)
        return {
            "data": rows,
            "pagination": Pagination.create(page.page, page.rows_per_page, total),
        }

    async def outstanding_balance_rows(self, window: DateWindow) -> list[dict]:
        """All report rows for the window, unpaginated, in report order."""
        result = await self._execute("export", self._balances_query(window), window)
        return [self._row_to_dict(r) for r in result.all()]

    @staticmethod
    def summarize(rows: list[dict]) -> dict:
        """Totals row for exports, each column rounded to cents."""
        keys = ("total_service_amount", "total_paid_amount", "total_outstanding_balance")
        totals = {k: Decimal("0") for k in keys}
        for r in rows:
            for k in keys:
                totals[k] += Decimal(str(r[k]))
        return {k: round_money(v) for k, v in totals.items()}
