"""Appointment model."""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from sqlalchemy import DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.core.database.base import BaseModel


class AppointmentStatus(StrEnum):
    """Appointment status enumeration."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"
    LATE_CANCELED = "late_canceled"


class Appointment(BaseModel):
    """A session booked for a client group. Fees are set when the session is billed."""

    __tablename__ = "appointments"

    client_group_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("client_groups.id"), nullable=True, index=True
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=AppointmentStatus.SCHEDULED.value, index=True
    )

    # Money (all nullable: unbilled sessions carry no amounts)
    appointment_fee: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    write_off: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    adjustable_amount: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)

    created_by: Mapped[str | None] = mapped_column(String(36), nullable=True)

    # Relationships
    client_group: Mapped["ClientGroup | None"] = relationship(
        "ClientGroup", back_populates="appointments"
    )


# Import at the end to avoid circular imports
from src.modules.clients.models import ClientGroup
