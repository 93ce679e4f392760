"""Client, ClientGroup and ClientGroupMembership models."""

from datetime import date, datetime
from enum import StrEnum

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.core.database.base import Base, BaseModel


class ClientGroupType(StrEnum):
    """Client group types."""

    INDIVIDUAL = "individual"
    COUPLE = "couple"
    FAMILY = "family"
    MINOR = "minor"
    ORGANIZATION = "organization"


class Client(BaseModel):
    """A person receiving care. Billing is attributed to clients."""

    __tablename__ = "clients"

    legal_first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    legal_last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    preferred_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    memberships: Mapped[list["ClientGroupMembership"]] = relationship(
        "ClientGroupMembership", back_populates="client"
    )


class ClientGroup(BaseModel):
    """Billing and scheduling unit: an individual, couple, family or organization."""

    __tablename__ = "client_groups"

    type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ClientGroupType.INDIVIDUAL.value
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    memberships: Mapped[list["ClientGroupMembership"]] = relationship(
        "ClientGroupMembership", back_populates="client_group"
    )
    appointments: Mapped[list["Appointment"]] = relationship(
        "Appointment", back_populates="client_group"
    )


class ClientGroupMembership(Base):
    """Links a client to a group. One member per group is responsible for billing."""

    __tablename__ = "client_group_memberships"

    client_group_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("client_groups.id", ondelete="CASCADE"), primary_key=True
    )
    client_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("clients.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    role: Mapped[str | None] = mapped_column(String(50), nullable=True)  # Self, Parent, Child...
    is_responsible_for_billing: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    client: Mapped["Client"] = relationship("Client", back_populates="memberships")
    client_group: Mapped["ClientGroup"] = relationship("ClientGroup", back_populates="memberships")


# Import at the end to avoid circular imports
from src.modules.appointments.models import Appointment
