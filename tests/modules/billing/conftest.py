from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.modules.appointments.models import Appointment, AppointmentStatus
from src.modules.clients.models import Client, ClientGroup, ClientGroupMembership, ClientGroupType


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def money(value) -> Decimal | None:
    return None if value is None else Decimal(str(value))


class BillingFactory:
    """Creates clients, groups, memberships and appointments in the test session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def client(
        self,
        first: str,
        last: str,
        created_at: datetime | None = None,
        is_active: bool = True,
    ) -> Client:
        client = Client(
            legal_first_name=first,
            legal_last_name=last,
            is_active=is_active,
            created_at=created_at or utc(2023, 6, 1),
        )
        self.db.add(client)
        await self.db.flush()
        return client

    async def group(self, name: str, type: ClientGroupType = ClientGroupType.INDIVIDUAL) -> ClientGroup:
        group = ClientGroup(name=name, type=type.value, is_active=True)
        self.db.add(group)
        await self.db.flush()
        return group

    async def member(
        self,
        group: ClientGroup,
        client: Client,
        responsible: bool | None = True,
        role: str | None = "Self",
    ) -> ClientGroupMembership:
        membership = ClientGroupMembership(
            client_group_id=group.id,
            client_id=client.id,
            is_responsible_for_billing=responsible,
            role=role,
        )
        self.db.add(membership)
        await self.db.flush()
        return membership

    async def appointment(
        self,
        group: ClientGroup,
        start: datetime,
        fee=None,
        write_off=None,
        adjustable=None,
        status: AppointmentStatus = AppointmentStatus.COMPLETED,
    ) -> Appointment:
        appointment = Appointment(
            client_group_id=group.id,
            type="Therapy",
            start_date=start,
            end_date=start + timedelta(hours=1),
            status=status.value,
            appointment_fee=money(fee),
            write_off=money(write_off),
            adjustable_amount=money(adjustable),
            created_by="test-user-id",
        )
        self.db.add(appointment)
        await self.db.flush()
        return appointment

    async def individual(self, first: str, last: str, **client_kwargs) -> tuple[Client, ClientGroup]:
        """A client alone in their own group, responsible for billing."""
        client = await self.client(first, last, **client_kwargs)
        group = await self.group(f"{first} {last}")
        await self.member(group, client, responsible=True)
        return client, group


@pytest.fixture
def factory(db_session: AsyncSession) -> BillingFactory:
    return BillingFactory(db_session)
