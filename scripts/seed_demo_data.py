#!/usr/bin/env python3
"""
Seed the database with demo clients, client groups and completed appointments
so the outstanding-balance report has something to show.

Usage:
    python scripts/seed_demo_data.py --dry-run   # no writes
    python scripts/seed_demo_data.py --confirm   # commit to the database

Requires: migrations applied (alembic upgrade head), database reachable.
"""

import asyncio
import sys
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.database.session import async_session
from src.modules.appointments.models import Appointment, AppointmentStatus
from src.modules.clients.models import (
    Client,
    ClientGroup,
    ClientGroupMembership,
    ClientGroupType,
)

# (group type, group name, [(first, last, role, responsible, years on file)])
DEMO_GROUPS = [
    (ClientGroupType.INDIVIDUAL, "Avery Brooks", [("Avery", "Brooks", "Self", True, 3)]),
    (ClientGroupType.INDIVIDUAL, "Jordan Ellis", [("Jordan", "Ellis", "Self", True, 1)]),
    (
        ClientGroupType.COUPLE,
        "Harper & Quinn Lane",
        [("Harper", "Lane", "Partner", True, 2), ("Quinn", "Lane", "Partner", False, 2)],
    ),
    (
        ClientGroupType.FAMILY,
        "Morgan Family",
        [
            ("Dana", "Morgan", "Parent", None, 4),
            ("Riley", "Morgan", "Parent", None, 5),
            ("Sam", "Morgan", "Child", False, 1),
        ],
    ),
    (
        ClientGroupType.MINOR,
        "Taylor Reed",
        [("Casey", "Reed", "Guardian", True, 2), ("Taylor", "Reed", "Minor", False, 2)],
    ),
]

# (days ago, fee, write-off, adjustable amount, status)
DEMO_SESSIONS = [
    (40, Decimal("150.00"), None, Decimal("150.00"), AppointmentStatus.COMPLETED),
    (33, Decimal("150.00"), Decimal("25.00"), Decimal("0.00"), AppointmentStatus.COMPLETED),
    (26, Decimal("150.00"), None, None, AppointmentStatus.COMPLETED),
    (19, Decimal("175.00"), Decimal("0.00"), Decimal("50.00"), AppointmentStatus.COMPLETED),
    (12, Decimal("175.00"), None, None, AppointmentStatus.NO_SHOW),
    (5, Decimal("175.00"), None, Decimal("175.00"), AppointmentStatus.COMPLETED),
    (-2, Decimal("175.00"), None, None, AppointmentStatus.SCHEDULED),
]


async def seed_groups(session: AsyncSession) -> list[ClientGroup]:
    today = date.today()
    groups = []
    for group_type, group_name, members in DEMO_GROUPS:
        group = ClientGroup(type=group_type.value, name=group_name, is_active=True)
        session.add(group)
        await session.flush()
        for first, last, role, responsible, years in members:
            client = Client(
                legal_first_name=first,
                legal_last_name=last,
                is_active=True,
                created_at=datetime(today.year - years, 1, 15, 9, 0, tzinfo=timezone.utc),
            )
            session.add(client)
            await session.flush()
            session.add(ClientGroupMembership(
                client_group_id=group.id,
                client_id=client.id,
                role=role,
                is_responsible_for_billing=responsible,
            ))
        groups.append(group)
    await session.flush()
    print(f"  Created {len(groups)} client groups.")
    return groups


async def seed_appointments(session: AsyncSession, groups: list[ClientGroup]) -> int:
    now = datetime.now(timezone.utc).replace(hour=15, minute=0, second=0, microsecond=0)
    count = 0
    for offset, group in enumerate(groups):
        for days_ago, fee, write_off, adjustable, status in DEMO_SESSIONS:
            start = now - timedelta(days=days_ago + offset)
            session.add(Appointment(
                client_group_id=group.id,
                type="Therapy Session",
                title=f"Session with {group.name}",
                start_date=start,
                end_date=start + timedelta(minutes=50),
                status=status.value,
                appointment_fee=fee,
                write_off=write_off,
                adjustable_amount=adjustable,
            ))
            count += 1
    await session.flush()
    print(f"  Created {count} appointments.")
    return count


async def run_seed(session: AsyncSession, dry_run: bool) -> None:
    groups = await seed_groups(session)
    await seed_appointments(session, groups)

    if dry_run:
        await session.rollback()
        print("\n[DRY-RUN] Rolled back, no data written.")
    else:
        await session.commit()
        print("\nSeed completed successfully.")


async def main() -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Seed database with demo practice billing data")
    parser.add_argument("--dry-run", action="store_true", help="Do not commit")
    parser.add_argument("--confirm", action="store_true", help="Commit changes")
    args = parser.parse_args()
    if not args.dry_run and not args.confirm:
        print("Use --dry-run or --confirm")
        sys.exit(1)

    print("Database:", settings.database_url.split("@")[-1] if "@" in settings.database_url else "?")
    print("Mode:", "DRY-RUN" if args.dry_run else "CONFIRM")
    async with async_session() as session:
        await run_seed(session, dry_run=args.dry_run)
    print("Done.")


if __name__ == "__main__":
    asyncio.run(main())
