from __future__ import annotations

import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.owners.models import Owner


async def list_owners(
    *,
    session: AsyncSession,
    last_name: str | None,
    limit: int,
) -> list[Owner]:
    stmt = select(Owner)
    normalized = (last_name or "").strip().lower()
    if normalized:
        stmt = stmt.where(func.lower(Owner.last_name).startswith(normalized, autoescape=True))
    stmt = stmt.order_by(Owner.last_name.asc(), Owner.first_name.asc(), Owner.id.asc())
    stmt = stmt.limit(limit)
    return list((await session.execute(stmt)).scalars().all())


async def get_owner(*, session: AsyncSession, owner_id: uuid.UUID) -> Owner | None:
    return await session.get(Owner, owner_id)


async def create_owner(
    *,
    session: AsyncSession,
    first_name: str,
    last_name: str,
    address: str,
    city: str,
    telephone: str,
) -> Owner:
    owner = Owner(
        first_name=first_name,
        last_name=last_name,
        address=address,
        city=city,
        telephone=telephone,
    )
    session.add(owner)
    await session.commit()
    await session.refresh(owner)
    return owner


async def update_owner(*, session: AsyncSession, owner: Owner, changes: dict) -> Owner:
    """Apply the provided (non-None) fields; omitted fields keep their value."""
    for field, value in changes.items():
        if value is not None:
            setattr(owner, field, value)

    await session.commit()
    await session.refresh(owner)
    return owner
