from __future__ import annotations

import datetime as dt
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.pets.models import Pet
from petclinic.validation.pipeline import ValidationPipeline
from petclinic.visits.models import Visit
from petclinic.visits.validators import get_visit_validation_pipeline


async def list_visits(*, session: AsyncSession, pet_id: uuid.UUID) -> list[Visit]:
    stmt = (
        select(Visit)
        .where(Visit.pet_id == pet_id)
        .order_by(Visit.date.asc(), Visit.created_at.asc(), Visit.id.asc())
    )
    return list((await session.execute(stmt)).scalars().all())


async def create_visit(
    *,
    session: AsyncSession,
    pet: Pet,
    date: dt.date,
    description: str,
    pipeline: ValidationPipeline | None = None,
) -> Visit:
    """
    Schedule a visit for `pet`.

    The visit is bound and validated before it is added to the session, so a rejected
    visit never touches the database. Raises `FieldValidationError` carrying the report.
    """

    visit = Visit(pet_id=pet.id, date=date, description=description)
    (pipeline or get_visit_validation_pipeline()).validate_or_raise(visit)

    session.add(visit)
    await session.commit()
    await session.refresh(visit)
    return visit
