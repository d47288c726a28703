from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.core.settings import get_settings
from petclinic.domain.exceptions import BusinessValidationError
from petclinic.owners.models import Owner
from petclinic.pets.models import Pet


def _validate_birth_date(*, birth_date: date) -> None:
    if birth_date > date.today():
        raise BusinessValidationError("birth_date must be today or in the past.")


def _normalize_pet_name(*, name: str) -> str:
    normalized = name.strip()
    if not normalized:
        raise BusinessValidationError("name must not be blank.")
    return normalized


def _normalize_pet_type(*, pet_type: str) -> str:
    normalized = pet_type.strip().lower()
    allowed = get_settings().allowed_pet_types
    if normalized not in allowed:
        raise BusinessValidationError(
            f"Invalid pet type. Supported values: {', '.join(sorted(allowed))}."
        )
    return normalized


async def _pet_name_taken(
    *,
    session: AsyncSession,
    owner_id: uuid.UUID,
    name: str,
    exclude_pet_id: uuid.UUID | None = None,
) -> bool:
    stmt = select(Pet.id).where(
        Pet.owner_id == owner_id,
        func.lower(Pet.name) == name.lower(),
    )
    if exclude_pet_id is not None:
        stmt = stmt.where(Pet.id != exclude_pet_id)
    row = (await session.execute(stmt.limit(1))).first()
    return row is not None


async def list_pets(*, session: AsyncSession, owner_id: uuid.UUID) -> list[Pet]:
    stmt = select(Pet).where(Pet.owner_id == owner_id).order_by(Pet.name.asc(), Pet.id.asc())
    return list((await session.execute(stmt)).scalars().all())


async def get_pet(
    *, session: AsyncSession, owner_id: uuid.UUID, pet_id: uuid.UUID
) -> Pet | None:
    pet = await session.get(Pet, pet_id)
    # A pet is only reachable through the owner it belongs to.
    if pet is None or pet.owner_id != owner_id:
        return None
    return pet


async def create_pet(
    *,
    session: AsyncSession,
    owner: Owner,
    name: str,
    birth_date: date,
    pet_type: str,
) -> Pet:
    name = _normalize_pet_name(name=name)
    _validate_birth_date(birth_date=birth_date)
    normalized_type = _normalize_pet_type(pet_type=pet_type)
    if await _pet_name_taken(session=session, owner_id=owner.id, name=name):
        raise BusinessValidationError("Owner already has a pet with this name.")

    pet = Pet(owner_id=owner.id, name=name, birth_date=birth_date, type=normalized_type)
    session.add(pet)
    await session.commit()
    await session.refresh(pet)
    return pet


async def update_pet(
    *,
    session: AsyncSession,
    pet: Pet,
    name: str | None,
    birth_date: date | None,
    pet_type: str | None,
) -> Pet:
    if name is not None:
        name = _normalize_pet_name(name=name)
        if await _pet_name_taken(
            session=session, owner_id=pet.owner_id, name=name, exclude_pet_id=pet.id
        ):
            raise BusinessValidationError("Owner already has a pet with this name.")
        pet.name = name
    if birth_date is not None:
        _validate_birth_date(birth_date=birth_date)
        pet.birth_date = birth_date
    if pet_type is not None:
        pet.type = _normalize_pet_type(pet_type=pet_type)

    await session.commit()
    await session.refresh(pet)
    return pet
