from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.core.db import get_session
from petclinic.owners.models import Owner
from petclinic.owners.service import get_owner
from petclinic.pets.schemas import PetCreate, PetListOut, PetOut, PetUpdate
from petclinic.pets.service import create_pet, get_pet, list_pets, update_pet

router = APIRouter(prefix="/owners/{owner_id}/pets", tags=["pets"])


async def _get_owner_or_404(*, session: AsyncSession, owner_id: uuid.UUID) -> Owner:
    owner = await get_owner(session=session, owner_id=owner_id)
    if owner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Owner not found")
    return owner


@router.get("", response_model=PetListOut)
async def list_owner_pets(
    owner_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
) -> PetListOut:
    await _get_owner_or_404(session=session, owner_id=owner_id)
    pets = await list_pets(session=session, owner_id=owner_id)
    return PetListOut(items=[PetOut.model_validate(p) for p in pets])


@router.get("/{pet_id}", response_model=PetOut)
async def get_owner_pet(
    owner_id: uuid.UUID,
    pet_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
) -> PetOut:
    pet = await get_pet(session=session, owner_id=owner_id, pet_id=pet_id)
    if pet is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found")
    return pet


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PetOut)
async def create_owner_pet(
    owner_id: uuid.UUID,
    payload: PetCreate,
    session: AsyncSession = Depends(get_session),
) -> PetOut:
    owner = await _get_owner_or_404(session=session, owner_id=owner_id)
    return await create_pet(
        session=session,
        owner=owner,
        name=payload.name,
        birth_date=payload.birth_date,
        pet_type=payload.type,
    )


@router.put("/{pet_id}", response_model=PetOut)
async def update_owner_pet(
    owner_id: uuid.UUID,
    pet_id: uuid.UUID,
    payload: PetUpdate,
    session: AsyncSession = Depends(get_session),
) -> PetOut:
    pet = await get_pet(session=session, owner_id=owner_id, pet_id=pet_id)
    if pet is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found")
    return await update_pet(
        session=session,
        pet=pet,
        name=payload.name,
        birth_date=payload.birth_date,
        pet_type=payload.type,
    )
