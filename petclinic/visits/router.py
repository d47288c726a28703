from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.api.schemas import FieldValidationErrorOut
from petclinic.core.db import get_session
from petclinic.pets.models import Pet
from petclinic.pets.service import get_pet
from petclinic.visits.schemas import VisitCreate, VisitListOut, VisitOut
from petclinic.visits.service import create_visit, list_visits

router = APIRouter(prefix="/owners/{owner_id}/pets/{pet_id}/visits", tags=["visits"])


async def _get_pet_or_404(
    *, session: AsyncSession, owner_id: uuid.UUID, pet_id: uuid.UUID
) -> Pet:
    pet = await get_pet(session=session, owner_id=owner_id, pet_id=pet_id)
    if pet is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found")
    return pet


@router.get("", response_model=VisitListOut)
async def list_pet_visits(
    owner_id: uuid.UUID,
    pet_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
) -> VisitListOut:
    await _get_pet_or_404(session=session, owner_id=owner_id, pet_id=pet_id)
    visits = await list_visits(session=session, pet_id=pet_id)
    return VisitListOut(items=[VisitOut.model_validate(v) for v in visits])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=VisitOut,
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": FieldValidationErrorOut,
            "description": "The visit was rejected by a scheduling rule (e.g. Sunday).",
        }
    },
)
async def create_pet_visit(
    owner_id: uuid.UUID,
    pet_id: uuid.UUID,
    payload: VisitCreate,
    session: AsyncSession = Depends(get_session),
) -> VisitOut:
    pet = await _get_pet_or_404(session=session, owner_id=owner_id, pet_id=pet_id)
    return await create_visit(
        session=session,
        pet=pet,
        date=payload.date,
        description=payload.description,
    )
