from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.core.db import get_session
from petclinic.owners.schemas import OwnerCreate, OwnerListOut, OwnerOut, OwnerUpdate
from petclinic.owners.service import create_owner, get_owner, list_owners, update_owner

router = APIRouter(prefix="/owners", tags=["owners"])


@router.get("", response_model=OwnerListOut)
async def get_owners(
    last_name: str | None = Query(
        default=None,
        max_length=30,
        description="Filter by last name (case-insensitive prefix match).",
    ),
    limit: int = Query(default=50, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
) -> OwnerListOut:
    items = await list_owners(session=session, last_name=last_name, limit=limit)
    return OwnerListOut(items=[OwnerOut.model_validate(o) for o in items], limit=limit)


@router.get("/{owner_id}", response_model=OwnerOut)
async def get_owner_by_id(
    owner_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
) -> OwnerOut:
    owner = await get_owner(session=session, owner_id=owner_id)
    if owner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Owner not found")
    return owner


@router.post("", status_code=status.HTTP_201_CREATED, response_model=OwnerOut)
async def create_owner_route(
    payload: OwnerCreate,
    session: AsyncSession = Depends(get_session),
) -> OwnerOut:
    return await create_owner(session=session, **payload.model_dump())


@router.put("/{owner_id}", response_model=OwnerOut)
async def update_owner_by_id(
    owner_id: uuid.UUID,
    payload: OwnerUpdate,
    session: AsyncSession = Depends(get_session),
) -> OwnerOut:
    owner = await get_owner(session=session, owner_id=owner_id)
    if owner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Owner not found")
    return await update_owner(
        session=session, owner=owner, changes=payload.model_dump(exclude_unset=True)
    )
