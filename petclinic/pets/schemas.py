from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class PetCreate(BaseModel):
    name: str = Field(min_length=1, max_length=30, examples=["Leo"])
    birth_date: date = Field(
        description="Birth date in ISO format (YYYY-MM-DD).",
        examples=["2020-09-07"],
    )
    type: str = Field(
        min_length=1,
        max_length=30,
        description="Pet type; must be one of the configured pet types.",
        examples=["cat"],
    )


class PetUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=30)
    birth_date: date | None = Field(default=None)
    type: str | None = Field(default=None, min_length=1, max_length=30)


class PetOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(description="Pet identifier (UUID).")
    owner_id: uuid.UUID = Field(description="Owning owner's identifier (UUID).")
    name: str
    birth_date: date
    type: str
    created_at: datetime
    updated_at: datetime


class PetListOut(BaseModel):
    items: list[PetOut] = Field(description="Pets of the owner, ordered by name.")
