from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

_TELEPHONE_PATTERN = r"^\d{1,10}$"


class OwnerCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=30, examples=["George"])
    last_name: str = Field(min_length=1, max_length=30, examples=["Franklin"])
    address: str = Field(min_length=1, max_length=255, examples=["110 W. Liberty St."])
    city: str = Field(min_length=1, max_length=80, examples=["Madison"])
    telephone: str = Field(
        pattern=_TELEPHONE_PATTERN,
        description="Digits only, up to 10.",
        examples=["6085551023"],
    )


class OwnerUpdate(BaseModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=30)
    last_name: str | None = Field(default=None, min_length=1, max_length=30)
    address: str | None = Field(default=None, min_length=1, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=80)
    telephone: str | None = Field(default=None, pattern=_TELEPHONE_PATTERN)


class OwnerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(description="Owner identifier (UUID).")
    first_name: str
    last_name: str
    address: str
    city: str
    telephone: str
    created_at: datetime = Field(description="Record creation timestamp (UTC).")
    updated_at: datetime = Field(description="Record last update timestamp (UTC).")


class OwnerListOut(BaseModel):
    items: list[OwnerOut] = Field(description="Owners ordered by last name, then first name.")
    limit: int = Field(description="Page size requested.", examples=[50])
