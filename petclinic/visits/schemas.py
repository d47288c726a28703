from __future__ import annotations

import datetime as dt
import uuid

from pydantic import BaseModel, ConfigDict, Field


class VisitCreate(BaseModel):
    # Required here so a visit never reaches the date rules without a date.
    date: dt.date = Field(
        description="Visit date in ISO format (YYYY-MM-DD). Sundays are rejected.",
        examples=["2024-01-08"],
    )
    description: str = Field(
        min_length=1,
        max_length=255,
        description="Reason for the visit.",
        examples=["rabies shot"],
    )


class VisitOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(description="Visit identifier (UUID).")
    pet_id: uuid.UUID = Field(description="Visited pet's identifier (UUID).")
    date: dt.date = Field(description="Visit date (YYYY-MM-DD).")
    description: str
    created_at: dt.datetime = Field(description="Record creation timestamp (UTC).")


class VisitListOut(BaseModel):
    items: list[VisitOut] = Field(description="Visits of the pet, oldest first.")
