from __future__ import annotations

from pydantic import BaseModel, Field


class HealthOut(BaseModel):
    """Health check response."""

    status: str = Field(
        description="Service status indicator. `ok` means the API process is up and responding.",
        examples=["ok"],
    )


class FieldErrorOut(BaseModel):
    field: str = Field(description="Name of the rejected field.", examples=["date"])
    code: str = Field(
        description="Stable, machine-readable error code.", examples=["sunday.not.allowed"]
    )
    message: str = Field(
        description="Default human-readable message.",
        examples=["Visits on Sundays are not allowed"],
    )


class FieldValidationErrorOut(BaseModel):
    """Body returned when validation rules rejected one or more fields."""

    detail: str = Field(examples=["Validation failed"])
    errors: list[FieldErrorOut] = Field(description="Rejected fields, in report order.")
