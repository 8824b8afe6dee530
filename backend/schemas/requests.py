"""
Pydantic schemas for API request bodies
"""
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class TripRequest(BaseModel):
    """Request body for planning a trip"""
    destination: str = Field(
        default="",
        description="Where the traveller wants to go",
        examples=["Lisbon"],
    )
    days: int = Field(
        default=0,
        description="Trip length in days",
        examples=[3],
    )
    theme: Optional[str] = Field(
        default=None,
        description="Optional focus for the trip",
        examples=["food"],
    )
    pace: Optional[str] = Field(
        default=None,
        description="Optional trip pace",
        examples=["moderate"],
    )

    class Config:
        frozen = True

    # Explicit nulls degrade the same way missing fields do
    @field_validator("destination", mode="before")
    @classmethod
    def _null_destination(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("days", mode="before")
    @classmethod
    def _null_days(cls, value: Any) -> Any:
        return 0 if value is None else value
