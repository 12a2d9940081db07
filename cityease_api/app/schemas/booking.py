"""
Pydantic models for bookings.

Clients send ``subService`` in camelCase while stored records use the
column names (``sub_service``).  The booking time is free text and is
exposed under the key ``datetime``; internally the field is called
``scheduled_for``.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingCreate(BaseModel):
    """Body of ``POST /api/bookings``."""

    model_config = ConfigDict(populate_by_name=True)

    service: Optional[str] = Field(None, examples=["Home Cleaning"])
    sub_service: Optional[str] = Field(None, alias="subService", examples=["Deep Cleaning"])
    professional: Optional[str] = Field(None, examples=["Ravi Kumar"])
    address: Optional[str] = Field(None, examples=["12 MG Road, Pune"])
    scheduled_for: Optional[str] = Field(None, alias="datetime", examples=["2026-11-02 10:00"])
    notes: Optional[str] = Field(None, examples=["Please bring ladder"])


class BookingRead(BaseModel):
    """A stored booking row."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    user_id: int
    service: str
    sub_service: Optional[str] = ""
    professional: Optional[str] = ""
    address: str
    scheduled_for: str = Field(..., alias="datetime")
    notes: Optional[str] = ""
    status: str = "pending"
    created_at: datetime
