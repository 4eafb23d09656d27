"""Pydantic schemas for special requests attached to reservations."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SpecialRequestCreate(BaseModel):
    """Body for POST /requests."""

    model_config = ConfigDict(str_strip_whitespace=True)

    reservation_id: str = Field(..., min_length=1)
    note: str = Field(..., min_length=1, max_length=1000)
    priority: str = Field("normal", min_length=1, max_length=16)


class SpecialRequestRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    request_id: str
    reservation_id: str
    note: str
    priority: str
    created_at: datetime
