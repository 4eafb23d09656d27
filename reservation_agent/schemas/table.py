"""Pydantic schemas for dining tables."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TableCreate(BaseModel):
    """Body for POST /tables."""

    model_config = ConfigDict(str_strip_whitespace=True)

    restaurant_id: str = Field(..., min_length=1)
    table_number: str = Field(..., min_length=1, max_length=32)
    seating_capacity: int = Field(..., gt=0)
    location_type: str = Field(..., min_length=1, max_length=32)   # 'indoor' | 'outdoor'


class TableRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    table_id: str
    restaurant_id: str
    table_number: str
    seating_capacity: int
    location_type: str
    created_at: datetime
    updated_at: datetime
