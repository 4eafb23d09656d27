"""Pydantic schemas for restaurant endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class RestaurantCreate(BaseModel):
    """Body for POST /restaurants."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1)
    cuisine_type: str = Field(..., min_length=1, max_length=100)
    rating: Optional[float] = Field(None, ge=0, le=5)
    opening_hours: Optional[dict[str, Any]] = None   # keyed by weekday
    contact_info: Optional[dict[str, Any]] = None


class RestaurantRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    restaurant_id: str
    name: str
    location: str
    cuisine_type: str
    rating: float
    opening_hours: dict[str, Any]
    contact_info: dict[str, Any]
    created_at: datetime
    updated_at: datetime
