"""Pydantic schemas for customer endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

LoyaltyStatus = Literal["bronze", "silver", "gold"]


class CustomerCreate(BaseModel):
    """Body for POST /customers."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=1, max_length=255)
    phone_number: str = Field(..., min_length=1, max_length=32)
    preferences: dict[str, Any] = Field(default_factory=dict)
    loyalty_status: LoyaltyStatus = "bronze"


class CustomerUpdate(BaseModel):
    """Body for PUT /customers/{id} — only the supplied fields are merged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=120)
    email: Optional[str] = Field(None, min_length=1, max_length=255)
    phone_number: Optional[str] = Field(None, min_length=1, max_length=32)
    preferences: Optional[dict[str, Any]] = None
    loyalty_status: Optional[LoyaltyStatus] = None


class CustomerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    customer_id: str
    name: str
    email: str
    phone_number: str
    preferences: dict[str, Any]
    loyalty_status: str
    created_at: datetime
    updated_at: datetime
