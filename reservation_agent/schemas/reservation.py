"""Pydantic schemas for reservations and table availability."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from reservation_agent.schemas.customer import CustomerRead
from reservation_agent.schemas.special_request import SpecialRequestRead
from reservation_agent.schemas.table import TableRead

# 'pending' is never produced by any write path, so it is not modelled.
ReservationStatus = Literal["confirmed", "cancelled"]


class ReservationCreate(BaseModel):
    """Body for POST /reservations."""

    model_config = ConfigDict(str_strip_whitespace=True)

    customer_id: str = Field(..., min_length=1)
    restaurant_id: str = Field(..., min_length=1)
    table_id: str = Field(..., min_length=1)
    reservation_time: str = Field(..., min_length=1)
    party_size: int = Field(..., gt=0)
    special_requests: list[str] = Field(default_factory=list)


class ReservationUpdate(BaseModel):
    """Body for PUT /reservations/{id} — only the supplied fields are merged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    customer_id: Optional[str] = Field(None, min_length=1)
    table_id: Optional[str] = Field(None, min_length=1)
    reservation_time: Optional[str] = Field(None, min_length=1)
    party_size: Optional[int] = Field(None, gt=0)
    status: Optional[ReservationStatus] = None


class ReservationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reservation_id: str
    customer_id: str
    restaurant_id: str
    table_id: str
    reservation_time: str
    party_size: int
    status: ReservationStatus
    created_at: datetime
    updated_at: datetime


class ReservationDetail(ReservationRead):
    """A reservation joined with its customer, table and special requests."""

    customer: Optional[CustomerRead] = None
    table: Optional[TableRead] = None
    special_requests: list[SpecialRequestRead] = Field(default_factory=list)
