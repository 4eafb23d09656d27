"""
Reservation endpoints.

  POST /reservations                      — book a table (409 if the slot is taken)
  GET  /reservations                      — list, optionally by restaurant / status
  GET  /reservations/available-tables     — free tables for a party at a time
  GET  /reservations/{id}                 — reservation + customer, table, requests
  PUT  /reservations/{id}                 — shallow-merge update
  POST /reservations/{id}/cancel          — mark cancelled
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from reservation_agent.dependencies import get_store
from reservation_agent.http import ok
from reservation_agent.schemas.reservation import (
    ReservationCreate,
    ReservationStatus,
    ReservationUpdate,
)
from reservation_agent.schemas.table import TableRead
from reservation_agent.services import booking
from reservation_agent.services.availability import find_available_tables
from reservation_agent.services.store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_reservation(
    body: ReservationCreate,
    store: RecordStore = Depends(get_store),
) -> dict:
    reservation = await booking.book(
        store,
        customer_id=body.customer_id,
        restaurant_id=body.restaurant_id,
        table_id=body.table_id,
        reservation_time=body.reservation_time,
        party_size=body.party_size,
        notes=body.special_requests,
    )
    return ok(reservation=reservation)


@router.get("")
async def list_reservations(
    restaurant_id: Optional[str] = Query(default=None),
    status_filter: Optional[ReservationStatus] = Query(default=None, alias="status"),
    store: RecordStore = Depends(get_store),
) -> dict:
    reservations = await booking.list_reservations(
        store, restaurant_id=restaurant_id, status=status_filter
    )
    return ok(reservations=reservations, count=len(reservations))


@router.get("/available-tables")
async def available_tables(
    restaurant_id: str = Query(..., min_length=1),
    party_size: int = Query(..., gt=0),
    reservation_time: str = Query(..., min_length=1),
    store: RecordStore = Depends(get_store),
) -> dict:
    tables = await find_available_tables(store, restaurant_id, party_size, reservation_time)
    return ok(
        availableTables=[TableRead.model_validate(t) for t in tables],
        totalAvailable=len(tables),
    )


@router.get("/{reservation_id}")
async def get_reservation(
    reservation_id: str,
    store: RecordStore = Depends(get_store),
) -> dict:
    return ok(reservation=await booking.get_reservation_detail(store, reservation_id))


@router.put("/{reservation_id}")
async def update_reservation(
    reservation_id: str,
    body: ReservationUpdate,
    store: RecordStore = Depends(get_store),
) -> dict:
    # No slot re-check here: moving a reservation onto a taken slot is not prevented.
    reservation = await booking.update_reservation(
        store, reservation_id, body.model_dump(exclude_unset=True)
    )
    return ok(reservation=reservation)


@router.post("/{reservation_id}/cancel")
async def cancel_reservation(
    reservation_id: str,
    store: RecordStore = Depends(get_store),
) -> dict:
    reservation = await booking.cancel_reservation(store, reservation_id)
    return ok(message="Reservation cancelled successfully", reservation=reservation)
