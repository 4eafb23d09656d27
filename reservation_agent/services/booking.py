"""
Booking committer — turns a chosen (table, time) into a confirmed reservation.

Flow of book():
  1. validate that every required field is present
  2. re-check the slot: any confirmed reservation with the same
     (restaurant_id, table_id, reservation_time) → SlotConflictError
  3. write the reservation and one SpecialRequest per note in a single
     transaction (all rows or none)

Step 2 and step 3 are not atomic. Two callers racing for the same slot can
both pass the check and both write; closing that gap needs a conditional
insert keyed by (restaurant_id, table_id, reservation_time).
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from reservation_agent.errors import FieldValidationError, NotFoundError, SlotConflictError
from reservation_agent.models import Customer, DiningTable, Reservation, SpecialRequest
from reservation_agent.schemas.customer import CustomerRead
from reservation_agent.schemas.reservation import ReservationDetail, ReservationRead
from reservation_agent.schemas.special_request import SpecialRequestRead
from reservation_agent.schemas.table import TableRead
from reservation_agent.services.availability import confirmed_reservations_at
from reservation_agent.services.store import RecordStore, new_id
from reservation_agent.utils.time import utc_now

logger = logging.getLogger(__name__)


def _require(**fields: Any) -> None:
    """Raise FieldValidationError naming the first absent field."""
    for name, value in fields.items():
        if value is None or value == "":
            raise FieldValidationError(name)


async def book(
    store: RecordStore,
    customer_id: Optional[str],
    restaurant_id: Optional[str],
    table_id: Optional[str],
    reservation_time: Optional[str],
    party_size: Optional[int],
    notes: Iterable[str] = (),
) -> ReservationRead:
    """Create a confirmed reservation plus its special-request notes."""
    _require(
        customer_id=customer_id,
        restaurant_id=restaurant_id,
        table_id=table_id,
        reservation_time=reservation_time,
        party_size=party_size,
    )
    if party_size < 1:
        raise FieldValidationError("party_size", "party_size must be a positive integer")

    existing = await confirmed_reservations_at(
        store, restaurant_id, reservation_time, table_id=table_id
    )
    if existing:
        logger.info(
            "Slot conflict restaurant=%s table=%s time=%s (held by %s)",
            restaurant_id, table_id, reservation_time, existing[0].reservation_id,
        )
        raise SlotConflictError(restaurant_id, table_id, reservation_time)

    now = utc_now()
    reservation = Reservation(
        reservation_id=new_id(),
        customer_id=customer_id,
        restaurant_id=restaurant_id,
        table_id=table_id,
        reservation_time=reservation_time,
        party_size=party_size,
        status="confirmed",
        created_at=now,
        updated_at=now,
    )
    requests = [
        SpecialRequest(
            request_id=new_id(),
            reservation_id=reservation.reservation_id,
            note=note,
            priority="normal",
            created_at=now,
        )
        for note in notes
    ]

    saved, *_ = await store.put_all([reservation, *requests])
    logger.info(
        "Booked reservation %s table=%s time=%s party=%d (%d notes)",
        saved.reservation_id, table_id, reservation_time, party_size, len(requests),
    )
    return ReservationRead.model_validate(saved)


async def _load(store: RecordStore, reservation_id: str) -> Reservation:
    reservation = await store.get(Reservation, reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation", reservation_id)
    return reservation


async def get_reservation_detail(store: RecordStore, reservation_id: str) -> ReservationDetail:
    """Fetch a reservation joined with its customer, table and special requests."""
    reservation = await _load(store, reservation_id)
    customer = await store.get(Customer, reservation.customer_id)
    table = await store.get(DiningTable, reservation.table_id)
    requests = await store.query(SpecialRequest, "reservation_id", reservation_id)

    detail = ReservationDetail.model_validate(reservation)
    return detail.model_copy(
        update={
            "customer": CustomerRead.model_validate(customer) if customer else None,
            "table": TableRead.model_validate(table) if table else None,
            "special_requests": [SpecialRequestRead.model_validate(r) for r in requests],
        }
    )


async def update_reservation(
    store: RecordStore,
    reservation_id: str,
    changes: dict[str, Any],
) -> ReservationRead:
    """Shallow-merge ``changes`` into the stored row and refresh updated_at."""
    reservation = await _load(store, reservation_id)
    for field, value in changes.items():
        setattr(reservation, field, value)
    reservation.updated_at = utc_now()
    saved = await store.put(reservation)
    return ReservationRead.model_validate(saved)


async def cancel_reservation(store: RecordStore, reservation_id: str) -> ReservationRead:
    """Mark a reservation cancelled; its slot becomes bookable again."""
    cancelled = await update_reservation(store, reservation_id, {"status": "cancelled"})
    logger.info("Cancelled reservation %s", reservation_id)
    return cancelled


async def list_reservations(
    store: RecordStore,
    restaurant_id: Optional[str] = None,
    status: Optional[str] = None,
) -> list[ReservationRead]:
    filters = {"status": status} if status else {}
    if restaurant_id:
        rows = await store.query(Reservation, "restaurant_id", restaurant_id, **filters)
    else:
        rows = await store.scan(Reservation, **filters)
    rows.sort(key=lambda r: (r.reservation_time, r.reservation_id))
    return [ReservationRead.model_validate(r) for r in rows]
