"""
Availability evaluator — which tables can seat a party at a given time.

A table is free at ``reservation_time`` when no *confirmed* reservation for the
same restaurant and table carries exactly that time string. Cancelled rows
never block a slot. Times are compared as opaque values: no tolerance window,
no timezone normalisation.
"""

from __future__ import annotations

import logging

from reservation_agent.models import DiningTable, Reservation
from reservation_agent.services.store import RecordStore

logger = logging.getLogger(__name__)


async def confirmed_reservations_at(
    store: RecordStore,
    restaurant_id: str,
    reservation_time: str,
    table_id: str | None = None,
) -> list[Reservation]:
    """Confirmed reservations for a restaurant at an exact time, optionally for one table."""
    filters = {"reservation_time": reservation_time, "status": "confirmed"}
    if table_id is not None:
        filters["table_id"] = table_id
    return await store.query(Reservation, "restaurant_id", restaurant_id, **filters)


async def find_available_tables(
    store: RecordStore,
    restaurant_id: str,
    party_size: int,
    reservation_time: str,
) -> list[DiningTable]:
    """
    Return every table of ``restaurant_id`` that seats at least ``party_size``
    and is not confirmed for ``reservation_time``.

    Ordered by seating capacity, then table_id, so the smallest fitting table
    comes first. Read-only; store failures propagate as UpstreamError.
    """
    tables = await store.query(DiningTable, "restaurant_id", restaurant_id)
    reservations = await confirmed_reservations_at(store, restaurant_id, reservation_time)

    reserved_table_ids = {r.table_id for r in reservations}
    available = [
        t for t in tables
        if t.table_id not in reserved_table_ids and t.seating_capacity >= party_size
    ]
    available.sort(key=lambda t: (t.seating_capacity, t.table_id))

    logger.debug(
        "Availability restaurant=%s party=%d time=%s: %d of %d tables free",
        restaurant_id, party_size, reservation_time, len(available), len(tables),
    )
    return available
