"""
Sample data for a single-restaurant deployment.

seed_sample_data() inserts the default restaurant and its eleven tables.
Rows that already exist are left untouched, so it is safe to run repeatedly.
"""

from __future__ import annotations

import logging

from reservation_agent.models import DiningTable, Restaurant
from reservation_agent.services.store import RecordStore
from reservation_agent.utils.time import utc_now

logger = logging.getLogger(__name__)

SAMPLE_RESTAURANT = {
    "name": "Fine Dining Restaurant",
    "location": "123 Main Street, Downtown",
    "cuisine_type": "Contemporary American",
    "rating": 4.5,
    "opening_hours": {
        "monday": {"open": "11:00", "close": "22:00"},
        "tuesday": {"open": "11:00", "close": "22:00"},
        "wednesday": {"open": "11:00", "close": "22:00"},
        "thursday": {"open": "11:00", "close": "22:00"},
        "friday": {"open": "11:00", "close": "23:00"},
        "saturday": {"open": "11:00", "close": "23:00"},
        "sunday": {"open": "11:00", "close": "21:00"},
    },
    "contact_info": {
        "phone": "(555) 123-4567",
        "email": "info@finedining.com",
        "website": "https://finedining.com",
    },
}

# (table_number, seating_capacity, location_type)
SAMPLE_TABLES = [
    ("A1", 2, "indoor"),
    ("A2", 2, "indoor"),
    ("A3", 4, "indoor"),
    ("A4", 4, "indoor"),
    ("A5", 6, "indoor"),
    ("A6", 6, "indoor"),
    ("B1", 2, "outdoor"),
    ("B2", 4, "outdoor"),
    ("B3", 4, "outdoor"),
    ("VIP1", 8, "indoor"),
    ("VIP2", 8, "indoor"),
]


SAMPLE_RESTAURANT_ID = "rest_001"


def sample_table_id(restaurant_id: str, position: int) -> str:
    """table_001..table_011 for the sample restaurant, prefixed with the restaurant id otherwise."""
    if restaurant_id == SAMPLE_RESTAURANT_ID:
        return f"table_{position:03d}"
    return f"{restaurant_id}_table_{position:03d}"


async def seed_sample_data(store: RecordStore, restaurant_id: str = SAMPLE_RESTAURANT_ID) -> int:
    """Insert the sample restaurant and tables. Returns the number of rows written."""
    now = utc_now()
    rows = []

    if await store.get(Restaurant, restaurant_id) is None:
        rows.append(
            Restaurant(
                restaurant_id=restaurant_id,
                **SAMPLE_RESTAURANT,
                created_at=now,
                updated_at=now,
            )
        )

    existing = {
        t.table_number for t in await store.query(DiningTable, "restaurant_id", restaurant_id)
    }
    for i, (label, capacity, location) in enumerate(SAMPLE_TABLES, start=1):
        if label in existing:
            continue
        rows.append(
            DiningTable(
                table_id=sample_table_id(restaurant_id, i),
                restaurant_id=restaurant_id,
                table_number=label,
                seating_capacity=capacity,
                location_type=location,
                created_at=now,
                updated_at=now,
            )
        )

    await store.put_all(rows)
    logger.info("Seeded %d rows for restaurant %s", len(rows), restaurant_id)
    return len(rows)
