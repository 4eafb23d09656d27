"""Dining table endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from reservation_agent.dependencies import get_store
from reservation_agent.http import ok
from reservation_agent.models import DiningTable
from reservation_agent.schemas.table import TableCreate, TableRead
from reservation_agent.services.store import RecordStore, new_id
from reservation_agent.utils.time import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tables", tags=["tables"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_table(
    body: TableCreate,
    store: RecordStore = Depends(get_store),
) -> dict:
    now = utc_now()
    table = await store.put(
        DiningTable(table_id=new_id(), **body.model_dump(), created_at=now, updated_at=now)
    )
    logger.info(
        "Created table %s (%s, %d seats) for restaurant %s",
        table.table_id, table.table_number, table.seating_capacity, table.restaurant_id,
    )
    return ok(table=TableRead.model_validate(table))


@router.get("")
async def list_tables(
    restaurant_id: Optional[str] = Query(default=None),
    store: RecordStore = Depends(get_store),
) -> dict:
    """Tables of one restaurant (index lookup) or of every restaurant (scan)."""
    if restaurant_id:
        tables = await store.query(DiningTable, "restaurant_id", restaurant_id)
    else:
        tables = await store.scan(DiningTable)
    return ok(tables=[TableRead.model_validate(t) for t in tables], count=len(tables))
