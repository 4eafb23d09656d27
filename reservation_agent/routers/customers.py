"""Customer endpoints — plain create / fetch / merge-update."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from reservation_agent.dependencies import get_store
from reservation_agent.errors import NotFoundError
from reservation_agent.http import ok
from reservation_agent.models import Customer
from reservation_agent.schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate
from reservation_agent.services.store import RecordStore, new_id
from reservation_agent.utils.time import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])


async def _load(store: RecordStore, customer_id: str) -> Customer:
    customer = await store.get(Customer, customer_id)
    if customer is None:
        raise NotFoundError("Customer", customer_id)
    return customer


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_customer(
    body: CustomerCreate,
    store: RecordStore = Depends(get_store),
) -> dict:
    now = utc_now()
    customer = await store.put(
        Customer(customer_id=new_id(), **body.model_dump(), created_at=now, updated_at=now)
    )
    logger.info("Created customer %s", customer.customer_id)
    return ok(customer=CustomerRead.model_validate(customer))


@router.get("/{customer_id}")
async def get_customer(
    customer_id: str,
    store: RecordStore = Depends(get_store),
) -> dict:
    customer = await _load(store, customer_id)
    return ok(customer=CustomerRead.model_validate(customer))


@router.put("/{customer_id}")
async def update_customer(
    customer_id: str,
    body: CustomerUpdate,
    store: RecordStore = Depends(get_store),
) -> dict:
    """Shallow-merge the supplied fields into the stored customer."""
    customer = await _load(store, customer_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(customer, field, value)
    customer.updated_at = utc_now()
    customer = await store.put(customer)
    return ok(customer=CustomerRead.model_validate(customer))
