"""Restaurant endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from reservation_agent.dependencies import get_store
from reservation_agent.errors import NotFoundError
from reservation_agent.http import ok
from reservation_agent.models import Restaurant
from reservation_agent.schemas.restaurant import RestaurantCreate, RestaurantRead
from reservation_agent.services.store import RecordStore, new_id
from reservation_agent.utils.time import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/restaurants", tags=["restaurants"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_restaurant(
    body: RestaurantCreate,
    store: RecordStore = Depends(get_store),
) -> dict:
    now = utc_now()
    restaurant = await store.put(
        Restaurant(
            restaurant_id=new_id(),
            name=body.name,
            location=body.location,
            cuisine_type=body.cuisine_type,
            rating=body.rating or 0,
            opening_hours=body.opening_hours or {},
            contact_info=body.contact_info or {},
            created_at=now,
            updated_at=now,
        )
    )
    logger.info("Created restaurant %s (%s)", restaurant.restaurant_id, restaurant.name)
    return ok(restaurant=RestaurantRead.model_validate(restaurant))


@router.get("/{restaurant_id}")
async def get_restaurant(
    restaurant_id: str,
    store: RecordStore = Depends(get_store),
) -> dict:
    restaurant = await store.get(Restaurant, restaurant_id)
    if restaurant is None:
        raise NotFoundError("Restaurant", restaurant_id)
    return ok(restaurant=RestaurantRead.model_validate(restaurant))
