"""Special request endpoints — notes attached to an existing reservation."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, status

from reservation_agent.dependencies import get_store
from reservation_agent.http import ok
from reservation_agent.models import SpecialRequest
from reservation_agent.schemas.special_request import SpecialRequestCreate, SpecialRequestRead
from reservation_agent.services.store import RecordStore, new_id
from reservation_agent.utils.time import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/requests", tags=["requests"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_request(
    body: SpecialRequestCreate,
    store: RecordStore = Depends(get_store),
) -> dict:
    # The reservation is not looked up first; a note may reference any id.
    request = await store.put(
        SpecialRequest(request_id=new_id(), **body.model_dump(), created_at=utc_now())
    )
    return ok(request=SpecialRequestRead.model_validate(request))


@router.get("")
async def list_requests(
    reservation_id: str = Query(..., min_length=1),
    store: RecordStore = Depends(get_store),
) -> dict:
    requests = await store.query(SpecialRequest, "reservation_id", reservation_id)
    return ok(
        requests=[SpecialRequestRead.model_validate(r) for r in requests],
        count=len(requests),
    )
