"""
AI agent endpoint — free-text booking requests.

POST /ai-agent {"prompt": "..."} → {"success": true, "aiResponse": <instruction>, "result": ...}

aiResponse is the validated (or fallback) instruction with camelCase parameter
keys; result depends on the action (availability, the new reservation, or the
model's text).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from reservation_agent.dependencies import get_agent_defaults, get_store
from reservation_agent.http import ok
from reservation_agent.schemas.agent import AgentRequest
from reservation_agent.services.agent import AgentDefaults, handle_prompt
from reservation_agent.services.store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["agent"])


@router.post("/ai-agent")
async def ai_agent(
    body: AgentRequest,
    store: RecordStore = Depends(get_store),
    defaults: AgentDefaults = Depends(get_agent_defaults),
) -> dict:
    instruction, result = await handle_prompt(body.prompt, store, defaults)
    return ok(aiResponse=instruction.model_dump(by_alias=True), result=result)
