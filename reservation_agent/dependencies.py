"""FastAPI dependencies shared by the routers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from reservation_agent.config import settings
from reservation_agent.database import get_db
from reservation_agent.services.agent import AgentDefaults
from reservation_agent.services.store import RecordStore


async def get_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    """Record store bound to the request's session."""
    return RecordStore(db)


def get_agent_defaults() -> AgentDefaults:
    return AgentDefaults.from_settings(settings)
