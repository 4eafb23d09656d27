"""Pytest configuration and fixtures for reservation agent tests."""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from reservation_agent.database import get_db
from reservation_agent.dependencies import get_agent_defaults
from reservation_agent.main import app
from reservation_agent.models import Base
from reservation_agent.seed import seed_sample_data
from reservation_agent.services.agent import AgentDefaults
from reservation_agent.services.store import RecordStore

RESTAURANT_ID = "rest_001"
DINNER = "2024-03-15T19:00:00.000Z"


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Create a throwaway SQLite database engine for one test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def store(session_factory):
    """A record store backed by its own session."""
    async with session_factory() as session:
        yield RecordStore(session)


@pytest_asyncio.fixture
async def seeded_store(store):
    """Store holding rest_001 and its eleven sample tables."""
    await seed_sample_data(store, RESTAURANT_ID)
    return store


@pytest.fixture
def agent_defaults():
    return AgentDefaults(
        restaurant_id=RESTAURANT_ID,
        customer_id="cust_001",
        party_size=2,
        fallback_confidence=0.7,
    )


@pytest_asyncio.fixture
async def client(session_factory, agent_defaults):
    """HTTP client against the app, with get_db bound to the test database."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_agent_defaults] = lambda: agent_defaults
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fake_model(monkeypatch):
    """Replace the hosted model with canned replies; records every prompt sent."""

    def _install(*replies):
        prompts = []
        queue = list(replies)

        async def _call_model(prompt):
            prompts.append(prompt)
            reply = queue.pop(0)
            if isinstance(reply, Exception):
                raise reply
            return reply

        monkeypatch.setattr("reservation_agent.services.agent.call_model", _call_model)
        return prompts

    return _install
