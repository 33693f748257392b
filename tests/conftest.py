from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from loyalize.core.config import DatabaseSettings, get_settings
from loyalize.infrastructure.database.session import build_engine, init_db
from loyalize.modules.customers import CustomerCreateInput
from loyalize.modules.customers.service import CustomerService


@pytest.fixture
async def engine(tmp_path):
    # a file database so that separate sessions use separate connections
    engine = build_engine(DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}"))
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def customer(session):
    customer = await CustomerService.with_session(session).create_customer(
        CustomerCreateInput(name="Sofia Rodriguez", email="sofia.r@example.com", spend=Decimal("0"))
    )
    await session.commit()
    return customer


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    get_settings.cache_clear()

    from loyalize.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
    get_settings.cache_clear()


@pytest.fixture
def api_customer(client):
    response = client.post("/api/customers", json={"name": "James Chen", "email": "james.c@example.com"})
    assert response.status_code == 201
    return response.json()
