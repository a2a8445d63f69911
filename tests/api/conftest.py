"""API test fixtures — FastAPI app with DB session and producer overridden.

Invariants:
    - get_db yields sessions from the per-test in-memory engine
    - get_message_producer returns the shared FakeProducer
    - db_manager patched so readiness checks hit the test engine
    - managed_client leaves get_db in place: sessions come from
      DatabaseSessionManager.session() and write errors map to DatabaseError
"""

import pytest
from httpx import ASGITransport, AsyncClient

import reportdesk.infrastructure.database as db_module
from reportdesk.infrastructure.database import get_db, DatabaseSessionManager
from reportdesk.infrastructure.message_producer import get_message_producer
from reportdesk.main import app


@pytest.fixture
def test_manager(test_engine, test_session_factory):
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager
    yield fake_manager
    db_module.db_manager = original_manager


@pytest.fixture
async def client(test_manager, test_session_factory, fake_producer):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_message_producer] = lambda: fake_producer

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def managed_client(test_manager, fake_producer):
    app.dependency_overrides[get_message_producer] = lambda: fake_producer

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
