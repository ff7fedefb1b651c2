"""Shared test fixtures"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from app.core.dependencies import get_user_store
from app.main import app


@pytest.fixture(autouse=True)
def reset_store():
    """Give every test an empty store and no dependency overrides"""
    app.state.user_store.clear()
    yield
    app.dependency_overrides.pop(get_user_store, None)


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
