"""API test fixtures: the real app over a migrated temporary database."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.main import create_app
from src.infrastructure.storage.sqlite import SQLiteUserStore


@pytest.fixture
async def client(initialized_db) -> AsyncGenerator[AsyncClient, None]:
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def staff(initialized_db, admin_user, seller_user, manager_user):
    store = SQLiteUserStore()
    for user in (admin_user, seller_user, manager_user):
        await store.create_user(user)
    return {"admin": admin_user, "seller": seller_user, "manager": manager_user}
