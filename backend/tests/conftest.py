import os

os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise, connections

from app.main import app


@pytest.fixture
async def db():
    """Fresh in-memory database with the presale tables."""
    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={"models": ["app.models.presale"]},
    )
    await Tortoise.generate_schemas()
    yield
    await connections.close_all(discard=True)


@pytest.fixture
async def client(db):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
