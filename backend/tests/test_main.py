import pytest

from app.core.config import settings
from app.main import app, lifespan


async def test_startup_requires_database_url(monkeypatch):
    monkeypatch.setattr(settings, "database_url", "")

    with pytest.raises(RuntimeError, match="DATABASE_URL is not set"):
        async with lifespan(app):
            pass
