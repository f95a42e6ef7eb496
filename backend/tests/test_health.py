async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


async def test_ready_checks_database(client):
    resp = await client.get("/ready")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ready"
    assert data["checks"] == {"database": True}


async def test_root_points_at_api(client):
    resp = await client.get("/")
    assert resp.json()["api"] == "/api/presale"
