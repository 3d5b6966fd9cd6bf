"""Health & Readiness: liveness always 200, readiness follows MongoDB ping."""

from usersvc import __version__


async def test_liveness(client):
    res = await client.get("/api/v1/health/")

    assert res.status_code == 200
    assert res.json() == {"status": "healthy", "service": "usersvc", "version": __version__}


async def test_readiness_when_database_answers(client, repo):
    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
    assert ("ping", ()) in repo.calls


async def test_readiness_503_when_database_down(client, repo):
    repo.healthy = False

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
