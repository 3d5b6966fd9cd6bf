"""API test fixtures: fake repository + static assets + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory FakeUserRepository
    - get_user_repository and get_static_assets overridden; the lifespan never
      runs, so no MongoDB connection is attempted
    - Overrides cleared after each test

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real routing, dependency
      injection and exception handlers in-process
"""

import pytest
from httpx import ASGITransport, AsyncClient

from usersvc.api.dependencies import get_error_policy
from usersvc.core.domain_types import ErrorMapping
from usersvc.core.error_policy import ErrorPolicy
from usersvc.infrastructure.database import get_user_repository
from usersvc.infrastructure.static_assets import StaticAssets, get_static_assets
from usersvc.main import app
from tests.api.fake_repository import FakeUserRepository


@pytest.fixture
def repo():
    return FakeUserRepository()


@pytest.fixture
def static_dir(tmp_path):
    for rel, text in (
        ("html/index.html", "<h1>users</h1>"),
        ("css/index.css", "body { color: black; }"),
        ("js/index.js", "console.log('users');"),
    ):
        path = tmp_path / rel
        path.parent.mkdir(parents=True)
        path.write_text(text, encoding="utf-8")
    (tmp_path / "image").mkdir()
    (tmp_path / "image" / "cat.jpg").write_bytes(b"\xff\xd8\xff\xe0jpeg")
    return tmp_path


@pytest.fixture
def error_mapping():
    return ErrorMapping.LEGACY


@pytest.fixture
async def client(repo, static_dir, error_mapping):
    """FastAPI test client with store and assets overridden."""
    assets = StaticAssets.load(static_dir)
    app.dependency_overrides[get_user_repository] = lambda: repo
    app.dependency_overrides[get_static_assets] = lambda: assets
    app.dependency_overrides[get_error_policy] = lambda: ErrorPolicy(error_mapping)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
