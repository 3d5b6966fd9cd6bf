"""Application Lifespan: assets and MongoDB client wired onto app.state."""

import pytest

from usersvc.config import Settings
from usersvc.core.errors import StaticAssetMissingError
from usersvc.infrastructure.database import MongoManager
from usersvc.infrastructure.static_assets import StaticAssets
from usersvc.main import app, lifespan


@pytest.fixture
def settings(monkeypatch, tmp_path):
    s = Settings(_env_file=None, mongo_uri="mongodb://localhost:27017", log_format="text")
    monkeypatch.setattr("usersvc.main.get_settings", lambda: s)
    return s


async def test_lifespan_populates_state_and_closes(settings):
    async with lifespan(app):
        assert isinstance(app.state.assets, StaticAssets)
        assert isinstance(app.state.mongo, MongoManager)
        assert app.state.mongo.users().name == "users"


async def test_lifespan_aborts_when_asset_missing(settings, tmp_path):
    settings.static_dir = tmp_path

    with pytest.raises(StaticAssetMissingError):
        async with lifespan(app):
            pass
