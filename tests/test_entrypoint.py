"""Module entry point: uvicorn started on the configured host/port."""

from usersvc import __main__ as entrypoint
from usersvc.config import Settings


def test_main_runs_uvicorn_with_settings(monkeypatch):
    captured = {}
    settings = Settings(_env_file=None, mongo_uri="mongodb://db", host="127.0.0.1", port=9000)
    monkeypatch.setattr(entrypoint, "get_settings", lambda: settings)
    monkeypatch.setattr(
        entrypoint.uvicorn, "run", lambda target, **kw: captured.update(target=target, **kw),
    )

    entrypoint.main()

    assert captured == {"target": "usersvc.main:app", "host": "127.0.0.1", "port": 9000}
