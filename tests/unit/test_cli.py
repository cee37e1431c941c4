from __future__ import annotations

from fastapi import FastAPI

from http_toolkit import cli


def test_main_serves_app_with_uvicorn(monkeypatch, make_settings, capsys):
    calls = []
    monkeypatch.setattr(cli, "get_settings", lambda: make_settings(LOG_LEVEL="warning"))
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    cli.main(host="127.0.0.1", port=9000)

    assert len(calls) == 1
    app, kwargs = calls[0]
    assert isinstance(app, FastAPI)
    assert kwargs == {"host": "127.0.0.1", "port": 9000}
    assert "Starting API on http://localhost:9000" in capsys.readouterr().out
