"""Built client assets served alongside the API."""

import pytest
from fastapi.testclient import TestClient

from contact_api.config.settings import Config
from contact_api.fastapi_app import create_fastapi_app


@pytest.fixture()
def static_dir(tmp_path):
    (tmp_path / "index.html").write_text("<h1>spa</h1>")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "app.js").write_text("console.log('app')")
    return tmp_path


@pytest.fixture()
def spa_client(monkeypatch, container, static_dir):
    monkeypatch.setattr(Config, "SERVE_STATIC", True)
    monkeypatch.setattr(Config, "STATIC_DIR", str(static_dir))
    with TestClient(create_fastapi_app(container=container)) as test_client:
        yield test_client


def test_index_is_served_at_root(spa_client):
    res = spa_client.get("/")
    assert res.status_code == 200
    assert "<h1>spa</h1>" in res.text


def test_asset_files_are_served(spa_client):
    res = spa_client.get("/assets/app.js")
    assert res.status_code == 200
    assert "console.log" in res.text


def test_client_side_routes_fall_back_to_index(spa_client):
    res = spa_client.get("/about")
    assert res.status_code == 200
    assert "<h1>spa</h1>" in res.text


def test_api_routes_take_precedence(spa_client):
    res = spa_client.get("/api/health")
    assert res.json() == {"status": "ok"}


def test_static_serving_can_be_disabled(monkeypatch, container, static_dir):
    monkeypatch.setattr(Config, "SERVE_STATIC", False)
    monkeypatch.setattr(Config, "STATIC_DIR", str(static_dir))

    with TestClient(create_fastapi_app(container=container)) as client:
        assert client.get("/about").status_code == 404


def test_missing_static_dir_is_skipped(monkeypatch, container, tmp_path):
    monkeypatch.setattr(Config, "SERVE_STATIC", True)
    monkeypatch.setattr(Config, "STATIC_DIR", str(tmp_path / "missing"))

    with TestClient(create_fastapi_app(container=container)) as client:
        assert client.get("/api/health").status_code == 200
        assert client.get("/about").status_code == 404
