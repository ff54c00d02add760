from fastapi.testclient import TestClient

import hithere.main as main_module
from hithere import dependencies as deps
from hithere.main import app
from tests.conftest import FakePostsService, make_catalog


def test_root_endpoint_runs_lifespan(monkeypatch):
    loaded = []

    def fake_get_catalog():
        loaded.append(True)
        return make_catalog({"tech": []})

    monkeypatch.setattr(main_module, "get_catalog", fake_get_catalog)

    with TestClient(app) as client:
        res = client.get("/")
        assert res.status_code == 200
        assert res.json() == {"message": "Hi There API is running"}

    assert loaded == [True]


def test_posts_routes_are_mounted(monkeypatch):
    monkeypatch.setattr(main_module, "get_catalog", lambda: make_catalog({}))

    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_posts_service] = lambda: FakePostsService(
        categories_return=["tech"]
    )
    try:
        with TestClient(app) as client:
            res = client.get("/categories")
            assert res.status_code == 200
            assert res.json() == ["tech"]
    finally:
        app.dependency_overrides = original_overrides
