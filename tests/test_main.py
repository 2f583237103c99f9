from fastapi.testclient import TestClient

from folio import dependencies as deps
from folio.main import app
from folio.schemas.meta import SiteDefaults
from tests.conftest import FakePostsService


def test_healthz_runs_lifespan():
    with TestClient(app) as client:
        res = client.get("/healthz")
        assert res.status_code == 200
        assert res.json() == {"message": "folio is running"}


def test_app_serves_pages_and_api():
    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_posts_service] = lambda: FakePostsService()
    app.dependency_overrides[deps.get_site_defaults] = lambda: SiteDefaults(
        title="Main Site"
    )
    try:
        with TestClient(app) as client:
            res = client.get("/")
            assert res.status_code == 200
            assert "<title>Main Site</title>" in res.text

            res = client.get("/api/posts")
            assert res.status_code == 200
            assert res.json() == []
    finally:
        app.dependency_overrides = original_overrides
