"""
HTTP tests for serving the built client from CLIENT_DIST_DIR.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import create_app

INDEX_HTML = "<!doctype html><div id=\"root\"></div>"


@pytest.fixture
def dist_dir(tmp_path):
    (tmp_path / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "app.js").write_text("console.log('app')", encoding="utf-8")
    return tmp_path


@pytest.fixture
def client_with_dist(settings, provider, dist_dir):
    app = create_app(settings.model_copy(update={"CLIENT_DIST_DIR": str(dist_dir)}), generation_client=provider)
    with TestClient(app) as test_client:
        yield test_client


@pytest.mark.parametrize("path", ["/", "/login", "/register", "/some/deep/link"])
def test_client_routes_fall_back_to_index(client_with_dist, path):
    response = client_with_dist.get(path)

    assert response.status_code == 200
    assert response.text == INDEX_HTML


def test_existing_asset_is_served(client_with_dist):
    response = client_with_dist.get("/assets/app.js")

    assert response.status_code == 200
    assert response.text == "console.log('app')"


def test_paths_outside_dist_get_index(client_with_dist):
    response = client_with_dist.get("/..%2F..%2Fetc%2Fpasswd")

    assert response.status_code == 200
    assert response.text == INDEX_HTML


def test_api_and_health_take_precedence(client_with_dist):
    assert client_with_dist.get("/health").json()["status"] == "healthy"

    response = client_with_dist.post(
        "/api/auth/login", json={"email": "ghost@x.com", "password": "pw123"}
    )
    assert response.json() == {"error": "User not found"}


def test_no_client_routes_without_dist(client):
    assert client.get("/login").status_code == 404
